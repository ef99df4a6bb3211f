import typing
from collections.abc import Mapping
from itertools import count as _count, repeat as _repeat
from .types import *
from .utils import is_iterable, assert_integer, assert_non_negative, assert_non_zero

if typing.TYPE_CHECKING:
    from .enumerable import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """
    create a sequence replaying an iterable. every session calls iter() on the
    source again, so lists and other containers replay; generators replay once.
    """
    from .enumerable import Sequence
    return Sequence(lambda: iter(data))

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .enumerable import Sequence
    return Sequence(lambda: iter(()))

def once(value: T) -> 'Sequence[T]':
    """create a sequence holding a single value"""
    from .enumerable import Sequence
    return Sequence(lambda: iter((value,)))

def of(value: Union[None, T, Iterable[T]] = None) -> 'Sequence[T]':
    """
    create a sequence from anything: None gives an empty sequence, an iterable is
    replayed element by element, any other value is yielded once.
    strings, bytes and mappings count as single values.
    """
    if value is None:
        return empty()
    if is_iterable(value):
        return from_iterable(value)
    return once(value)

def repeat_forever(value: Union[T, Callable[[], T]]) -> 'Sequence[T]':
    """
    create an infinite sequence. a callable is called for every element, which
    gives each element its own fresh object; other values are repeated as-is.
    """
    from .enumerable import Sequence
    if callable(value):
        def supply_session():
            while True:
                yield value()
        return Sequence(supply_session)
    return Sequence(lambda: _repeat(value))

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    from .enumerable import Sequence
    assert_non_negative(count, 'repeat')
    assert_integer(count, 'repeat')
    count = int(count)
    return Sequence(lambda: _repeat(item, count))

def generate(generator_func: Callable[[], T], count: int) -> 'Sequence[T]':
    """generate sequence using a function"""
    assert_non_negative(count, 'generate')
    assert_integer(count, 'generate')
    return repeat_forever(generator_func).take(count)

def from_range(start: Union[int, Mapping] = 0, end: Optional[int] = None, step: int = 1) -> 'Sequence[int]':
    """
    ascending integers start, start + step, ... while below end.
    accepts positional bounds or a single mapping with optional 'start', 'end' and
    'step' keys. without an end the sequence is infinite.
    """
    from .enumerable import Sequence
    if isinstance(start, Mapping):
        return from_range(start.get('start', 0), start.get('end'), start.get('step', 1))

    assert_integer(start, 'from_range')
    if end is not None:
        assert_integer(end, 'from_range')
    assert_integer(step, 'from_range')
    assert_non_zero(step, 'from_range')
    assert_non_negative(step, 'from_range')
    start, step = int(start), int(step)

    if end is None:
        return Sequence(lambda: _count(start, step))
    end = int(end)
    return Sequence(lambda: iter(range(start, end, step)))

def is_sequence(value: Any) -> bool:
    from .enumerable import Sequence
    return isinstance(value, Sequence)

# --- aliases ---
seq = of
S = of
