from __future__ import annotations
import logging
import typing
from itertools import islice, takewhile, dropwhile
from ..types import *
from ..errors import OrderingError
from ..utils import (
    identity, is_absent, is_iterable, is_maybe,
    assert_integer, assert_non_negative, assert_non_zero
)

if typing.TYPE_CHECKING:
    from ..enumerable import Sequence

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    def map(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..enumerable import Sequence
        return Sequence(lambda: map(selector, self._session()))

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep the elements matching the predicate"""
        from ..enumerable import Sequence
        return Sequence(lambda: filter(predicate, self._session()))

    def filter_map(self: 'Sequence[T]', selector: Callable[[T], Any]) -> 'Sequence[U]':
        """
        map and filter in one pass. a result of None or an empty optional drops
        the element, a present optional is unwrapped, anything else is kept.
        """
        from ..enumerable import Sequence
        def filter_map_session():
            for item in self._session():
                result = selector(item)
                if is_absent(result):
                    continue
                yield result.unwrap() if is_maybe(result) else result
        return Sequence(filter_map_session)

    def compact(self: 'Sequence[T]') -> 'Sequence[Any]':
        """drop None and empty optionals, unwrapping present ones"""
        return self.filter_map(identity)

    def enumerate(self: 'Sequence[T]', start: int = 0) -> 'Sequence[Tuple[int, T]]':
        """pair each element with its index"""
        from ..enumerable import Sequence
        return Sequence(lambda: enumerate(self._session(), start))

    def inspect(self: 'Sequence[T]', action: Callable[[T], Any]) -> 'Sequence[T]':
        """
        runs a side-effect for each element as it passes through, without changing it.
        the action runs once per element every time a session is drained.
        """
        from ..enumerable import Sequence
        def inspect_session():
            for item in self._session():
                action(item)
                yield item
        return Sequence(inspect_session)

    def flat_map(self: 'Sequence[T]', selector: Selector[T, Iterable[U]]) -> 'Sequence[U]':
        """project each element to an iterable and flatten the results"""
        from ..enumerable import Sequence
        def flat_map_session():
            for item in self._session():
                yield from selector(item)
        return Sequence(flat_map_session)

    def flat(self: 'Sequence[T]', depth: int = 1) -> 'Sequence[Any]':
        """flatten nested iterables up to depth levels. depth 0 leaves the sequence unchanged."""
        from ..enumerable import Sequence
        assert_non_negative(depth, 'flat')
        assert_integer(depth, 'flat')
        depth = int(depth)

        def flatten(items, depth_left):
            for item in items:
                if depth_left > 0 and is_iterable(item):
                    yield from flatten(item, depth_left - 1)
                else:
                    yield item

        return Sequence(lambda: flatten(self._session(), depth))

    def scan(self: 'Sequence[T]', accumulator: Callable[[U, T], Any], initial: U) -> 'Sequence[U]':
        """
        emits every intermediate accumulator of a left fold.
        the accumulator may return None or an empty optional to end the scan early.
        """
        from ..enumerable import Sequence
        def scan_session():
            acc = initial
            for item in self._session():
                result = accumulator(acc, item)
                if is_absent(result):
                    return
                acc = result.unwrap() if is_maybe(result) else result
                yield acc
        return Sequence(scan_session)

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take the first 'count' elements"""
        from ..enumerable import Sequence
        assert_non_negative(count, 'take')
        assert_integer(count, 'take')
        count = int(count)
        # islice stops without pulling the element after the last one taken
        return Sequence(lambda: islice(self._session(), count))

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Sequence
        assert_non_negative(count, 'skip')
        assert_integer(count, 'skip')
        count = int(count)
        return Sequence(lambda: islice(self._session(), count, None))

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements while predicate is true"""
        from ..enumerable import Sequence
        return Sequence(lambda: takewhile(predicate, self._session()))

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Sequence
        return Sequence(lambda: dropwhile(predicate, self._session()))

    def step_by(self: 'Sequence[T]', step: int) -> 'Sequence[T]':
        """yield the first element, then every step-th element after it"""
        from ..enumerable import Sequence
        assert_non_negative(step, 'step_by')
        assert_non_zero(step, 'step_by')
        assert_integer(step, 'step_by')
        step = int(step)
        return Sequence(lambda: islice(self._session(), 0, None, step))

    def slice(self: 'Sequence[T]', start: int, end: int) -> 'Sequence[T]':
        """elements with index in [start, end)"""
        from ..enumerable import Sequence
        assert_non_negative(start, 'slice')
        assert_integer(start, 'slice')
        assert_non_negative(end, 'slice')
        assert_integer(end, 'slice')
        if start > end:
            raise OrderingError('slice', start, end)
        start, end = int(start), int(end)
        return Sequence(lambda: islice(self._session(), start, end))

    def cycle(self: 'Sequence[T]') -> 'Sequence[T]':
        """
        repeats the sequence forever by reopening a session each time one runs out.
        an empty sequence cycles to an empty sequence. bound the result with take().
        """
        from ..enumerable import Sequence
        def cycle_session():
            while True:
                produced = False
                for item in self._session():
                    produced = True
                    yield item
                if not produced:
                    return
        return Sequence(cycle_session)

    def rev(self: 'Sequence[T]') -> 'Sequence[T]':
        """
        inverts the order of the elements. each session buffers the whole upstream
        on its first pull, so this never finishes on an infinite sequence.
        """
        from ..enumerable import Sequence
        def rev_session():
            buffer = list(self._session())
            logger.debug("rev buffered %d elements", len(buffer))
            yield from reversed(buffer)
        return Sequence(rev_session)
