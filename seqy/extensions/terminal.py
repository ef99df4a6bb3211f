from __future__ import annotations
import typing
from functools import reduce
from itertools import islice
from types import SimpleNamespace
from returns.maybe import Maybe, Some, Nothing
from ..types import *
from ..utils import (
    SeenKeys, identity, is_absent, is_iterable, is_maybe,
    assert_integer, assert_non_negative
)

if typing.TYPE_CHECKING:
    from ..enumerable import Sequence

_DONE = object()


def _as_ordering(result: Union[Ordering, int]) -> Ordering:
    """accepts an ordering or a classic negative/zero/positive comparison result"""
    if isinstance(result, Ordering):
        return result
    return Ordering((result > 0) - (result < 0))


def _found(value) -> Maybe:
    return Nothing if value is _DONE else Some(value)


class _TerminalOperations(Generic[T]):
    # --- collection ---

    def to_list(self: 'Sequence[T]') -> List[T]:
        """convert to list"""
        return list(self._session())

    def to_set(self: 'Sequence[T]') -> Set[T]:
        """convert to set"""
        return set(self._session())

    def to_map(self: 'Sequence[T]', to_entry: Callable[[T], Tuple[K, V]]) -> Dict[K, V]:
        """convert to dictionary from (key, value) entries; later keys overwrite earlier ones"""
        return dict(map(to_entry, self._session()))

    def to_object(self: 'Sequence[T]', to_entry: Callable[[T], Tuple[str, V]]) -> SimpleNamespace:
        """convert to a namespace whose attributes come from (name, value) entries; names go through str()"""
        return SimpleNamespace(**{str(key): value for key, value in self.to_map(to_entry).items()})

    def join(self: 'Sequence[T]', separator: str) -> str:
        """render every element with str() and join them"""
        return separator.join(map(str, self._session()))

    def to_string(self: 'Sequence[T]') -> str:
        from ..config import settings
        return f"[{self.join(settings().string_separator)}]"

    # --- reduction ---

    def count(self: 'Sequence[T]') -> int:
        """count elements"""
        return sum(1 for _ in self._session())

    def each(self: 'Sequence[T]', action: Callable[[T], Any]) -> None:
        """run an action on every element. this is an EAGER operation."""
        for item in self._session():
            action(item)

    def reduce(self: 'Sequence[T]', accumulator: Accumulator[U, T], initial: U) -> U:
        """applies accumulator function over sequence, starting from initial"""
        return reduce(accumulator, self._session(), initial)

    def every(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; stops at the first failure"""
        return all(predicate(x) for x in self._session())

    def some(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if any element satisfies condition; stops at the first match"""
        return any(predicate(x) for x in self._session())

    def is_empty(self: 'Sequence[T]') -> bool:
        return next(self._session(), _DONE) is _DONE

    def is_unique(self: 'Sequence[T]') -> bool:
        return self.is_unique_by_key(identity)

    def is_unique_by_key(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> bool:
        """true when no two elements share a key; stops at the first duplicate"""
        seen = SeenKeys()
        return all(seen.add(key_selector(x)) for x in self._session())

    # --- search ---

    def find(self: 'Sequence[T]', predicate: Predicate[T]) -> Maybe[T]:
        """first element matching the predicate"""
        return _found(next((x for x in self._session() if predicate(x)), _DONE))

    def find_index(self: 'Sequence[T]', predicate: Predicate[T]) -> Maybe[int]:
        """index of the first element matching the predicate"""
        return _found(next((i for i, x in enumerate(self._session()) if predicate(x)), _DONE))

    def find_map(self: 'Sequence[T]', selector: Callable[[T], Any]) -> Maybe[U]:
        """
        first result of selector that is neither None nor an empty optional.
        optional results are returned as they are, plain values get wrapped.
        """
        for item in self._session():
            result = selector(item)
            if is_absent(result):
                continue
            return result if is_maybe(result) else Some(result)
        return Nothing

    def first(self: 'Sequence[T]') -> Maybe[T]:
        return _found(next(self._session(), _DONE))

    def last(self: 'Sequence[T]') -> Maybe[T]:
        last = _DONE
        for last in self._session():
            pass
        return _found(last)

    def nth(self: 'Sequence[T]', index: int) -> Maybe[T]:
        """element at a zero-based index, scanning from the start"""
        assert_non_negative(index, 'nth')
        assert_integer(index, 'nth')
        return _found(next(islice(self._session(), int(index), None), _DONE))

    # --- ordering ---

    def min(self: 'Sequence[T]') -> Maybe[T]:
        """find minimum; the earliest of equal minima wins"""
        return self.min_by(Ordering.of)

    def max(self: 'Sequence[T]') -> Maybe[T]:
        """find maximum; the latest of equal maxima wins"""
        return self.max_by(Ordering.of)

    def min_by(self: 'Sequence[T]', comparator: Callable[[T, T], Union[Ordering, int]]) -> Maybe[T]:
        best = _DONE
        for item in self._session():
            if best is _DONE or _as_ordering(comparator(item, best)) is Ordering.LESS:
                best = item
        return _found(best)

    def max_by(self: 'Sequence[T]', comparator: Callable[[T, T], Union[Ordering, int]]) -> Maybe[T]:
        best = _DONE
        for item in self._session():
            if best is _DONE or _as_ordering(comparator(item, best)) is not Ordering.LESS:
                best = item
        return _found(best)

    def min_by_key(self: 'Sequence[T]', key_selector: KeySelector[T, Any]) -> Maybe[T]:
        return self.min_by(lambda a, b: Ordering.of(key_selector(a), key_selector(b)))

    def max_by_key(self: 'Sequence[T]', key_selector: KeySelector[T, Any]) -> Maybe[T]:
        return self.max_by(lambda a, b: Ordering.of(key_selector(a), key_selector(b)))

    # --- comparison ---

    def eq(self: 'Sequence[T]', other: Iterable[T]) -> bool:
        """element-wise deep equality with another iterable of the same length"""
        from ..config import settings
        return self.eq_by(other, settings().equal)

    def eq_by(self: 'Sequence[T]', other: Iterable[T], comparer: EqualityComparer[T]) -> bool:
        """
        true when both sides end together and every pair satisfies the comparer.
        strings, bytes, mappings and other non-iterables are never equal to a sequence.
        """
        if not is_iterable(other):
            return False
        left, right = self._session(), iter(other)
        while True:
            a, b = next(left, _DONE), next(right, _DONE)
            if a is _DONE or b is _DONE:
                return a is b
            if not comparer(a, b):
                return False

    def ne(self: 'Sequence[T]', other: Iterable[T]) -> bool:
        from ..config import settings
        equal = settings().equal
        return self.ne_by(other, lambda a, b: not equal(a, b))

    def ne_by(self: 'Sequence[T]', other: Iterable[T], differs: EqualityComparer[T]) -> bool:
        """true as soon as a pair differs or one side ends first"""
        if not is_iterable(other):
            return True
        left, right = self._session(), iter(other)
        while True:
            a, b = next(left, _DONE), next(right, _DONE)
            if a is _DONE or b is _DONE:
                return a is not b
            if differs(a, b):
                return True
