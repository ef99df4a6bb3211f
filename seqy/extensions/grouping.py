from __future__ import annotations
import typing
from collections import defaultdict
from itertools import islice, filterfalse
from types import SimpleNamespace
from ..types import *
from ..utils import (
    SeenKeys, identity, same_value,
    assert_integer, assert_non_negative, assert_non_zero
)

if typing.TYPE_CHECKING:
    from ..enumerable import Sequence

_DONE = object()


class _GroupingOperations(Generic[T]):
    def chunks(self: 'Sequence[T]', size: int) -> 'Sequence[Sequence[T]]':
        """split into consecutive chunks of specified size; the last one may be shorter"""
        from ..enumerable import Sequence
        from ..factories import from_iterable
        assert_non_negative(size, 'chunks')
        assert_integer(size, 'chunks')
        assert_non_zero(size, 'chunks')
        size = int(size)

        def chunks_session():
            iterator = self._session()
            while chunk := list(islice(iterator, size)):
                yield from_iterable(chunk)

        return Sequence(chunks_session)

    def partition(self: 'Sequence[T]', predicate: Predicate[T]) -> Tuple['Sequence[T]', 'Sequence[T]']:
        """
        split into (matching, non_matching). both halves stay lazy and each one
        drains its own upstream session, so the source is iterated once per half.
        """
        from ..enumerable import Sequence
        return (
            Sequence(lambda: filter(predicate, self._session())),
            Sequence(lambda: filterfalse(predicate, self._session()))
        )

    def dedup(self: 'Sequence[T]') -> 'Sequence[T]':
        """collapse runs of deeply equal consecutive elements to their first element"""
        from ..config import settings
        return self.dedup_by(lambda a, b: settings().equal(a, b))

    def dedup_by(self: 'Sequence[T]', same_bucket: EqualityComparer[T]) -> 'Sequence[T]':
        """collapse runs of consecutive elements that same_bucket considers equal"""
        from ..enumerable import Sequence
        def dedup_session():
            previous = _DONE
            for item in self._session():
                if previous is _DONE or not same_bucket(previous, item):
                    yield item
                    previous = item
        return Sequence(dedup_session)

    def dedup_by_key(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> 'Sequence[T]':
        """collapse runs of consecutive elements sharing the same key (identity or ==; NaN keys match)"""
        return self.dedup_by(lambda a, b: same_value(key_selector(a), key_selector(b)))

    def unique(self: 'Sequence[T]') -> 'Sequence[T]':
        """keep the first occurrence of every element. preserves order of first appearance."""
        return self.unique_by_key(identity)

    def unique_by_key(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> 'Sequence[T]':
        """keep the first element for every key; memory grows with the number of distinct keys"""
        from ..enumerable import Sequence
        def unique_session():
            seen = SeenKeys()
            for item in self._session():
                if seen.add(key_selector(item)):
                    yield item
        return Sequence(unique_session)

    def with_position(self: 'Sequence[T]') -> 'Sequence[Tuple[Position, T]]':
        """tag every element as first, middle, last, or the only one, looking one element ahead"""
        from ..enumerable import Sequence
        def with_position_session():
            iterator = self._session()
            current = next(iterator, _DONE)
            if current is _DONE:
                return
            following = next(iterator, _DONE)
            if following is _DONE:
                yield Position.ONLY, current
                return

            yield Position.FIRST, current
            current = following
            for following in iterator:
                yield Position.MIDDLE, current
                current = following
            yield Position.LAST, current
        return Sequence(with_position_session)

    def group_to_map(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> Dict[K, 'Sequence[T]']:
        """group elements by key. keys keep the order of their first element."""
        from ..factories import from_iterable
        groups = defaultdict(list)
        for item in self._session():
            groups[key_selector(item)].append(item)
        return {key: from_iterable(items) for key, items in groups.items()}

    def group_to_object(self: 'Sequence[T]', key_selector: Callable[[T], str]) -> SimpleNamespace:
        """group elements under attribute names; non-string keys are rendered with str()"""
        return SimpleNamespace(**{str(key): group for key, group in self.group_to_map(key_selector).items()})

