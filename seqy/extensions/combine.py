from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..utils import less_or_equal

if typing.TYPE_CHECKING:
    from ..enumerable import Sequence

# marks an exhausted side in the two-cursor algorithms below
_DONE = object()


class _CombineOperations(Generic[T]):
    def chain(self: 'Sequence[T]', other: Iterable[T]) -> 'Sequence[T]':
        """continue with the elements of another iterable"""
        from ..enumerable import Sequence
        return Sequence(lambda: chain(self._session(), other))

    def concat(self: 'Sequence[T]', *others: Iterable[T]) -> 'Sequence[T]':
        """continue with the elements of each iterable in turn"""
        from ..enumerable import Sequence
        return Sequence(lambda: chain(self._session(), *others))

    def append(self: 'Sequence[T]', element: T) -> 'Sequence[T]':
        """appends a single value to the end of the sequence"""
        from ..enumerable import Sequence
        return Sequence(lambda: chain(self._session(), (element,)))

    def prepend(self: 'Sequence[T]', element: T) -> 'Sequence[T]':
        """adds a single value to the beginning of the sequence"""
        from ..enumerable import Sequence
        return Sequence(lambda: chain((element,), self._session()))

    def zip(self: 'Sequence[T]', other: Iterable[U]) -> 'Sequence[Tuple[T, U]]':
        """pair elements by position, stopping at the shorter side"""
        from ..enumerable import Sequence
        return Sequence(lambda: zip(self._session(), other))

    def zip_with(self: 'Sequence[T]', other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Sequence[V]':
        """zip two sequences with custom result selector"""
        from ..enumerable import Sequence
        return Sequence(lambda: map(result_selector, self._session(), other))

    def interleave(self: 'Sequence[T]', other: Iterable[T]) -> 'Sequence[T]':
        """alternate elements from both sides; once one runs out the other continues alone"""
        from ..enumerable import Sequence
        def interleave_session():
            left, right = self._session(), iter(other)
            a, b = next(left, _DONE), next(right, _DONE)
            while a is not _DONE or b is not _DONE:
                if a is not _DONE:
                    yield a
                    a = next(left, _DONE)
                if b is not _DONE:
                    yield b
                    b = next(right, _DONE)
        return Sequence(interleave_session)

    def interleave_shortest(self: 'Sequence[T]', other: Iterable[T]) -> 'Sequence[T]':
        """alternate elements strictly in pairs, stopping when either side has no next element"""
        from ..enumerable import Sequence
        def interleave_shortest_session():
            left, right = self._session(), iter(other)
            a, b = next(left, _DONE), next(right, _DONE)
            while a is not _DONE and b is not _DONE:
                yield a
                a = next(left, _DONE)
                yield b
                b = next(right, _DONE)
        return Sequence(interleave_shortest_session)

    def intersperse(self: 'Sequence[T]', separator: Union[T, Callable[[], T]]) -> 'Sequence[T]':
        """
        insert a separator between consecutive elements.
        a callable separator is called for every insertion.
        """
        from ..enumerable import Sequence
        make_separator = separator if callable(separator) else lambda: separator
        def intersperse_session():
            first = True
            for item in self._session():
                if not first:
                    yield make_separator()
                yield item
                first = False
        return Sequence(intersperse_session)

    def merge(self: 'Sequence[T]', other: Iterable[T]) -> 'Sequence[T]':
        """merge with another ascending iterable; equal elements keep this side first"""
        return self.merge_by(other, less_or_equal)

    def merge_by(self: 'Sequence[T]', other: Iterable[T], is_first: Callable[[T, T], bool]) -> 'Sequence[T]':
        """
        two-pointer merge of two already sorted inputs (o(n + m)).
        the left element is emitted while is_first(left, right) holds, otherwise the right one.
        the result is unspecified if either input is not sorted.
        """
        from ..enumerable import Sequence
        def merge_session():
            left, right = self._session(), iter(other)
            a, b = next(left, _DONE), next(right, _DONE)
            while a is not _DONE and b is not _DONE:
                if is_first(a, b):
                    yield a
                    a = next(left, _DONE)
                else:
                    yield b
                    b = next(right, _DONE)
            # at most one side still has elements
            if a is not _DONE:
                yield a
                yield from left
            if b is not _DONE:
                yield b
                yield from right
        return Sequence(merge_session)

    def merge_by_key(self: 'Sequence[T]', other: Iterable[T], key_selector: KeySelector[T, K]) -> 'Sequence[T]':
        """merge two inputs sorted ascending by key"""
        return self.merge_by(other, lambda a, b: key_selector(a) <= key_selector(b))
