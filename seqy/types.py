from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
EqualityComparer = Callable[[T, T], bool]
SessionFactory = Callable[[], Iterator[T]]


class Position(Enum):
    """structural role of an element inside a finite sequence"""
    FIRST = 'first'
    MIDDLE = 'middle'
    LAST = 'last'
    ONLY = 'only'

    def __repr__(self) -> str:
        return f"Position.{self.name}"


class Ordering(Enum):
    """tri-state result of comparing two values"""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Any, b: Any) -> 'Ordering':
        """compare two values with the natural < and > operators"""
        if a < b: return cls.LESS
        if a > b: return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> 'Ordering':
        return Ordering(-self.value)

    def __repr__(self) -> str:
        return f"Ordering.{self.name}"


Comparator = Callable[[T, T], Ordering]
