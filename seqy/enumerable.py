from __future__ import annotations

from .types import *

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.combine import _CombineOperations
from .extensions.grouping import _GroupingOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.export import ExportAccessor

# --- base sequence implementation ---

class _BaseSequence(Generic[T]):
    def __init__(self, factory: SessionFactory[T]):
        """init with a function that opens a fresh iterator each time it is called"""
        self._factory = factory

    def _session(self) -> Iterator[T]:
        """open one single-use iteration session"""
        return iter(self._factory())

    def __iter__(self) -> Iterator[T]:
        return self._session()

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T],
    _CombineOperations[T],
    _GroupingOperations[T],
    _TerminalOperations[T]
):
    """
    a restartable lazy sequence. adapters return new sequences that derive
    their sessions from this one; consumers drain a single session.
    """
    def __init__(self, factory: SessionFactory[T]):
        super().__init__(factory)
        # --- initialize accessors ---
        self.to = ExportAccessor(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        # never drains: the sequence may be infinite
        return f"Sequence({getattr(self._factory, '__qualname__', self._factory)!s})"
