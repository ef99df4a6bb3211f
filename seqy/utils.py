from __future__ import annotations
import asyncio
import logging
import math
import numbers
import re
import types
import weakref
from collections.abc import Iterable, Iterator, Mapping
from concurrent import futures

import numpy as np
import pandas as pd
from returns.pipeline import is_successful

from .errors import ValidationError

logger = logging.getLogger(__name__)

# objects whose contents cannot be compared without consuming or awaiting them
_INCOMPARABLE_KINDS = (
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    futures.Future,
    asyncio.Future,
    weakref.ref,
    Iterator,
)

_SCALAR_ITERABLES = (str, bytes, bytearray)


def identity(value):
    return value


def less_or_equal(a, b) -> bool:
    return a <= b


# --- capability checks ---

def is_iterable(value) -> bool:
    """true for containers and iterators that should be replayed element by element.
    strings, byte strings and mappings count as single values."""
    return isinstance(value, Iterable) and not isinstance(value, (*_SCALAR_ITERABLES, Mapping))


def is_maybe(value) -> bool:
    """true for optional-like containers: anything that can be unwrapped or defaulted."""
    return callable(getattr(value, 'unwrap', None)) and callable(getattr(value, 'value_or', None))


def is_present(value) -> bool:
    """true when an optional-like container holds a value."""
    return is_successful(value)


def is_absent(value) -> bool:
    """true for None and for optional-like containers without a value."""
    return value is None or (is_maybe(value) and not is_present(value))


# --- deep equality ---

def equal(a, b) -> bool:
    """
    structural equality over the shapes python code usually nests:
    sequences, mappings, sets, buffers, numpy and pandas containers,
    patterns, exceptions and plain objects. values of different exact
    types are never equal. generators, futures, weak references and other
    one-shot objects only equal themselves.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if isinstance(a, float):
        return a == b or (math.isnan(a) and math.isnan(b))
    if isinstance(a, _INCOMPARABLE_KINDS):
        return False

    from .enumerable import Sequence
    if isinstance(a, Sequence):
        return _equal_iterables(iter(a), iter(b))

    if isinstance(a, np.ndarray):
        if a.dtype != b.dtype or a.shape != b.shape:
            return False
        return bool(np.array_equal(a, b, equal_nan=a.dtype.kind in 'fc'))
    if isinstance(a, (pd.Series, pd.DataFrame, pd.Index)):
        return bool(a.equals(b))

    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping):
        return a.keys() == b.keys() and all(equal(a[key], b[key]) for key in a)
    if isinstance(a, (set, frozenset)):
        return a == b
    if isinstance(a, memoryview):
        return a.format == b.format and a.shape == b.shape and a.tobytes() == b.tobytes()
    if isinstance(a, re.Pattern):
        return a.pattern == b.pattern and a.flags == b.flags
    if isinstance(a, BaseException):
        return equal(a.args, b.args)

    # classes without their own __eq__ compare by attributes
    if type(a).__eq__ is object.__eq__ and hasattr(a, '__dict__'):
        return equal(vars(a), vars(b))
    return bool(a == b)


def same_value(a, b) -> bool:
    """identity or ==, treating any two NaNs as the same value."""
    if a is b:
        return True
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return bool(a == b)


def _equal_iterables(left: Iterator, right: Iterator) -> bool:
    sentinel = object()
    while True:
        a, b = next(left, sentinel), next(right, sentinel)
        if a is sentinel or b is sentinel:
            return a is b
        if not equal(a, b):
            return False


# --- per-session membership ---

class SeenKeys:
    """
    tracks keys already produced in one iteration session.
    hashable keys go to a set; unhashable ones fall back to an equality scan.
    """

    def __init__(self):
        self._hashed = set()
        self._unhashable = []

    def add(self, key) -> bool:
        """records the key, returning false if it had been seen before."""
        try:
            if key in self._hashed:
                return False
            self._hashed.add(key)
        except TypeError:
            if any(equal(key, seen) for seen in self._unhashable):
                return False
            self._unhashable.append(key)
        return True


# --- validation guards ---

def _fail(expectation: str, operation: str, value) -> None:
    logger.debug("rejected %r in %s: expected %s", value, operation, expectation)
    raise ValidationError(expectation, operation, value)


def assert_non_negative(value, operation: str) -> None:
    if not isinstance(value, numbers.Real) or value < 0:
        _fail('non-negative', operation, value)


def assert_integer(value, operation: str) -> None:
    if isinstance(value, bool):
        _fail('integer', operation, value)
    if isinstance(value, numbers.Integral):
        return
    if not (isinstance(value, float) and value.is_integer()):
        _fail('integer', operation, value)


def assert_non_zero(value, operation: str) -> None:
    if value == 0:
        _fail('non-zero', operation, value)
