from typing import Any


class SeqyError(Exception):
    """base class for errors raised by seqy itself."""
    pass


class ValidationError(SeqyError, ValueError):
    """a numeric argument broke its contract (non-negative, integer, non-zero)."""

    def __init__(self, expectation: str, operation: str, value: Any):
        self.expectation = expectation
        self.operation = operation
        self.value = value
        super().__init__(f"expected {expectation} in {operation}, but got {value!r}")


class OrderingError(SeqyError, ValueError):
    """a pair of bounds was given in the wrong order."""

    def __init__(self, operation: str, start: Any, end: Any):
        self.operation = operation
        self.start = start
        self.end = end
        super().__init__(f"start index must not be greater than end index in {operation}, got {start} > {end}")
