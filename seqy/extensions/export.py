from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Sequence


class ExportAccessor(Generic[T]):
    """converts a sequence into numpy and pandas containers. each call drains one session."""

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence.to_list(), dtype=dtype)

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence.to_list(), name=name)

    def frame(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe; elements become rows"""
        return pd.DataFrame(self._sequence.to_list(), columns=columns)
