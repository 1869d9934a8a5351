from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .core import identity

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class TerminalAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else identity
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- lookups ---

    def find(self, predicate: Predicate[T]) -> Union[T, Any]:
        """first element satisfying the predicate, or NOT_FOUND. stops at the first match."""
        for item in self._sequence:
            if predicate(item):
                return item
        return NOT_FOUND

    def contains(self, value: Any) -> bool:
        """check if any element equals value"""
        return self._sequence.fold(lambda found, x: found or bool(x == value), False)

    def size(self) -> int:
        """count elements"""
        return self._sequence.fold(lambda count, _: count + 1, 0)

    def every(self, predicate: Predicate[T] = identity) -> bool:
        """check that no element fails the predicate, true for an empty sequence"""
        return self._sequence.reject(predicate).is_empty

    def some(self, predicate: Predicate[T] = identity) -> bool:
        """check if any element satisfies the predicate, false for an empty sequence"""
        return self.find(predicate) is not NOT_FOUND

    # --- aggregates ---

    def max(self, key_selector: KeySelector[T, K] = identity) -> T:
        """element with the greatest key, the earliest one on ties"""
        if self._sequence.is_empty:
            raise EmptySequenceError("cannot take the max of an empty sequence")
        return self._sequence.fold(lambda best, x: x if key_selector(x) > key_selector(best) else best)

    def min(self, key_selector: KeySelector[T, K] = identity) -> T:
        """element with the smallest key, the earliest one on ties"""
        if self._sequence.is_empty:
            raise EmptySequenceError("cannot take the min of an empty sequence")
        return self._sequence.fold(lambda best, x: x if key_selector(x) < key_selector(best) else best)
