from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.ordering import _OrderingOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.matching import PropertyAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    __slots__ = ()

    @abstractmethod
    def _get_cells(self) -> Optional[Cell]:
        """get the first cell of the chain, none when empty"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Cell] = None):
        """init with the first cell of an already built chain"""
        if cells is not None and not isinstance(cells, Cell):
            raise TypeError("Sequence takes a linked Cell, build from data with from_iterable()")
        object.__setattr__(self, '_cells', cells)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Sequence is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Sequence is immutable, cannot delete '{name}'")

    def _get_cells(self) -> Optional[Cell]:
        return self._cells

    def __iter__(self) -> Iterator[T]:
        cell = self._cells
        while cell is not None:
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        return self.to.size()

    def __bool__(self) -> bool:
        return self._cells is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _BaseSequence):
            return NotImplemented
        left, right = self._cells, other._cells
        while left is not None and right is not None:
            if left is right:
                # shared tail, the rest is identical
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return left is None and right is None

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Sequence({list(self)!r})"

    @property
    def is_empty(self) -> bool:
        return self._cells is None

    @property
    def head(self) -> T:
        """first element"""
        if self._cells is None:
            raise EmptySequenceError("empty sequence has no head")
        return self._cells.head

    @property
    def tail(self) -> 'Sequence[T]':
        """every element after the first, sharing the same cells"""
        if self._cells is None:
            raise EmptySequenceError("empty sequence has no tail")
        return Sequence(self._cells.tail)

    def prepend(self, item: T) -> 'Sequence[T]':
        """new sequence with item in front, the receiver is left untouched"""
        return Sequence(Cell(item, self._cells))

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T],
    _OrderingOperations[T]
):
    """an immutable, singly-linked sequence whose operations all derive from fold."""
    __slots__ = ('_group', '_props', '_to')

    def __init__(self, cells: Optional[Cell] = None):
        super().__init__(cells)
        # --- initialize accessors ---
        object.__setattr__(self, '_group', GroupingAccessor(self))
        object.__setattr__(self, '_props', PropertyAccessor(self))
        object.__setattr__(self, '_to', TerminalAccessor(self))

    @property
    def group(self) -> GroupingAccessor[T]:
        return self._group

    @property
    def props(self) -> PropertyAccessor[T]:
        return self._props

    @property
    def to(self) -> TerminalAccessor[T]:
        return self._to
