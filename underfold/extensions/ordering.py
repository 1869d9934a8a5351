from __future__ import annotations
import typing
from ..types import *
from .core import identity

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def _insert(sorted_cells: Optional[Cell], key: Any, item: Any) -> Cell:
    """
    insert (key, item) into an ascending chain of (key, item) cells.
    walks past every key that is not greater than the new one, so an item
    lands after its equals and ties keep their original order.
    """
    walked = None
    cell = sorted_cells
    while cell is not None and not cell.head[0] > key:
        walked = Cell(cell.head, walked)
        cell = cell.tail

    # rebuild the walked prefix in front of the new cell, the rest is shared
    result = Cell((key, item), cell)
    while walked is not None:
        result = Cell(walked.head, result)
        walked = walked.tail
    return result


class _OrderingOperations(Generic[T]):
    __slots__ = ()

    def sort(self: 'Sequence[T]', key_selector: KeySelector[T, K] = identity) -> 'Sequence[T]':
        """
        stable ascending insertion sort by key (o(n^2)).
        each key is computed once, elements with equal keys keep their relative order.
        """
        from ..sequence import Sequence
        sorted_cells = None
        cell = self._get_cells()
        while cell is not None:
            sorted_cells = _insert(sorted_cells, key_selector(cell.head), cell.head)
            cell = cell.tail
        return Sequence(sorted_cells).map(lambda pair: pair[1])
