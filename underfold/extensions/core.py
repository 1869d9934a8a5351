from __future__ import annotations
import typing
from ..types import *
from ..types import _MISSING
from ..logger import logger

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def identity(x: T) -> T:
    """return the argument unchanged"""
    return x


class _CoreOperations(Generic[T]):
    __slots__ = ()

    def fold(self: 'Sequence[T]', accumulator: Accumulator[A, T], initial: A = _MISSING) -> A:
        """
        combine elements left to right into a single value.
        without an initial value the first element seeds the accumulator,
        so folding an empty sequence that way raises EmptySequenceError.
        """
        cell = self._get_cells()
        if initial is _MISSING:
            if cell is None:
                logger.debug("fold called on an empty sequence without an initial value")
                raise EmptySequenceError("cannot fold an empty sequence without an initial value")
            acc, cell = cell.head, cell.tail
        else:
            acc = initial
        # walk the chain in a loop so the stack stays flat for any length
        while cell is not None:
            acc = accumulator(acc, cell.head)
            cell = cell.tail
        return acc

    def reverse(self: 'Sequence[T]') -> 'Sequence[T]':
        """inverts the order of the elements"""
        from ..sequence import Sequence
        return Sequence(self.fold(lambda acc, x: Cell(x, acc), None))

    def map(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        reversed_cells = self.fold(lambda acc, x: Cell(selector(x), acc), None)
        return Sequence(reversed_cells).reverse()

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep the elements that satisfy the predicate"""
        from ..sequence import Sequence
        reversed_cells = self.fold(lambda acc, x: Cell(x, acc) if predicate(x) else acc, None)
        return Sequence(reversed_cells).reverse()

    def reject(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """drop the elements that satisfy the predicate"""
        from ..sequence import Sequence
        reversed_cells = self.fold(lambda acc, x: acc if predicate(x) else Cell(x, acc), None)
        return Sequence(reversed_cells).reverse()
