from __future__ import annotations
import typing
from ..types import *
from ..logger import logger

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class GroupingAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def _keyed(self, key_selector: KeySelector[T, K]) -> 'Sequence[Tuple[K, T]]':
        """(key, item) pairs in original order, one key call per element"""
        from ..sequence import Sequence
        reversed_pairs = self._sequence.fold(lambda acc, item: Cell((key_selector(item), item), acc), None)
        return Sequence(reversed_pairs).reverse()

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, 'Sequence[T]']:
        """
        group elements by a key. keys keep first-encounter order and every
        group keeps the original relative order of its elements.
        """
        from ..sequence import Sequence
        # o(1) per element: each group is a reversed chain, flipped once at the end
        reversed_groups = {}
        for key, item in self._keyed(key_selector):
            reversed_groups[key] = Cell(item, reversed_groups.get(key))
        return {key: Sequence(cells).reverse() for key, cells in reversed_groups.items()}

    def index_by(self, key_selector: KeySelector[T, K]) -> Dict[K, T]:
        """map each key to the last element that produced it"""
        index = {}
        for key, item in self._keyed(key_selector):
            index[key] = item
        return index

    def count_by(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """count elements per key"""
        return {key: group.to.size() for key, group in self.group_by(key_selector).items()}

    def partition(self, predicate: Predicate[T]) -> Tuple['Sequence[T]', 'Sequence[T]']:
        """split into (matching, rest), both in original order"""
        from ..sequence import Sequence
        groups = self.group_by(lambda item: bool(predicate(item)))

        matching, rest = groups.get(True), groups.get(False)
        if matching is None:
            logger.debug("partition: no element satisfied the predicate")
            matching = Sequence()
        if rest is None:
            logger.debug("partition: every element satisfied the predicate")
            rest = Sequence()
        return matching, rest
