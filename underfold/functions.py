"""
Free-function form of the sequence algebra.

Every function takes the sequence first and accepts any finite iterable,
which is linked into a ``Sequence`` before the operation runs. Results that
are sequences come back as new ``Sequence`` objects; the input is never
modified. Several names deliberately shadow builtins (``map``, ``filter``,
``max``, ``min``), so prefer ``import underfold as u`` over star imports.
"""

from .types import *
from .types import _MISSING
from .factories import from_iterable
from .extensions.core import identity

__all__ = [
    "identity",
    "fold",
    "reverse",
    "map",
    "filter",
    "reject",
    "find",
    "contains",
    "size",
    "every",
    "some",
    "max",
    "min",
    "sort",
    "group_by",
    "index_by",
    "count_by",
    "partition",
    "where",
    "find_where",
    "pluck",
]


def fold(sequence: Iterable[T], accumulator: Accumulator[A, T], initial: A = _MISSING) -> A:
    """
    Reduce ``sequence`` left to right with ``accumulator(acc, element)``.

    Without ``initial`` the first element seeds the accumulator and an empty
    sequence raises ``EmptySequenceError``. With ``initial`` (``None`` included)
    an empty sequence returns ``initial`` unchanged.

    >>> fold([1, 2, 3], lambda acc, x: acc + x, 4)
    10
    >>> fold([1, 2, 3], lambda acc, x: acc + x)
    6
    """
    return from_iterable(sequence).fold(accumulator, initial)


def reverse(sequence):
    return from_iterable(sequence).reverse()


def map(sequence: Iterable[T], transform: Selector[T, U]):
    """``transform`` applied to every element, in order."""
    return from_iterable(sequence).map(transform)


def filter(sequence: Iterable[T], predicate: Predicate[T]):
    """Elements satisfying ``predicate``, in order."""
    return from_iterable(sequence).filter(predicate)


def reject(sequence: Iterable[T], predicate: Predicate[T]):
    """Elements failing ``predicate``, in order; the complement of ``filter``."""
    return from_iterable(sequence).reject(predicate)


def find(sequence: Iterable[T], predicate: Predicate[T]):
    """First element satisfying ``predicate``, or ``NOT_FOUND``."""
    return from_iterable(sequence).to.find(predicate)


def contains(sequence: Iterable[T], value: Any) -> bool:
    return from_iterable(sequence).to.contains(value)


def size(sequence: Iterable[T]) -> int:
    return from_iterable(sequence).to.size()


def every(sequence: Iterable[T], predicate: Predicate[T] = identity) -> bool:
    """True unless some element fails ``predicate``; vacuously true when empty."""
    return from_iterable(sequence).to.every(predicate)


def some(sequence: Iterable[T], predicate: Predicate[T] = identity) -> bool:
    """True when some element satisfies ``predicate``; false when empty."""
    return from_iterable(sequence).to.some(predicate)


def max(sequence: Iterable[T], key: KeySelector[T, K] = identity) -> T:
    """
    Element with the greatest ``key``; the first one wins ties.

    >>> max([{"num": 1}, {"num": 100}, {"num": 10}], lambda x: x["num"])
    {'num': 100}
    """
    return from_iterable(sequence).to.max(key)


def min(sequence: Iterable[T], key: KeySelector[T, K] = identity) -> T:
    """Element with the smallest ``key``; the first one wins ties."""
    return from_iterable(sequence).to.min(key)


def sort(sequence: Iterable[T], key: KeySelector[T, K] = identity):
    """
    Stable ascending insertion sort by ``key``.

    >>> sort([2, 3, 5, 4, 1, 5]).to.list()
    [1, 2, 3, 4, 5, 5]
    >>> sort([2, 3, 5, 4, 1, 5], lambda x: -x).to.list()
    [5, 5, 4, 3, 2, 1]
    """
    return from_iterable(sequence).sort(key)


def group_by(sequence: Iterable[T], classify: KeySelector[T, K]):
    """Mapping of classification key to the elements with that key, in order."""
    return from_iterable(sequence).group.group_by(classify)


def index_by(sequence: Iterable[T], classify: KeySelector[T, K]) -> Dict[K, T]:
    """Mapping of classification key to the last element with that key."""
    return from_iterable(sequence).group.index_by(classify)


def count_by(sequence: Iterable[T], classify: KeySelector[T, K]) -> Dict[K, int]:
    return from_iterable(sequence).group.count_by(classify)


def partition(sequence: Iterable[T], predicate: Predicate[T]):
    """
    ``(matching, rest)``, both in original order. A side with no elements is
    an empty sequence.

    >>> [side.to.list() for side in partition([1, 2, 3, 4, 5], lambda x: x % 2 != 0)]
    [[1, 3, 5], [2, 4]]
    """
    return from_iterable(sequence).group.partition(predicate)


def where(sequence: Iterable[T], properties: PropertyMap):
    """Elements carrying every key/value pair of ``properties``, in order."""
    return from_iterable(sequence).props.where(properties)


def find_where(sequence: Iterable[T], properties: PropertyMap):
    """First element carrying every key/value pair of ``properties``, or ``NOT_FOUND``."""
    return from_iterable(sequence).props.find_where(properties)


def pluck(sequence: Iterable[T], key: str):
    return from_iterable(sequence).props.pluck(key)
