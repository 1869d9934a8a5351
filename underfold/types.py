from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Mapping, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[A, T], A]
PropertyMap = Mapping[str, Any]


# --- errors ---

class UnderfoldError(Exception):
    """base class for every error raised by underfold"""
    pass


class EmptySequenceError(UnderfoldError, ValueError):
    """raised when an operation needs at least one element to seed from"""
    pass


# --- sentinels ---

class _NotFoundType:
    """singleton returned by find-style operations when nothing matches"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self):
        return (_NotFoundType, ())


NOT_FOUND = _NotFoundType()


class _MissingType:
    """marks an optional argument the caller did not pass"""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _MissingType()


# --- linked cells ---

class Cell(NamedTuple):
    """one link of a sequence: an element and the rest of the chain"""
    head: Any
    tail: Optional['Cell']
