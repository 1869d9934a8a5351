from __future__ import annotations
import typing
from ..types import *
from ..types import _MISSING

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def _read_property(item: Any, key: Any, default: Any) -> Any:
    """mappings are read by key, anything else by attribute"""
    if isinstance(item, Mapping):
        return item.get(key, default)
    # only strings can name an attribute
    if not isinstance(key, str):
        return default
    return getattr(item, key, default)


def _matches(properties: PropertyMap) -> Predicate[Any]:
    """
    build a predicate that holds when every (key, value) pair of properties
    is present on the element. values are compared with ==, so they need
    not be hashable.
    """
    expected = tuple(properties.items())

    def predicate(item: Any) -> bool:
        for key, value in expected:
            actual = _read_property(item, key, _MISSING)
            if actual is _MISSING or not actual == value:
                return False
        return True

    return predicate


class PropertyAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def where(self, properties: PropertyMap) -> 'Sequence[T]':
        """elements carrying every key/value pair in properties"""
        return self._sequence.filter(_matches(properties))

    def find_where(self, properties: PropertyMap) -> Union[T, Any]:
        """first element carrying every key/value pair in properties, or NOT_FOUND"""
        return self._sequence.to.find(_matches(properties))

    def pluck(self, key: str) -> 'Sequence[Any]':
        """read one property from every element, none where it is missing"""
        return self._sequence.map(lambda item: _read_property(item, key, None))
