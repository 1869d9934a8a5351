import typing
import pandas as pd
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def _from_list(items: List[T]) -> 'Sequence[T]':
    """link a list back to front so the first item ends up at the head"""
    from .sequence import Sequence
    cells = None
    for item in reversed(items):
        cells = Cell(item, cells)
    return Sequence(cells)

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence from a finite iterable, sequences are returned as they are"""
    from .sequence import Sequence
    if isinstance(data, Sequence):
        return data
    return _from_list(list(data))

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    return _from_list(list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    return _from_list([item] * count)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence()

def generate(generator_func: Callable[[], T], count: int) -> 'Sequence[T]':
    """generate sequence using a function"""
    return _from_list([generator_func() for _ in range(count)])

def from_records(frame: pd.DataFrame) -> 'Sequence[Dict[str, Any]]':
    """create sequence of row dicts from a dataframe, in row order"""
    return _from_list(frame.to_dict(orient="records"))

# --- aliases ---
seq = from_iterable
P = from_iterable
