r"""
'                   _            __       _     _
'    _   _ _ __   __| | ___ _ __ / _| ___ | | __| |
'   | | | | '_ \ / _` |/ _ \ '__| |_ / _ \| |/ _` |
'   | |_| | | | | (_| |  __/ |  |  _| (_) | | (_| |
'    \__,_|_| |_|\__,_|\___|_|  |_|  \___/|_|\__,_|
"""

# expose the main class
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    from_records,
    seq,
    P
)

# expose the free-function algebra
from .functions import (
    identity,
    fold,
    reverse,
    map,
    filter,
    reject,
    find,
    contains,
    size,
    every,
    some,
    max,
    min,
    sort,
    group_by,
    index_by,
    count_by,
    partition,
    where,
    find_where,
    pluck
)

# expose errors and sentinels
from .types import (
    UnderfoldError,
    EmptySequenceError,
    NOT_FOUND
)

# define what `import *` does, the builtin-shadowing functions stay out
__all__ = [
    "Sequence",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "from_records",
    "seq",
    "P",
    "identity",
    "fold",
    "reverse",
    "reject",
    "find",
    "contains",
    "size",
    "every",
    "some",
    "sort",
    "group_by",
    "index_by",
    "count_by",
    "partition",
    "where",
    "find_where",
    "pluck",
    "UnderfoldError",
    "EmptySequenceError",
    "NOT_FOUND"
]
