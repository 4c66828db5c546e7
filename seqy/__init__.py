r"""
'    ____  _____ ___  __   __
'   / ___|| ____/ _ \ \ \ / /
'   \___ \|  _|| | | | \ V /
'    ___) | |__| |_| |  | |
'   |____/|_____\__\_\  |_|
"""

# expose the chain wrapper
from .chaining import Chain

# expose the factory functions
from .factories import (
    chain,
    seqy,
    S,
    new_seq,
    is_slice,
    from_array_like
)

# expose the engine
from .extensions.core import (
    each, for_each,
    map_, collect,
    filter_, select,
    reject,
    reduce, inject, foldl,
    reduce_right, foldr,
    sort_by
)
from .extensions.search import (
    min_, max_,
    find, detect,
    find_last,
    find_index,
    find_last_index,
    some, any_,
    every, all_,
    index_of,
    last_index_of,
    contains, includes
)
from .extensions.set import (
    uniq, unique,
    difference,
    intersection,
    union,
    without,
    equals_strict,
    equals_not_strict
)
from .extensions.grouping import count_by, group_by
from .extensions.utility import (
    remove,
    insert,
    concat,
    shuffle,
    shuffled_copy,
    reverse,
    reversed_copy,
    random_,
    is_empty
)

# expose the random source controls
from .rng import seed, set_rng, get_rng

# expose the sentinel
from .types import NOT_FOUND

# define what `import *` does
__all__ = [
    "Chain",
    "chain", "seqy", "S",
    "new_seq", "is_slice", "from_array_like",
    "each", "for_each",
    "map_", "collect",
    "filter_", "select",
    "reject",
    "reduce", "inject", "foldl",
    "reduce_right", "foldr",
    "sort_by",
    "min_", "max_",
    "find", "detect",
    "find_last", "find_index", "find_last_index",
    "some", "any_",
    "every", "all_",
    "index_of", "last_index_of",
    "contains", "includes",
    "uniq", "unique",
    "difference", "intersection", "union", "without",
    "equals_strict", "equals_not_strict",
    "count_by", "group_by",
    "remove", "insert", "concat",
    "shuffle", "shuffled_copy",
    "reverse", "reversed_copy",
    "random_", "is_empty",
    "seed", "set_rng", "get_rng",
    "NOT_FOUND"
]
