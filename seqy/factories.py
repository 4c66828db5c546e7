import logging
from collections.abc import Mapping, Set as AbstractSet

import numpy as np
import pandas as pd

from .types import *
from .chaining import Chain

logger = logging.getLogger(__name__)


def chain(seq: MaybeSeq = None) -> Chain:
    """start a chain over seq, None counts as an empty sequence"""
    return Chain(seq)


def new_seq(size: int) -> Seq:
    """list of size empty (None) slots"""
    return [None] * max(size, 0)


def is_slice(target: Any) -> bool:
    """true for positional array-likes: list, tuple, range, numpy arrays and pandas series"""
    if target is None or isinstance(target, (str, bytes, bytearray, Mapping, AbstractSet)):
        return False
    if isinstance(target, np.ndarray):
        return target.ndim >= 1
    return isinstance(target, (list, tuple, range, pd.Series))


def _native(value: Any) -> Any:
    # numpy scalars become plain python values
    return value.item() if isinstance(value, np.generic) else value


def from_array_like(target: Any, size: int) -> Seq:
    """
    copy the first `size` elements of an array-like into a new list, one by one.
    a size past the end stops at the last element.
    anything that is not array-like, or a negative size, gives an empty list.
    """
    if not is_slice(target) or size < 0:
        logger.debug(f"from_array_like ignoring {type(target).__name__} with size {size}")
        return []
    count = min(size, len(target))
    if isinstance(target, pd.Series):
        return [_native(target.iloc[i]) for i in range(count)]
    return [_native(target[i]) for i in range(count)]


# --- aliases ---
seqy = chain
S = chain
