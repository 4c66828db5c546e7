from __future__ import annotations
from typing import Tuple
from ..types import *


def _predicate_search(seq: MaybeSeq, predicate: Optional[Predicate], indices: range) -> Tuple[Any, int]:
    """walk indices in order and return the first (element, index) passing the predicate"""
    if seq is None or predicate is None:
        return None, NOT_FOUND
    for index in indices:
        if predicate(seq[index], index, seq):
            return seq[index], index
    return None, NOT_FOUND


def _forward(seq: MaybeSeq) -> range:
    return range(len(seq or ()))


def _backward(seq: MaybeSeq) -> range:
    return range(len(seq or ()) - 1, -1, -1)


def _binary_search(sorted_seq: MaybeSeq, target: Any, comparator: Comparator) -> int:
    """
    halving search over an ascending sequence. the first exact hit on the
    search path wins, which is not necessarily the lowest matching index.
    """
    lo, hi = 0, len(sorted_seq or ())
    while lo < hi:
        mid = (lo + hi) >> 1
        compared = comparator(sorted_seq[mid], target)
        if compared == 0:
            return mid
        if compared < 0:
            lo = mid + 1
        else:
            hi = mid
    return NOT_FOUND


def _extreme(seq: MaybeSeq, comparator: Optional[Comparator], direction: int) -> Any:
    """
    two-pointer scan from both ends toward the middle. each step first settles
    the pair (left keeps ties), then folds the winner into the running best
    (the incumbent keeps ties). a lone middle element is folded in by itself.
    """
    if not seq or comparator is None: return NOT_FOUND
    if len(seq) == 1: return seq[0]

    best = seq[0]
    left, right = 0, len(seq) - 1
    while left <= right:
        if left == right:
            inner = seq[left]
        elif sign(comparator(seq[right], seq[left])) == direction:
            inner = seq[right]
        else:
            inner = seq[left]

        if sign(comparator(inner, best)) == direction:
            best = inner
        left, right = left + 1, right - 1

    return best


def min_(seq: MaybeSeq, comparator: Optional[Comparator]) -> Any:
    """smallest element by comparator, -1 when there is nothing to compare"""
    return _extreme(seq, comparator, TO_MIN)


def max_(seq: MaybeSeq, comparator: Optional[Comparator]) -> Any:
    """largest element by comparator, -1 when there is nothing to compare"""
    return _extreme(seq, comparator, TO_MAX)


def find(seq: MaybeSeq, predicate: Optional[Predicate]) -> Any:
    """first element passing the predicate, or None"""
    return _predicate_search(seq, predicate, _forward(seq))[0]


def find_last(seq: MaybeSeq, predicate: Optional[Predicate]) -> Any:
    """last element passing the predicate, or None"""
    return _predicate_search(seq, predicate, _backward(seq))[0]


def find_index(seq: MaybeSeq, predicate: Optional[Predicate]) -> int:
    """index of the first element passing the predicate, or -1"""
    return _predicate_search(seq, predicate, _forward(seq))[1]


def find_last_index(seq: MaybeSeq, predicate: Optional[Predicate]) -> int:
    """index of the last element passing the predicate, or -1"""
    return _predicate_search(seq, predicate, _backward(seq))[1]


def some(seq: MaybeSeq, predicate: Optional[Predicate]) -> bool:
    """true if at least one element passes the predicate"""
    return find_index(seq, predicate) != NOT_FOUND


def every(seq: MaybeSeq, predicate: Optional[Predicate]) -> bool:
    """true if all elements pass. an empty sequence is false, not vacuously true."""
    if not seq or predicate is None:
        return False
    for index, value in enumerate(seq):
        if not predicate(value, index, seq):
            return False
    return True


def index_of(seq: MaybeSeq, target: Any, is_sorted: bool = False,
             comparator: Optional[Comparator] = None) -> int:
    """
    index of an element equal to target. pass is_sorted=True for an ascending
    sequence to switch to binary search.
    """
    if comparator is None: return NOT_FOUND
    if is_sorted:
        return _binary_search(seq, target, comparator)
    return find_index(seq, equal_to(target, comparator))


def last_index_of(seq: MaybeSeq, target: Any, comparator: Optional[Comparator]) -> int:
    """index of the last element equal to target, always a linear scan"""
    if comparator is None: return NOT_FOUND
    return find_last_index(seq, equal_to(target, comparator))


def contains(seq: MaybeSeq, target: Any, is_sorted: bool = False,
             comparator: Optional[Comparator] = None) -> bool:
    """true if some element equals target"""
    if comparator is None: return False
    return index_of(seq, target, is_sorted, comparator) != NOT_FOUND


# --- aliases ---
detect = find
any_ = some
all_ = every
includes = contains
