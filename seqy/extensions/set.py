from __future__ import annotations
from ..types import *
from .search import contains, index_of
from .utility import remove


def uniq(seq: MaybeSeq, comparator: Optional[Comparator]) -> Seq:
    """
    distinct elements by comparator equality, in order of first appearance.
    every candidate is checked against the result built so far, so this costs
    o(n^2) comparator calls.
    """
    if seq is None: return []
    if comparator is None: return seq
    result = []
    for value in seq:
        if not contains(result, value, False, comparator):
            result.append(value)
    return result


def difference(seq: MaybeSeq, other: MaybeSeq, comparator: Optional[Comparator]) -> Seq:
    """elements of seq that have no equal in other"""
    if seq is None or other is None or comparator is None: return []
    return [value for value in seq if not contains(other, value, False, comparator)]


def intersection(seq: MaybeSeq, other: MaybeSeq, comparator: Optional[Comparator]) -> Seq:
    """distinct elements of seq that have an equal in other, in seq order"""
    if seq is None or other is None or comparator is None: return []
    shared = [value for value in seq if contains(other, value, False, comparator)]
    return uniq(shared, comparator)


def union(seq: MaybeSeq, other: MaybeSeq, comparator: Optional[Comparator]) -> Seq:
    """distinct elements appearing in either sequence, seq first"""
    if seq is None or comparator is None: return []
    return uniq(list(seq) + list(other or ()), comparator)


def without(seq: MaybeSeq, non_grata: Any, comparator: Optional[Comparator]) -> Seq:
    """seq minus every element equal to non_grata. a None non_grata removes nothing."""
    if seq is None or comparator is None: return []
    if non_grata is None: return seq
    return [value for value in seq if comparator(value, non_grata) != 0]


def equals_strict(left: MaybeSeq, right: MaybeSeq, comparator: Optional[Comparator]) -> bool:
    """same length and every positional pair compares equal"""
    left, right = left or [], right or []
    if len(left) != len(right) or comparator is None:
        return False
    for index, value in enumerate(left):
        if comparator(right[index], value) != 0:
            return False
    return True


def equals_not_strict(left: MaybeSeq, right: MaybeSeq, comparator: Optional[Comparator]) -> bool:
    """same length and right is a permutation of left under comparator equality"""
    left, right = left or [], right or []
    if len(left) != len(right) or comparator is None:
        return False

    # each element of left consumes one match from a private copy of right
    pool = list(right)
    for value in left:
        found = index_of(pool, value, False, comparator)
        if found == NOT_FOUND:
            return False
        pool = remove(pool, found)
    return True


# --- aliases ---
unique = uniq
