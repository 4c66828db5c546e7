from __future__ import annotations
from functools import cmp_to_key
from ..types import *


def each(seq: MaybeSeq, action: Optional[Action]) -> None:
    """call action(element, index, seq) on every element, front to back"""
    if action is None or seq is None: return
    for index, value in enumerate(seq):
        action(value, index, seq)


def map_(seq: MaybeSeq, callback: Optional[Callback]) -> Seq:
    """new list of the same length holding callback(element, index, seq)"""
    if seq is None: return []
    if callback is None: return seq
    return [callback(value, index, seq) for index, value in enumerate(seq)]


def filter_(seq: MaybeSeq, predicate: Optional[Predicate]) -> Seq:
    """new list of the elements that pass the predicate, order kept"""
    if seq is None: return []
    if predicate is None: return seq
    return [value for index, value in enumerate(seq) if predicate(value, index, seq)]


def reject(seq: MaybeSeq, predicate: Optional[Predicate]) -> Seq:
    """new list of the elements that fail the predicate, order kept"""
    if seq is None: return []
    if predicate is None: return seq
    return filter_(seq, negate(predicate))


def _fold(seq: Seq, collector: Collector, memo: Any, indices: range) -> Any:
    for index in indices:
        memo = collector(memo, seq[index], index, seq)
    return memo


def reduce(seq: MaybeSeq, collector: Optional[Collector], initial: Any = None) -> Any:
    """
    left fold. with no initial value the first element seeds the memo and the
    fold starts at index 1. an empty sequence or a missing collector yields None,
    even when an initial value was given.
    """
    if not seq or collector is None: return None
    if initial is None:
        return _fold(seq, collector, seq[0], range(1, len(seq)))
    return _fold(seq, collector, initial, range(len(seq)))


def reduce_right(seq: MaybeSeq, collector: Optional[Collector], initial: Any = None) -> Any:
    """right fold, seeded with the last element when no initial value is given"""
    if not seq or collector is None: return None
    last = len(seq) - 1
    if initial is None:
        return _fold(seq, collector, seq[last], range(last - 1, -1, -1))
    return _fold(seq, collector, initial, range(last, -1, -1))


def sort_by(seq: MaybeSeq, comparator: Optional[Comparator]) -> Seq:
    """
    stable in-place sort. list.sort only ever asks the key objects built by
    cmp_to_key for `<`, so ordering is decided by comparator(l, r) < 0 alone.
    """
    if seq is None: return []
    if comparator is None: return seq
    seq.sort(key=cmp_to_key(comparator))
    return seq


# --- aliases ---
for_each = each
collect = map_
select = filter_
inject = reduce
foldl = reduce
foldr = reduce_right
