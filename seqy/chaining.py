from __future__ import annotations

import logging

from .types import *
from .extensions import core, search, grouping, utility
from .extensions import set as set_ops

logger = logging.getLogger(__name__)


class Chain:
    """
    fluent wrapper threading a working sequence through engine calls.

    two fields carry the state. `mid` is the sequence the next call operates on
    and `res` is whatever the last call produced. sequence methods replace mid
    and point res at it. scalar methods store their answer in res and drop mid,
    so any sequence method called afterwards sees an empty sequence.
    every method returns the chain itself; value() reads the result.
    """

    def __init__(self, seq: MaybeSeq = None):
        seq = [] if seq is None else seq
        self.mid: MaybeSeq = seq
        self.res: Any = seq

    def _advance(self, seq: Seq) -> 'Chain':
        self.mid = seq
        self.res = self.mid
        return self

    def _settle(self, result: Any) -> 'Chain':
        self.res = result
        self.mid = None
        logger.debug(f"chain settled on {type(result).__name__}, working sequence cleared")
        return self

    def __repr__(self) -> str:
        return f"Chain(mid={self.mid!r}, res={self.res!r})"

    def value(self) -> Any:
        """the result of the last call"""
        return self.res

    # --- sequence methods ---

    def each(self, action: Optional[Action]) -> 'Chain':
        """run action on every element, state is left as it was"""
        core.each(self.mid, action)
        return self

    def for_each(self, action: Optional[Action]) -> 'Chain':
        return self.each(action)

    def map(self, callback: Optional[Callback]) -> 'Chain':
        return self._advance(core.map_(self.mid, callback))

    def collect(self, callback: Optional[Callback]) -> 'Chain':
        return self.map(callback)

    def filter(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._advance(core.filter_(self.mid, predicate))

    def select(self, predicate: Optional[Predicate]) -> 'Chain':
        return self.filter(predicate)

    def reject(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._advance(core.reject(self.mid, predicate))

    def uniq(self, comparator: Optional[Comparator]) -> 'Chain':
        return self._advance(set_ops.uniq(self.mid, comparator))

    def unique(self, comparator: Optional[Comparator]) -> 'Chain':
        return self.uniq(comparator)

    def difference(self, other: MaybeSeq, comparator: Optional[Comparator]) -> 'Chain':
        return self._advance(set_ops.difference(self.mid, other, comparator))

    def without(self, non_grata: Any, comparator: Optional[Comparator]) -> 'Chain':
        return self._advance(set_ops.without(self.mid, non_grata, comparator))

    def intersection(self, other: MaybeSeq, comparator: Optional[Comparator]) -> 'Chain':
        return self._advance(set_ops.intersection(self.mid, other, comparator))

    def union(self, other: MaybeSeq, comparator: Optional[Comparator]) -> 'Chain':
        return self._advance(set_ops.union(self.mid, other, comparator))

    def sort_by(self, comparator: Optional[Comparator]) -> 'Chain':
        """stable sort of the working sequence, in place"""
        return self._advance(core.sort_by(self.mid, comparator))

    def remove(self, position: int) -> 'Chain':
        return self._advance(utility.remove(self.mid, position))

    def insert(self, target: Any, position: int) -> 'Chain':
        return self._advance(utility.insert(self.mid, target, position))

    def concat(self, next_seq: MaybeSeq) -> 'Chain':
        return self._advance(utility.concat(self.mid, next_seq))

    def shuffle(self) -> 'Chain':
        """shuffle a copy of the working sequence"""
        return self._advance(utility.shuffled_copy(self.mid))

    def reverse(self) -> 'Chain':
        """reverse a copy of the working sequence"""
        return self._advance(utility.reversed_copy(self.mid))

    # --- scalar methods ---

    def reduce(self, collector: Optional[Collector], initial: Any = None) -> 'Chain':
        return self._settle(core.reduce(self.mid, collector, initial))

    def inject(self, collector: Optional[Collector], initial: Any = None) -> 'Chain':
        return self.reduce(collector, initial)

    def foldl(self, collector: Optional[Collector], initial: Any = None) -> 'Chain':
        return self.reduce(collector, initial)

    def reduce_right(self, collector: Optional[Collector], initial: Any = None) -> 'Chain':
        return self._settle(core.reduce_right(self.mid, collector, initial))

    def foldr(self, collector: Optional[Collector], initial: Any = None) -> 'Chain':
        return self.reduce_right(collector, initial)

    def min(self, comparator: Optional[Comparator]) -> 'Chain':
        return self._settle(search.min_(self.mid, comparator))

    def max(self, comparator: Optional[Comparator]) -> 'Chain':
        return self._settle(search.max_(self.mid, comparator))

    def find(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._settle(search.find(self.mid, predicate))

    def detect(self, predicate: Optional[Predicate]) -> 'Chain':
        return self.find(predicate)

    def find_last(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._settle(search.find_last(self.mid, predicate))

    def find_index(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._settle(search.find_index(self.mid, predicate))

    def find_last_index(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._settle(search.find_last_index(self.mid, predicate))

    def some(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._settle(search.some(self.mid, predicate))

    def any(self, predicate: Optional[Predicate]) -> 'Chain':
        return self.some(predicate)

    def every(self, predicate: Optional[Predicate]) -> 'Chain':
        return self._settle(search.every(self.mid, predicate))

    def all(self, predicate: Optional[Predicate]) -> 'Chain':
        return self.every(predicate)

    def index_of(self, target: Any, is_sorted: bool = False,
                 comparator: Optional[Comparator] = None) -> 'Chain':
        return self._settle(search.index_of(self.mid, target, is_sorted, comparator))

    def last_index_of(self, target: Any, comparator: Optional[Comparator]) -> 'Chain':
        return self._settle(search.last_index_of(self.mid, target, comparator))

    def contains(self, target: Any, is_sorted: bool = False,
                 comparator: Optional[Comparator] = None) -> 'Chain':
        return self._settle(search.contains(self.mid, target, is_sorted, comparator))

    def includes(self, target: Any, is_sorted: bool = False,
                 comparator: Optional[Comparator] = None) -> 'Chain':
        return self.contains(target, is_sorted, comparator)

    def equals_strict(self, other: MaybeSeq, comparator: Optional[Comparator]) -> 'Chain':
        return self._settle(set_ops.equals_strict(self.mid, other, comparator))

    def equals_not_strict(self, other: MaybeSeq, comparator: Optional[Comparator]) -> 'Chain':
        return self._settle(set_ops.equals_not_strict(self.mid, other, comparator))

    def count_by(self, callback: Optional[Callback]) -> 'Chain':
        return self._settle(grouping.count_by(self.mid, callback))

    def group_by(self, callback: Optional[Callback]) -> 'Chain':
        return self._settle(grouping.group_by(self.mid, callback))
