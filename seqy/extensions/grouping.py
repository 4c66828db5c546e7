from __future__ import annotations
from collections import defaultdict
from ..types import *


def count_by(seq: MaybeSeq, callback: Optional[Callback]) -> Optional[CountMap]:
    """
    count elements per str(callback(element, index, seq)).
    returns None, not an empty dict, when there was nothing to count
    (missing or empty sequence, missing callback).
    """
    if not seq or callback is None:
        return None
    counts = defaultdict(int)
    for index, value in enumerate(seq):
        counts[str(callback(value, index, seq))] += 1
    return dict(counts)


def group_by(seq: MaybeSeq, callback: Optional[Callback]) -> GroupMap:
    """group elements under callback(element, index, seq), keeping encounter order in each group"""
    if seq is None or callback is None:
        return {}
    groups = defaultdict(list)
    for index, value in enumerate(seq):
        groups[callback(value, index, seq)].append(value)
    return dict(groups)
