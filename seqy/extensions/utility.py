from __future__ import annotations
import math
from ..types import *
from .. import rng

_MIN_INT = -2 ** 63
_MAX_INT = 2 ** 63 - 1


def is_empty(seq: MaybeSeq) -> bool:
    """true for a missing or zero-length sequence"""
    return seq is None or len(seq) == 0


def _clamp(position: int, upper: int) -> int:
    if position < 0: return 0
    if position > upper: return upper
    return position


def remove(seq: MaybeSeq, position: int) -> Seq:
    """
    delete, in place, the element at position. out-of-range positions are
    clamped to the first or last index, so something is always removed
    from a non-empty sequence.
    """
    if seq is None: return []
    if not seq: return seq
    del seq[_clamp(position, len(seq) - 1)]
    return seq


def insert(seq: MaybeSeq, target: Any, position: int) -> Seq:
    """insert target in place at position, clamped to [0, len]; a missing sequence becomes [target]"""
    if seq is None: return [target]
    seq.insert(_clamp(position, len(seq)), target)
    return seq


def concat(seq: MaybeSeq, next_seq: MaybeSeq) -> Seq:
    """
    append next_seq to seq in place. a missing seq gives [] and drops
    next_seq; a missing next_seq leaves seq untouched.
    """
    if seq is None: return []
    if next_seq is None: return seq
    seq.extend(next_seq)
    return seq


def _normalize(number: float) -> float:
    if math.isnan(number): return 0
    if math.isinf(number): return _MIN_INT if number < 0 else _MAX_INT
    return number


def random_(low: float, high: float) -> int:
    """
    random integer in [low, high]. nan counts as 0 and infinities as the
    64-bit integer limits; bounds given the wrong way round are swapped.
    equal bounds return 0.
    """
    if low == high:
        return 0

    low, high = _normalize(low), _normalize(high)
    if low > high:
        low, high = high, low

    spread = rng.uniform() * (high - low + 1)
    if math.isnan(spread):
        return 0
    return int(low + math.floor(spread))


def _shuffle_in_place(seq: Seq) -> Seq:
    # fisher-yates, growing the shuffled prefix one slot at a time
    for i in range(len(seq)):
        j = random_(0, i)
        seq[i], seq[j] = seq[j], seq[i]
    return seq


def shuffle(seq: MaybeSeq) -> Seq:
    """shuffle in place and return the same list"""
    if seq is None: return []
    return _shuffle_in_place(seq)


def shuffled_copy(seq: MaybeSeq) -> Seq:
    """shuffled copy, the input is left alone"""
    if seq is None: return []
    return _shuffle_in_place(list(seq))


def _reverse_in_place(seq: Seq) -> Seq:
    left, right = 0, len(seq) - 1
    while left < right:
        seq[left], seq[right] = seq[right], seq[left]
        left, right = left + 1, right - 1
    return seq


def reverse(seq: MaybeSeq) -> Seq:
    """reverse in place and return the same list"""
    if seq is None: return []
    return _reverse_in_place(seq)


def reversed_copy(seq: MaybeSeq) -> Seq:
    """reversed copy, the input is left alone"""
    if seq is None: return []
    return _reverse_in_place(list(seq))
