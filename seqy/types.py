from typing import Callable, Any, Optional, Dict, List

# a sequence is a plain list of opaque elements; None marks an absent sequence
Seq = List[Any]
MaybeSeq = Optional[List[Any]]

# every per-element callback receives (element, index, source)
Action = Callable[[Any, int, Seq], None]
Callback = Callable[[Any, int, Seq], Any]
Predicate = Callable[[Any, int, Seq], bool]
Collector = Callable[[Any, Any, int, Seq], Any]
Comparator = Callable[[Any, Any], int]

CountMap = Dict[str, int]
GroupMap = Dict[Any, List[Any]]

# sentinel returned by index searches and by min_/max_ when nothing was computed
NOT_FOUND = -1

# walk directions, also the comparator sign that min_/max_ are looking for
TO_MIN = -1
TO_MAX = 1

LESS = -1
EQUAL = 0
LARGER = 1


def sign(value: int) -> int:
    """collapse a comparator result to -1, 0 or 1"""
    if value < 0: return LESS
    if value == 0: return EQUAL
    return LARGER


def negate(predicate: Predicate) -> Predicate:
    """invert a predicate, keeping the (element, index, source) shape"""
    return lambda current, index, source: not predicate(current, index, source)


def equal_to(target: Any, comparator: Comparator) -> Predicate:
    """predicate that matches elements the comparator considers equal to target"""
    return lambda current, index, source: comparator(current, target) == 0
