"""
Registry of every in-place sort, keyed by the name used on the command line.

Each registered function takes a single mutable sequence. ``sort()`` is the
uniform entry point:

    sort(A, "quick", Partitioner.HOARE)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, MutableSequence, Optional

from bubble_sort import bubble_sort_lr, bubble_sort_rl
from count_sort import CountSortOutcome, count_sort, count_sort_by_frequency
from heap_sort import heap_sort
from insertion_sort import insertion_sort
from merge_sort import merge_halves, merge_sort
from quick_sort import Partitioner, quick_sort

SortFn = Callable[[MutableSequence[Any]], Any]

ALGORITHMS: Dict[str, SortFn] = {
    "bubble-lr": bubble_sort_lr,
    "bubble-rl": bubble_sort_rl,
    "insertion": insertion_sort,
    "heap": heap_sort,
    "merge": merge_sort,
    "merge-halves": lambda A: merge_sort(A, merger=merge_halves),
    "quick-lomuto": lambda A: quick_sort(A, Partitioner.LOMUTO),
    "quick-hoare": lambda A: quick_sort(A, Partitioner.HOARE),
    "count": count_sort,
    "count-frequency": count_sort_by_frequency,
}

# Sorts that report CountSortOutcome instead of always succeeding
COUNTING = frozenset({"count", "count-frequency"})


class UnknownAlgorithmError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown algorithm {name!r}; choose from: {', '.join(ALGORITHMS)}")
        self.name = name


def get_algorithm(name: str) -> SortFn:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(name) from None


def sort(
    A: MutableSequence[Any],
    algorithm: str = "merge",
    strategy: Partitioner = Partitioner.LOMUTO,
) -> Optional[CountSortOutcome]:
    """Sort A in place with the named algorithm.

    ``"quick"`` selects quick sort with ``strategy``; counting sorts return
    their CountSortOutcome, everything else returns None.
    """
    if algorithm == "quick":
        quick_sort(A, strategy)
        return None
    return get_algorithm(algorithm)(A)
