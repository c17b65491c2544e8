"""
In-place quick sort with interchangeable partitioning schemes.

Average O(n log n), worst case O(n^2), not stable. The partition step
rearranges a range around a pivot so that everything on the left is not
greater than everything on the right; the driver then sorts both sides.

Usage:
    A = [9, 2, 3, 4, 1]
    quick_sort(A, Partitioner.HOARE)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, MutableSequence, Optional, Tuple

Range = Tuple[int, int]


class Partitioner(Enum):
    """Partitioning scheme used for a whole quick sort call."""

    # Pivot is the last element; it ends up at its final index.
    LOMUTO = "lomuto"
    # Pivot is the value of the first element; only the split point is returned.
    HOARE = "hoare"


def _resolve_range(A: MutableSequence[Any], lo: int, hi: Optional[int]) -> Range:
    if hi is None:
        hi = len(A)
    if not 0 <= lo <= hi <= len(A):
        raise ValueError(f"invalid range [{lo}, {hi}) for sequence of length {len(A)}")
    return lo, hi


def lomuto_partition(A: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition A[lo:hi] around its last element and return the pivot's final index q.

    Afterwards A[lo:q] <= A[q] < A[q+1:hi]; duplicates of the pivot go left.
    """
    if hi - lo < 1:
        raise ValueError("Lomuto partition needs a non-empty range")

    pivot = A[hi - 1]
    # A[lo:boundary] holds the elements seen so far that are <= pivot
    boundary = lo
    for j in range(lo, hi - 1):
        if A[j] <= pivot:
            A[boundary], A[j] = A[j], A[boundary]
            boundary += 1

    A[boundary], A[hi - 1] = A[hi - 1], A[boundary]
    return boundary


def hoare_partition(A: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition A[lo:hi] around the value of A[lo] and return the split index q.

    Afterwards every element of A[lo:q+1] is <= every element of A[q+1:hi],
    and lo <= q < hi - 1, so both sides are non-empty.
    """
    if hi - lo < 2:
        raise ValueError("Hoare partition needs at least two elements")

    # Compared by value: swaps may move the original pivot element anywhere.
    pivot = A[lo]
    i = lo - 1
    j = hi
    while True:
        j -= 1
        while A[j] > pivot:
            j -= 1
        i += 1
        while A[i] < pivot:
            i += 1
        if i >= j:
            return j
        A[i], A[j] = A[j], A[i]


def partition(A: MutableSequence[Any], lo: int, hi: int, strategy: Partitioner) -> Tuple[Range, Range]:
    """Partition A[lo:hi] with ``strategy`` and return the two sub-ranges left to sort."""
    if strategy is Partitioner.LOMUTO:
        q = lomuto_partition(A, lo, hi)
        # A[q] is already in place
        return (lo, q), (q + 1, hi)
    if strategy is Partitioner.HOARE:
        q = hoare_partition(A, lo, hi)
        return (lo, q + 1), (q + 1, hi)
    raise ValueError(f"unknown partitioner: {strategy!r}")


def quick_sort(
    A: MutableSequence[Any],
    strategy: Partitioner = Partitioner.LOMUTO,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
) -> None:
    """Sort A[lo:hi] ascending in place.

    The smaller side of each partition is sorted recursively and the larger
    side by looping, which keeps the stack O(log n) deep on any input.
    """
    lo, hi = _resolve_range(A, lo, hi)

    while hi - lo > 2:
        left, right = partition(A, lo, hi, strategy)
        if left[1] - left[0] <= right[1] - right[0]:
            quick_sort(A, strategy, lo=left[0], hi=left[1])
            lo, hi = right
        else:
            quick_sort(A, strategy, lo=right[0], hi=right[1])
            lo, hi = left

    if hi - lo == 2 and A[lo] > A[lo + 1]:
        A[lo], A[lo + 1] = A[lo + 1], A[lo]
