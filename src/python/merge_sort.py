"""
In-place merge sort (divide, conquer, combine).

O(n log n) in every case and stable: when the two fronts compare equal the
element from the left half is taken first. Two merge procedures are
provided; both are interchangeable through the ``merger`` argument.
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional

Key = Optional[Callable[[Any], Any]]
Merger = Callable[[MutableSequence[Any], int, int, int, Key], None]


def merge(A: MutableSequence[Any], lo: int, mid: int, hi: int, key: Key = None) -> None:
    """Merge sorted A[lo:mid] and A[mid:hi] through one scratch list sized to the range."""
    if key is None:
        key = _identity

    tmp: List[Any] = []
    i, j = lo, mid
    while i < mid and j < hi:
        # Stable: prefer left when equal.
        if key(A[i]) <= key(A[j]):
            tmp.append(A[i])
            i += 1
        else:
            tmp.append(A[j])
            j += 1

    # Only one side can have anything left
    tmp.extend(A[i:mid])
    tmp.extend(A[j:hi])
    A[lo:hi] = tmp


def merge_halves(A: MutableSequence[Any], lo: int, mid: int, hi: int, key: Key = None) -> None:
    """Merge sorted A[lo:mid] and A[mid:hi] by copying both halves out first."""
    if key is None:
        key = _identity

    left = A[lo:mid]
    right = A[mid:hi]
    i = j = 0
    for k in range(lo, hi):
        if j == len(right) or (i < len(left) and key(left[i]) <= key(right[j])):
            A[k] = left[i]
            i += 1
        else:
            A[k] = right[j]
            j += 1


def merge_sort(
    A: MutableSequence[Any],
    *,
    key: Key = None,
    merger: Merger = merge,
    lo: int = 0,
    hi: Optional[int] = None,
) -> None:
    """Sort A[lo:hi] ascending in place.

    Args:
        A: Mutable sequence to sort.
        key: Optional key function (like ``sorted(..., key=...)``).
        merger: ``merge`` or ``merge_halves``.
        lo, hi: Half-open range to sort; defaults to the whole sequence.
    """
    if hi is None:
        hi = len(A)
    if not 0 <= lo <= hi <= len(A):
        raise ValueError(f"invalid range [{lo}, {hi}) for sequence of length {len(A)}")
    if key is None:
        key = _identity

    _merge_sort(A, lo, hi, key, merger)


def _merge_sort(A: MutableSequence[Any], lo: int, hi: int, key: Callable[[Any], Any], merger: Merger) -> None:
    n = hi - lo
    if n <= 1:
        return
    if n == 2:
        if key(A[lo]) > key(A[lo + 1]):
            A[lo], A[lo + 1] = A[lo + 1], A[lo]
        return

    # Left half is never smaller than the right one
    mid = lo + (n + 1) // 2
    _merge_sort(A, lo, mid, key, merger)
    _merge_sort(A, mid, hi, key, merger)
    merger(A, lo, mid, hi, key)


def _identity(v: Any) -> Any:
    return v
