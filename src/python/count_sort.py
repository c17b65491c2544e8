"""
Counting sort over bounded non-negative integer keys.

No comparisons are made between elements: each key is counted, the counts
are turned into a cumulative table, and every element is placed directly
at its final index. Time and space are O(n + k) where k is the largest key.

If any key is not a non-negative int within ``max_key`` the input is left
untouched and the caller gets ``CountSortOutcome.INAPPLICABLE``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, MutableSequence, Optional

DEFAULT_MAX_KEY = 2**24


class CountSortOutcome(Enum):
    SORTED = "sorted"
    INAPPLICABLE = "inapplicable"


def _collect_keys(A, key: Optional[Callable[[Any], Any]], max_key: int) -> Optional[List[int]]:
    """Return the key of every element, or None if one cannot be counted."""
    keys: List[int] = []
    for v in A:
        k = v if key is None else key(v)
        if not isinstance(k, int) or k < 0 or k > max_key:
            return None
        keys.append(k)
    return keys


def count_sort(
    A: MutableSequence[Any],
    *,
    key: Optional[Callable[[Any], Any]] = None,
    max_key: int = DEFAULT_MAX_KEY,
) -> CountSortOutcome:
    """Stable counting sort in place using a cumulative count table."""
    keys = _collect_keys(A, key, max_key)
    if keys is None:
        return CountSortOutcome.INAPPLICABLE

    n = len(A)
    if n <= 1:
        return CountSortOutcome.SORTED

    k_max = max(keys)
    C = [0] * (k_max + 1)
    output = [None] * n

    # 1) Count frequency of each key
    for k in keys:
        C[k] += 1

    # 2) Convert count to cumulative count
    for i in range(1, k_max + 1):
        C[i] += C[i - 1]

    # 3) Build the output array (RIGHT → LEFT for stability)
    for i in range(n - 1, -1, -1):
        k = keys[i]
        output[C[k] - 1] = A[i]
        C[k] -= 1

    # 4) Copy back to A
    A[:] = output
    return CountSortOutcome.SORTED


def count_sort_by_frequency(
    A: MutableSequence[int],
    *,
    max_key: int = DEFAULT_MAX_KEY,
) -> CountSortOutcome:
    """Counting sort for bare ints: re-emit each value as many times as it was seen.

    Elements carry nothing beyond their value, so no placement pass is needed.
    """
    keys = _collect_keys(A, None, max_key)
    if keys is None:
        return CountSortOutcome.INAPPLICABLE
    if len(A) <= 1:
        return CountSortOutcome.SORTED

    C = [0] * (max(keys) + 1)
    for k in keys:
        C[k] += 1

    i = 0
    for k, count in enumerate(C):
        for _ in range(count):
            A[i] = k
            i += 1
    return CountSortOutcome.SORTED
