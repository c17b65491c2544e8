"""
Maximum-sum contiguous subarray.

Two methods that always agree on the total:
    find_max_subarray_kadane  -- single running-sum pass, O(n)
    find_max_subarray_dc      -- divide / conquer / combine, O(n log n)

The empty subarray counts as having sum ``zero`` (the additive identity,
0 by default), so an input with only negative values yields
``SubarrayResult(None, zero)``. Among subarrays with the same maximum sum
the longer one is preferred.
"""

from __future__ import annotations

import math
from typing import Any, List, NamedTuple, Optional, Sequence


class SubarrayResult(NamedTuple):
    span: Optional[slice]
    total: Any

    def values(self, A: Sequence[Any]) -> List[Any]:
        """Return the winning elements of A (empty when there is no span)."""
        if self.span is None:
            return []
        return list(A[self.span])

    @property
    def length(self) -> int:
        if self.span is None:
            return 0
        return self.span.stop - self.span.start


def _add(a: Any, b: Any) -> Any:
    s = a + b
    if isinstance(s, float) and math.isinf(s) and math.isfinite(a) and math.isfinite(b):
        raise OverflowError(f"sum of {a!r} and {b!r} overflows")
    return s


def find_max_subarray_kadane(A: Sequence[Any], *, zero: Any = 0) -> SubarrayResult:
    """Kadane's algorithm.

    A run that only reaches the best total replaces it when it is longer,
    which matches the divide-and-conquer tie-break.
    """
    best = zero
    running = zero
    best_start: Optional[int] = None
    best_stop: Optional[int] = None
    best_len = 0

    run_start = 0
    for i, v in enumerate(A):
        running = _add(running, v)
        if running > best or (running == best and i + 1 - run_start > best_len):
            best = running
            best_start, best_stop = run_start, i + 1
            best_len = i + 1 - run_start
        elif running < zero:
            running = zero
            run_start = i + 1

    if best_start is None:
        return SubarrayResult(None, zero)
    return SubarrayResult(slice(best_start, best_stop), best)


def find_max_crossing_subarray(A: Sequence[Any], lo: int, mid: int, hi: int, *, zero: Any = 0) -> SubarrayResult:
    """Best subarray of A[lo:hi] that ends at mid - 1 and/or starts at mid.

    Each side is scanned outward from ``mid``; a side whose every extension
    is negative contributes nothing.
    """
    left: Optional[int] = None
    left_sum = zero
    s = zero
    for i in range(mid - 1, lo - 1, -1):
        s = _add(s, A[i])
        if s >= left_sum:
            left_sum = s
            left = i

    right: Optional[int] = None
    right_sum = zero
    s = zero
    for j in range(mid, hi):
        s = _add(s, A[j])
        if s >= right_sum:
            right_sum = s
            right = j

    if left is None and right is None:
        return SubarrayResult(None, zero)
    start = mid if left is None else left
    stop = mid if right is None else right + 1
    return SubarrayResult(slice(start, stop), _add(left_sum, right_sum))


def find_max_subarray_dc(
    A: Sequence[Any],
    *,
    zero: Any = 0,
    lo: int = 0,
    hi: Optional[int] = None,
) -> SubarrayResult:
    """Divide-and-conquer maximum subarray over A[lo:hi].

    Ties on the total go to the longer subarray, then to the leftmost one.
    """
    if hi is None:
        hi = len(A)
    if not 0 <= lo <= hi <= len(A):
        raise ValueError(f"invalid range [{lo}, {hi}) for sequence of length {len(A)}")

    n = hi - lo
    if n == 0:
        return SubarrayResult(None, zero)
    if n == 1:
        if A[lo] >= zero:
            return SubarrayResult(slice(lo, hi), A[lo])
        return SubarrayResult(None, zero)

    mid = lo + n // 2
    candidates = [
        find_max_subarray_dc(A, zero=zero, lo=lo, hi=mid),
        find_max_subarray_dc(A, zero=zero, lo=mid, hi=hi),
        find_max_crossing_subarray(A, lo, mid, hi, zero=zero),
    ]

    best = candidates[0]
    for c in candidates[1:]:
        if _beats(c, best):
            best = c
    return best


def _beats(c: SubarrayResult, best: SubarrayResult) -> bool:
    if c.total != best.total:
        return c.total > best.total
    if c.length != best.length:
        return c.length > best.length
    if c.span is None or best.span is None:
        return False
    return c.span.start < best.span.start
