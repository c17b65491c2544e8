"""
Fixed sorting test vectors and a conformance checker.

verify_sort() runs a sort function on a copy of every vector and raises
SortVerificationError on the first mismatch, so any new sort can be
checked with one call:

    verify_sort(quick_sort)
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, List, MutableSequence, Sequence, Tuple

Fixture = Tuple[List[int], List[int]]

SORT_FIXTURES: List[Fixture] = [
    ([9, 2, 3, 4, 1, 6, 8, 19, 20, 34], [1, 2, 3, 4, 6, 8, 9, 19, 20, 34]),
    ([10, 80, 30, 70, 40, 50, 90], [10, 30, 40, 50, 70, 80, 90]),
    ([2, 3, 4, 5, 10, 1, 11], [1, 2, 3, 4, 5, 10, 11]),
    ([1, 2, 3, 4, 5, 6, 7, 8, 9], [1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ([1, 5, 3, 4], [1, 3, 4, 5]),
    ([1, 2, 3, 0, 5], [0, 1, 2, 3, 5]),
    ([1, 2, 3], [1, 2, 3]),
    ([3, 1, 2], [1, 2, 3]),
    ([2, 1, 3], [1, 2, 3]),
    ([6, 1, 7, 9, 3, 8, 2, 5, 4, 0], [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ([3, 2], [2, 3]),
    ([8, 3, 7, 9, 6, 1, 9, 10], [1, 3, 6, 7, 8, 9, 9, 10]),
    ([8, 2, 78, 892, 11, 0, 34], [0, 2, 8, 11, 34, 78, 892]),
    (
        [9, 3, 83, 9, 2, 0, 1, 65, 2, 822, 9, 11, 22, 3, 3, 3, 47],
        [0, 1, 2, 2, 3, 3, 3, 3, 9, 9, 9, 11, 22, 47, 65, 83, 822],
    ),
    ([-6, 9, 0, 1, 17, 91, 0, 178], [-6, 0, 0, 1, 9, 17, 91, 178]),
    ([-3, -2, -1, -9, -5, -1, -19, -33], [-33, -19, -9, -5, -3, -2, -1, -1]),
    ([-5, -6, -7, 0, 0, 0, 0, -8, 1, 2, 3], [-8, -7, -6, -5, 0, 0, 0, 0, 1, 2, 3]),
    ([2] * 5, [2] * 5),
]

# Vectors a counting sort over non-negative keys can handle
UNSIGNED_FIXTURES: List[Fixture] = [f for f in SORT_FIXTURES if min(f[0]) >= 0]


class SortVerificationError(AssertionError):
    def __init__(self, index: int, input: List[Any], expected: List[Any], actual: List[Any]) -> None:
        super().__init__(
            f"fixture {index}: sorting {input} gave {actual}, expected {expected}"
        )
        self.index = index
        self.input = input
        self.expected = expected
        self.actual = actual


def verify_sort(
    sort_fn: Callable[[MutableSequence[Any]], Any],
    fixtures: Sequence[Fixture] = SORT_FIXTURES,
    *,
    exact: bool = True,
) -> int:
    """Run ``sort_fn`` on a copy of every fixture input and compare with the expected output.

    With ``exact=False`` the result only has to start with the expected list.
    Returns the number of fixtures checked.
    """
    for idx, (data, expected) in enumerate(fixtures):
        A = list(data)
        sort_fn(A)
        ok = A == expected if exact else A[: len(expected)] == expected
        if not ok:
            raise SortVerificationError(idx, list(data), list(expected), A)
    return len(fixtures)


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return all(xs[i] <= xs[i + 1] for i in range(len(xs) - 1))


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff ``a`` and ``b`` hold the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)
