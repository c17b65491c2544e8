from __future__ import annotations

from fractions import Fraction
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from max_subarray import (
    SubarrayResult,
    find_max_crossing_subarray,
    find_max_subarray_dc,
    find_max_subarray_kadane,
)

METHODS = [find_max_subarray_kadane, find_max_subarray_dc]

LONG_CASE = [
    22, -27, 38, -34, 49, 40, 13, -44, -13, 28, 46, 7, -26, 42, 29, 0, -6, 35, 23, -37, 10, 12, -2, 18, -12, -49, -10, 37, -5, 17, 6, -11, -22,
    -17, -50, -40, 44, 14, -41, 19, -15, 45, -23, 48, -1, -39, -46, 15, 3, -32, -29, -48, -19, 27, -33, -8, 11, 21, -43, 24, 5, 34, -36, -9, 16,
    -31, -7, -24, -47, -14, -16, -18, 39, -30, 33, -45, -38, 41, -3, 4, -25, 20, -35, 32, 26, 47, 2, -4, 8, 9, 31, -28, 36, 1, -21, 30, 43, 25,
    -20, -42,
]

TOTALS = [
    (LONG_CASE, 239),
    ([-3, -4, -5, -6, -7], 0),
    ([0, 0, 1, 2], 3),
    ([1, 2, 3, 4], 10),
    ([0] * 10, 0),
    ([0, 0, 0, -1, 0, 0], 0),
    ([100, 0, 0, 0, 0, 0, 0, 0], 100),
    ([-2, -3, -100, 0], 0),
    ([1, 2, 3, -100, 6], 6),
    ([0, -1], 0),
    ([-1, 0], 0),
    ([1, 2, 3, -2, 5], 9),
    ([10, -2, -3], 10),
]


def brute_force_max(a: List[int]) -> int:
    best = 0
    for i in range(len(a)):
        s = 0
        for j in range(i, len(a)):
            s += a[j]
            best = max(best, s)
    return best


@pytest.mark.parametrize("method", METHODS)
@pytest.mark.parametrize("a, total", TOTALS)
def test_known_totals(method, a: List[int], total: int) -> None:
    result = method(a)
    assert result.total == total
    assert sum(result.values(a)) == total


@pytest.mark.parametrize("method", METHODS)
def test_all_negative_gives_empty_result(method) -> None:
    assert method([-3, -4, -5]) == SubarrayResult(None, 0)
    assert method([-3, -4, -5]).values([-3, -4, -5]) == []


@pytest.mark.parametrize("method", METHODS)
def test_empty_input(method) -> None:
    assert method([]) == SubarrayResult(None, 0)


@pytest.mark.parametrize("method", METHODS)
def test_whole_array_wins(method) -> None:
    a = [1, 2, 3, 4]
    result = method(a)
    assert result == SubarrayResult(slice(0, 4), 10)
    assert result.values(a) == [1, 2, 3, 4]


@pytest.mark.parametrize("method", METHODS)
def test_longest_subarray_wins_ties(method) -> None:
    a = [1, 2, 3, -100, 6]
    result = method(a)
    assert result.values(a) == [1, 2, 3]
    assert result.total == 6


@pytest.mark.parametrize("method", METHODS)
def test_zeros_extend_the_result(method) -> None:
    assert method([100, 0, 0, 0]) == SubarrayResult(slice(0, 4), 100)
    assert method([0, -1]) == SubarrayResult(slice(0, 1), 0)
    assert method([-1, 0]) == SubarrayResult(slice(1, 2), 0)


@pytest.mark.parametrize("method", METHODS)
def test_input_not_mutated(method) -> None:
    a = [5, -2, 7, -9, 3]
    method(a)
    assert a == [5, -2, 7, -9, 3]


@pytest.mark.parametrize("method", METHODS)
def test_fraction_elements_with_matching_zero(method) -> None:
    a = [Fraction(1, 2), Fraction(-1, 3)]
    assert method(a, zero=Fraction(0)) == SubarrayResult(slice(0, 1), Fraction(1, 2))


@pytest.mark.parametrize("method", METHODS)
def test_float_overflow_is_reported(method) -> None:
    with pytest.raises(OverflowError):
        method([1e308, 1e308])


def test_crossing_subarray() -> None:
    a = [1, -5, 3, 4, -1, 2]
    assert find_max_crossing_subarray(a, 0, 3, 6) == SubarrayResult(slice(2, 6), 8)


def test_crossing_subarray_with_one_side_empty() -> None:
    # Nothing worth taking left of mid
    assert find_max_crossing_subarray([-4, -1, 2, 3], 0, 2, 4) == SubarrayResult(slice(2, 4), 5)
    # Nothing worth taking right of mid
    assert find_max_crossing_subarray([2, 3, -1, -4], 0, 2, 4) == SubarrayResult(slice(0, 2), 5)
    assert find_max_crossing_subarray([-1, -2], 0, 1, 2) == SubarrayResult(None, 0)


def test_dc_over_sub_range() -> None:
    a = [50, -1, 2, 3, -100]
    assert find_max_subarray_dc(a, lo=1, hi=5) == SubarrayResult(slice(2, 4), 5)


@settings(deadline=None, max_examples=200)
@given(st.lists(st.integers(min_value=-100, max_value=100), max_size=200))
def test_methods_agree_on_total(a: List[int]) -> None:
    kadane = find_max_subarray_kadane(a)
    dc = find_max_subarray_dc(a)

    assert kadane.total == dc.total == brute_force_max(a)
    assert sum(kadane.values(a)) == kadane.total
    assert sum(dc.values(a)) == dc.total
    assert kadane.length == dc.length
