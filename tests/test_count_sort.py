from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from count_sort import CountSortOutcome, count_sort, count_sort_by_frequency
from sort_fixtures import SORT_FIXTURES, UNSIGNED_FIXTURES, verify_sort

COUNT_SORTS = [count_sort, count_sort_by_frequency]


@pytest.mark.parametrize("sort_fn", COUNT_SORTS)
def test_count_sort_unsigned_fixtures(sort_fn) -> None:
    assert verify_sort(sort_fn, UNSIGNED_FIXTURES) == len(UNSIGNED_FIXTURES)


@pytest.mark.parametrize("sort_fn", COUNT_SORTS)
def test_signed_fixtures_are_inapplicable_and_untouched(sort_fn) -> None:
    for data, _ in SORT_FIXTURES:
        if min(data) >= 0:
            continue
        A = list(data)
        assert sort_fn(A) is CountSortOutcome.INAPPLICABLE
        assert A == data


@pytest.mark.parametrize("sort_fn", COUNT_SORTS)
@pytest.mark.parametrize(
    "a",
    [
        [3, -1, 2],
        [-7],
        [1.5, 2, 0],
        ["b", "a"],
        [1, None],
    ],
)
def test_inapplicable_input_left_unmodified(sort_fn, a: list) -> None:
    A = list(a)
    assert sort_fn(A) is CountSortOutcome.INAPPLICABLE
    assert A == a


@pytest.mark.parametrize("sort_fn", COUNT_SORTS)
def test_keys_above_limit_are_inapplicable(sort_fn) -> None:
    A = [5, 100, 3]
    assert sort_fn(A, max_key=99) is CountSortOutcome.INAPPLICABLE
    assert A == [5, 100, 3]
    assert sort_fn(A, max_key=100) is CountSortOutcome.SORTED
    assert A == [3, 5, 100]


@pytest.mark.parametrize("sort_fn", COUNT_SORTS)
@pytest.mark.parametrize("a", [[], [0], [4], [2, 1], [0, 0, 0]])
def test_trivial_inputs_sorted(sort_fn, a: List[int]) -> None:
    A = list(a)
    assert sort_fn(A) is CountSortOutcome.SORTED
    assert A == sorted(a)


def test_count_sort_is_stable_with_key() -> None:
    items = [(3, "a"), (1, "b"), (3, "c"), (0, "d"), (1, "e"), (3, "f")]
    assert count_sort(items, key=lambda x: x[0]) is CountSortOutcome.SORTED
    assert items == [(0, "d"), (1, "b"), (1, "e"), (3, "a"), (3, "c"), (3, "f")]


def test_count_sort_key_must_be_countable() -> None:
    items = [("x", -1), ("y", 2)]
    assert count_sort(items, key=lambda x: x[1]) is CountSortOutcome.INAPPLICABLE
    assert items == [("x", -1), ("y", 2)]


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=0, max_value=9), max_size=200))
def test_count_sort_stability_property(keys: List[int]) -> None:
    items = [(k, i) for i, k in enumerate(keys)]
    count_sort(items, key=lambda x: x[0])
    assert items == sorted(((k, i) for i, k in enumerate(keys)), key=lambda x: x[0])


@pytest.mark.parametrize("sort_fn", COUNT_SORTS)
@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=0, max_value=2_000), max_size=300))
def test_count_sorts_match_sorted(sort_fn, a: List[int]) -> None:
    A = list(a)
    assert sort_fn(A) is CountSortOutcome.SORTED
    assert A == sorted(a)


@settings(deadline=None, max_examples=50)
@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=100))
def test_mixed_sign_inputs_never_partially_sorted(a: List[int]) -> None:
    A = list(a)
    outcome = count_sort(A)
    if min(a) < 0:
        assert outcome is CountSortOutcome.INAPPLICABLE
        assert A == a
    else:
        assert outcome is CountSortOutcome.SORTED
        assert A == sorted(a)
