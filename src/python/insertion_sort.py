"""Insertion sort, O(n^2), in place and stable."""

from __future__ import annotations

from typing import Any, MutableSequence


def insertion_sort(A: MutableSequence[Any]) -> None:
    for i in range(1, len(A)):
        current = A[i]
        j = i - 1
        # Shift larger values right to free the slot for current
        while j >= 0 and A[j] > current:
            A[j + 1] = A[j]
            j -= 1
        A[j + 1] = current
