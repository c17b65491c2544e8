"""Bubble sort, O(n^2), in place and stable."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort_lr(A: MutableSequence[Any]) -> None:
    """Largest values bubble to the right end on each pass."""
    for i in range(len(A) - 1, 0, -1):
        for j in range(i):
            if A[j] > A[j + 1]:
                A[j], A[j + 1] = A[j + 1], A[j]


def bubble_sort_rl(A: MutableSequence[Any]) -> None:
    """Smallest values bubble to the left end on each pass."""
    n = len(A)
    for i in range(n - 1):
        for j in range(n - 1, i, -1):
            if A[j] < A[j - 1]:
                A[j], A[j - 1] = A[j - 1], A[j]
