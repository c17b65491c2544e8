"""
Heap sort, O(n log n), in place.

The list itself stores a binary max-heap: the children of node i live at
2i + 1 and 2i + 2. Sorting repeatedly moves the root (the maximum) past the
end of the shrinking heap.
"""

from __future__ import annotations

from typing import Any, MutableSequence


class Heap:
    """Max-heap view over the first ``heap_size`` slots of a mutable sequence."""

    def __init__(self, A: MutableSequence[Any]) -> None:
        self.A = A
        self.heap_size = len(A)
        for i in range(len(A) // 2 - 1, -1, -1):
            self.max_heapify(i)

    def max_heapify(self, i: int) -> None:
        """Sift A[i] down until neither child is larger."""
        A = self.A
        while True:
            largest = i
            left = 2 * i + 1
            right = left + 1
            if left < self.heap_size and A[left] > A[largest]:
                largest = left
            if right < self.heap_size and A[right] > A[largest]:
                largest = right
            if largest == i:
                return
            A[i], A[largest] = A[largest], A[i]
            i = largest

    def is_valid(self) -> bool:
        A = self.A
        return all(A[(i - 1) // 2] >= A[i] for i in range(1, self.heap_size))

    def pop_max_to_end(self) -> None:
        """Swap the maximum into the last heap slot and shrink the heap by one."""
        if self.heap_size == 0:
            raise IndexError("pop from empty heap")
        last = self.heap_size - 1
        self.A[0], self.A[last] = self.A[last], self.A[0]
        self.heap_size = last
        self.max_heapify(0)


def heap_sort(A: MutableSequence[Any]) -> None:
    heap = Heap(A)
    while heap.heap_size > 1:
        heap.pop_max_to_end()
