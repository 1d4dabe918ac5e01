"""
Binary heap -- array-backed min-priority queue with heapify and heapsort.

Elements live in an implicit complete binary tree: the children of index i are
at 2i + 1 and 2i + 2, its parent at (i - 1) // 2. The backing list is managed
like a dynamic array: it doubles when full and is cut back to twice the live
size once fewer than a third of its slots are in use, so resizing costs are
amortized O(1) per operation.

from_array() and sort() work in place on the caller's sequence. Any mutable
sequence with integer indexing and len() will do, including 1-D NumPy arrays.
"""

import logging
from typing import TypeVar, Generic, List, Iterator, MutableSequence, Protocol

logger = logging.getLogger(__name__)

T = TypeVar('T')

INITIAL_CAPACITY = 1
GROWTH_FACTOR = 2
SHRINK_THRESHOLD = 3
SHRINK_FACTOR = 2


class PriorityQueue(Protocol[T]):
    """The operations a min-priority queue offers to its callers."""

    def push(self, value: T) -> bool: ...

    def peek(self) -> T: ...

    def pop(self) -> T: ...

    def size(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...


class BinaryHeap(Generic[T]):
    def __init__(self) -> None:
        self._data: MutableSequence[T] = [None] * INITIAL_CAPACITY
        self._size = 0
        self._version = 0

    @staticmethod
    def from_array(arr: MutableSequence[T]) -> 'BinaryHeap[T]':
        """Build a heap on top of an existing sequence.

        The sequence is not copied: it becomes the backing store and is
        reordered in place. The caller must not modify it afterwards while
        the heap is in use. Sequences other than lists are swapped for a list
        on the first push.
        """
        heap: BinaryHeap[T] = BinaryHeap()
        heap._data = arr
        heap._size = len(arr)
        for i in range(heap._size // 2, -1, -1):
            heap._trickle_down(i)
        return heap

    def push(self, value: T) -> bool:
        # A heapified array may have a fixed dtype; move into a list before
        # storing values the caller chose.
        if not isinstance(self._data, list):
            self._reallocate(len(self._data))
        if self._size + 1 > len(self._data):
            self._grow()
        self._data[self._size] = value
        self._size += 1
        self._version += 1
        self._bubble_up(self._size - 1)
        return True

    def pop(self) -> T:
        if self._size == 0:
            raise IndexError("pop from empty heap")
        result = self._data[0]
        self._size -= 1
        self._swap(0, self._size)
        if isinstance(self._data, list):
            self._data[self._size] = None
        self._version += 1
        self._trickle_down(0)
        self._shrink()
        return result

    def peek(self) -> T:
        if self._size == 0:
            raise IndexError("peek from empty heap")
        return self._data[0]

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._data = [None] * INITIAL_CAPACITY
        self._size = 0
        self._version += 1

    @staticmethod
    def sort(arr: MutableSequence[T]) -> None:
        """Heapsort arr into ascending order, in place. Not stable.

        Each pass moves the current minimum to the end of the shrinking live
        region, which leaves arr in descending order; a final reversal
        turns it around.
        """
        heap = BinaryHeap.from_array(arr)
        while heap._size > 1:
            heap._size -= 1
            heap._swap(heap._size, 0)
            heap._trickle_down(0)
        _reverse(arr)

    def _grow(self) -> None:
        new_capacity = max(len(self._data) * GROWTH_FACTOR, 1)
        self._reallocate(new_capacity)

    def _shrink(self) -> None:
        if self._size > 0 and SHRINK_THRESHOLD * self._size < len(self._data):
            self._reallocate(self._size * SHRINK_FACTOR)

    def _reallocate(self, new_capacity: int) -> None:
        new_data: List[T] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[i]
        logger.debug("BinaryHeap resize: capacity %d -> %d (size %d)",
                     len(self._data), new_capacity, self._size)
        self._data = new_data

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _bubble_up(self, index: int) -> None:
        parent = (index - 1) // 2
        while index > 0 and self._data[index] < self._data[parent]:
            self._swap(index, parent)
            index = parent
            parent = (index - 1) // 2

    def _trickle_down(self, index: int) -> None:
        # Equal children send the element right; only a strictly smaller
        # left child wins.
        while True:
            child = -1
            left = 2 * index + 1
            right = 2 * index + 2
            if right < self._size and self._data[right] < self._data[index]:
                if self._data[left] < self._data[right]:
                    child = left
                else:
                    child = right
            elif left < self._size and self._data[left] < self._data[index]:
                child = left
            if child < 0:
                break
            self._swap(index, child)
            index = child

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        items = [self._data[i] for i in range(self._size)]
        return f"BinaryHeap({items})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={self._size}, capacity={len(self._data)})"

    def __iter__(self) -> 'HeapIterator[T]':
        return HeapIterator(self)


class HeapIterator(Generic[T]):
    """Forward, read-only pass over the live elements in array order.

    Array order is heap order, not sorted order. Mutating the heap while an
    iterator is live makes the next step raise RuntimeError.
    """

    def __init__(self, heap: BinaryHeap[T]) -> None:
        self._heap = heap
        self._index = 0
        self._version = heap._version

    def __iter__(self) -> 'HeapIterator[T]':
        return self

    def __next__(self) -> T:
        if self._index < 0:
            raise StopIteration
        if self._version != self._heap._version:
            raise RuntimeError("heap changed during iteration")
        if self._index >= self._heap._size:
            # stay exhausted even if the heap grows later
            self._index = -1
            raise StopIteration
        value = self._heap._data[self._index]
        self._index += 1
        return value

    def remove(self) -> None:
        raise NotImplementedError("HeapIterator.remove: heap iterators are read-only")


def heapsort(arr: MutableSequence[T]) -> None:
    BinaryHeap.sort(arr)


def _reverse(arr: MutableSequence[T]) -> None:
    i, j = 0, len(arr) - 1
    while i < j:
        arr[i], arr[j] = arr[j], arr[i]
        i += 1
        j -= 1
