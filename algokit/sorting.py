"""Classic comparison sorts and a few related ordering helpers.

Every function accepts any iterable and returns a new list; the input is
never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, List

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "heap_sort",
    "quicksort",
    "merge_sort",
    "sort_descending",
    "sort012",
]


def bubble_sort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending with bubble sort, stopping early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending by inserting each element into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i
        while j > 0 and result[j - 1] > key:
            result[j] = result[j - 1]
            j -= 1
        result[j] = key
    return result


def selection_sort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending by repeatedly moving the smallest remaining element forward."""
    result = list(items)
    size = len(result)
    for pos in range(size - 1):
        smallest = min(range(pos, size), key=result.__getitem__)
        result[pos], result[smallest] = result[smallest], result[pos]
    return result


def _sift_down(heap: List[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending using an in-place binary max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _partition(values: List[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quicksort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending with quicksort, partitioning around the last element."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending with top-down merge sort; the left half takes the middle element."""
    values = list(items)
    if len(values) < 2:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def sort_descending(items: Iterable[Any]) -> List[Any]:
    """Return the elements ordered from largest to smallest."""
    return sorted(items, reverse=True)


def sort012(items: Iterable[int]) -> List[int]:
    """Sort a sequence of 0s, 1s and 2s in a single pass.

    Raises ValueError if any element is not 0, 1 or 2.
    """
    result = list(items)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        value = result[mid]
        if value == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            raise ValueError(f"sort012 accepts only 0, 1 and 2, got {value!r}")
    return result