"""Classic sorting algorithms.

Every function takes an iterable, leaves it untouched and returns a new
list holding its items in ascending order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with a binary max-heap built in place."""
    items = list(values)
    size = len(items)
    for start in range(size // 2 - 1, -1, -1):
        _sift_down(items, start, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def _sift_down(items: list[Any], root: int, size: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for left in range(last):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
        if not swapped:
            break
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    for value in items:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"counting sort needs integers, got {value!r}")
        if value < 0:
            raise ValueError(f"counting sort needs non-negative integers, got {value}")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def cycle_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by rotating each cycle of misplaced items into position."""
    items = list(values)
    size = len(items)
    for start in range(size - 1):
        item = items[start]
        pos = _cycle_position(items, start, item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = _cycle_position(items, start, item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def _cycle_position(items: list[Any], start: int, item: Any) -> int:
    return start + sum(1 for other in items[start + 1:] if other < item)


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for index in range(1, len(items)):
        key = items[index]
        hole = index
        while hole > 0 and items[hole - 1] > key:
            items[hole] = items[hole - 1]
            hole -= 1
        items[hole] = key
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for index in range(len(items)):
        smallest = min(range(index, len(items)), key=items.__getitem__)
        items[index], items[smallest] = items[smallest], items[index]
    return items


def sort_stack(stack: Iterable[Any]) -> list[Any]:
    """Sort a stack recursively, using only push and pop.

    The stack is given bottom first; the result has its largest item on top,
    that is, last.
    """
    items = list(stack)
    _sort_stack(items)
    return items


def _sort_stack(items: list[Any]) -> None:
    if items:
        top = items.pop()
        _sort_stack(items)
        _sorted_insert(items, top)


def _sorted_insert(items: list[Any], value: Any) -> None:
    if not items or value > items[-1]:
        items.append(value)
        return
    top = items.pop()
    _sorted_insert(items, value)
    items.append(top)