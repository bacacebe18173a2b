"""Quicksort and binary search over lists."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Sequence


def quick_sort(items: MutableSequence, key: Callable[[Any], Any] | None = None) -> None:
    """Sort ``items`` in place with a last-element-pivot quicksort."""
    keyed = key or (lambda item: item)
    ranges = [(0, len(items) - 1)]
    while ranges:
        left, right = ranges.pop()
        if left >= right:
            continue
        pivot_key = keyed(items[right])
        boundary = left
        for i in range(left, right):
            if keyed(items[i]) < pivot_key:
                items[i], items[boundary] = items[boundary], items[i]
                boundary += 1
        items[right], items[boundary] = items[boundary], items[right]
        ranges.append((left, boundary - 1))
        ranges.append((boundary + 1, right))


def binary_search(items: Sequence, value: Any) -> int | None:
    """Index of ``value`` in sorted ``items``, or ``None`` if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if items[mid] == value:
            return mid
        if value < items[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return None