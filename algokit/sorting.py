"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item after every larger-or-equal prefix item."""
    result: list[Any] = []
    for item in items:
        position = len(result)
        while position > 0 and result[position - 1] > item:
            position -= 1
        result.insert(position, item)
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    sequence = list(items)
    if len(sequence) <= 1:
        return sequence
    middle = (len(sequence) + 1) // 2
    return _merge(merge_sort(sequence[:middle]), merge_sort(sequence[middle:]))


def _partition(sequence: list[Any], low: int, high: int) -> int:
    pivot = sequence[high]
    boundary = low
    for j in range(low, high):
        if sequence[j] < pivot:
            sequence[boundary], sequence[j] = sequence[j], sequence[boundary]
            boundary += 1
    sequence[boundary], sequence[high] = sequence[high], sequence[boundary]
    return boundary


def _quick_sort_range(sequence: list[Any], low: int, high: int) -> None:
    # Recurse into the smaller side only, so the depth stays logarithmic.
    while low < high:
        pivot = _partition(sequence, low, high)
        if pivot - low < high - pivot:
            _quick_sort_range(sequence, low, pivot - 1)
            low = pivot + 1
        else:
            _quick_sort_range(sequence, pivot + 1, high)
            high = pivot - 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    result = list(items)
    _quick_sort_range(result, 0, len(result) - 1)
    return result


def format_list(items: Iterable[Any]) -> str:
    """Render items as ``[a, b, c]``."""
    return "[" + ", ".join(str(item) for item in items) + "]"