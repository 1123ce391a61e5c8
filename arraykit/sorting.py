"""Quicksort and greedy activity selection."""

from __future__ import annotations

from collections.abc import Sequence


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for index in range(low, high):
        if items[index] <= pivot:
            boundary += 1
            items[boundary], items[index] = items[index], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quicksort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using Lomuto-partition quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def count_activities(start: Sequence[int], finish: Sequence[int]) -> int:
    """Most activities that can be held one after another without overlap.

    An activity may begin at the moment the previous one finishes.
    """
    if len(start) != len(finish):
        raise ValueError("start and finish must have the same length")
    count = 0
    end: int | None = None
    for begin, stop in sorted(zip(start, finish), key=lambda pair: pair[1]):
        if end is not None and begin < end:
            continue
        count += 1
        end = stop
    return count