"""Searches that exploit partial order: rotated arrays and peaks."""

from __future__ import annotations

from collections.abc import Sequence


def search_rotated(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence, or -1 if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[start] <= values[mid]:
            if values[start] <= target <= values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] <= target <= values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def _is_peak(values: Sequence[int], index: int) -> bool:
    value = values[index]
    left_ok = index == 0 or values[index - 1] < value
    right_ok = index == len(values) - 1 or values[index + 1] < value
    return left_ok and right_ok


def find_peak(values: Sequence[int]) -> int:
    """Return a value strictly greater than its neighbours.

    Positions past either end count as lower than anything.
    """
    if not values:
        raise ValueError("find_peak() needs at least one value")
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if values[mid] < values[mid + 1]:
            low = mid + 1
        else:
            high = mid
    if _is_peak(values, low):
        return values[low]
    # Plateaus can hide a strict peak from the bisection.
    for index in range(len(values)):
        if _is_peak(values, index):
            return values[index]
    raise ValueError("no element is strictly greater than its neighbours")