"""Classic array algorithms: rotation, products, subarray sums and counting."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated right by ``k`` steps."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    result = []
    left = 1
    for value in values:
        result.append(left)
        left *= value
    right = 1
    for index in reversed(range(len(result))):
        result[index] *= right
        right *= values[index]
    return result


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, checking every run.

    The empty run counts, so the result is never below zero.
    """
    best = 0
    for start in range(len(values)):
        total = 0
        for value in values[start:]:
            total += value
            best = max(best, total)
    return best


def kadane(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, in linear time."""
    if not values:
        raise ValueError("kadane() needs at least one value")
    iterator = iter(values)
    current = best = next(iterator)
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_area(heights: Sequence[int]) -> int:
    """Most water held between two of the given walls."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        depth = min(heights[left], heights[right])
        best = max(best, depth * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Collapse runs of equal values in a sorted sequence."""
    return [key for key, _ in groupby(values)]


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum."""
    largest: int | None = None
    second: int | None = None
    for value in values:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value < largest and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("no second largest value: fewer than two distinct values")
    return second


def special_index_count(values: Sequence[int]) -> int:
    """Count positions whose removal leaves equal odd- and even-index sums."""
    total_even = sum(values[0::2])
    total_odd = sum(values[1::2])
    before_even = before_odd = 0
    count = 0
    for index, value in enumerate(values):
        after_even = total_even - before_even - (value if index % 2 == 0 else 0)
        after_odd = total_odd - before_odd - (value if index % 2 == 1 else 0)
        # Elements after the removed one swap parity.
        if before_even + after_odd == before_odd + after_even:
            count += 1
        if index % 2 == 0:
            before_even += value
        else:
            before_odd += value
    return count


def count_candies(ratings: Sequence[int]) -> int:
    """Fewest candies so that each child gets one and beats lower-rated neighbours."""
    counts = [1] * len(ratings)
    for index in range(1, len(ratings)):
        if ratings[index] > ratings[index - 1]:
            counts[index] = counts[index - 1] + 1
    for index in reversed(range(len(ratings) - 1)):
        if ratings[index] > ratings[index + 1]:
            counts[index] = max(counts[index], counts[index + 1] + 1)
    return sum(counts)