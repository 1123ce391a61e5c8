"""Range sums over even or odd positions, answered from prefix sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]], parity: int
) -> list[int]:
    prefix = [0, *accumulate(v if i % 2 == parity else 0 for i, v in enumerate(values))]
    size = len(values)
    results = []
    for left, right in queries:
        if not (0 <= left < size and 0 <= right < size):
            raise IndexError(f"query ({left}, {right}) is outside 0..{size - 1}")
        if left > right:
            raise ValueError(f"query ({left}, {right}) has its start after its end")
        results.append(prefix[right + 1] - prefix[left])
    return results


def even_index_range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each inclusive ``(left, right)`` query, sum the values at even indices."""
    return _range_sums(values, queries, 0)


def odd_index_range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each inclusive ``(left, right)`` query, sum the values at odd indices."""
    return _range_sums(values, queries, 1)