"""Divisibility, prime sieves and pair counting."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero when either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a // gcd(a, b) * b)


def max_gcd_after_removal(values: Sequence[int]) -> tuple[int, int]:
    """Drop one element to maximise the gcd of the rest.

    Returns ``(best_gcd, removed_value)``; on ties the earliest position wins.
    """
    if len(values) < 2:
        raise ValueError("need at least two values")
    prefix = list(accumulate(values, gcd))
    suffix = list(accumulate(reversed(values), gcd))[::-1]
    best_gcd: int | None = None
    best_index = 0
    last = len(values) - 1
    for index in range(len(values)):
        if index == 0:
            current = suffix[1]
        elif index == last:
            current = prefix[last - 1]
        else:
            current = gcd(prefix[index - 1], suffix[index + 1])
        if best_gcd is None or current > best_gcd:
            best_gcd, best_index = current, index
    return best_gcd, values[best_index]


def count_lcm_pairs_brute(values: Sequence[int]) -> int:
    """Count pairs whose lcm exceeds ten times their maximum, checking each pair."""
    return sum(1 for a, b in combinations(values, 2) if lcm(a, b) > max(a, b) * 10)


def count_lcm_pairs(values: Sequence[int]) -> int:
    """Count pairs whose lcm exceeds ten times their maximum.

    With the pair sorted so that ``a <= b``, the condition reduces to
    ``a // gcd(a, b) > 10``.
    """
    ordered = sorted(values)
    return sum(1 for a, b in combinations(ordered, 2) if a // gcd(b, a) > 10)


def count_common_factor_pairs(values: Sequence[int]) -> int:
    """Count pairs that share a factor greater than one."""
    return sum(1 for a, b in combinations(values, 2) if gcd(a, b) > 1)


def _check_modulus(m: int) -> None:
    if m <= 0:
        raise ValueError("modulus must be positive")


def count_mod_pairs_brute(values: Sequence[int], m: int) -> int:
    """Count pairs whose sum is divisible by ``m``, checking each pair."""
    _check_modulus(m)
    return sum(1 for a, b in combinations(values, 2) if (a + b) % m == 0)


def count_mod_pairs(values: Sequence[int], m: int) -> int:
    """Count pairs whose sum is divisible by ``m`` using remainder counts."""
    _check_modulus(m)
    remainders = Counter(value % m for value in values)
    pairs = 0
    for rem in range(m // 2 + 1):
        partner = (m - rem) % m
        if rem == partner:
            pairs += math.comb(remainders[rem], 2)
        else:
            pairs += remainders[rem] * remainders[partner]
    return pairs


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    for candidate in range(2, math.isqrt(n) + 1):
        if is_prime[candidate]:
            for multiple in range(candidate * candidate, n + 1, candidate):
                is_prime[multiple] = False
    return [number for number, prime in enumerate(is_prime) if prime]


def smallest_prime_factors(n: int) -> list[int]:
    """Smallest prime factor of every number from 0 to ``n``.

    Entry ``k`` holds the factor of ``k``; entries 0 and 1 hold 0 and 1.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    factors = [0] * (n + 1)
    if n >= 1:
        factors[1] = 1
    for candidate in range(2, n + 1):
        if factors[candidate]:
            continue
        factors[candidate] = candidate
        for multiple in range(candidate * candidate, n + 1, candidate):
            if not factors[multiple]:
                factors[multiple] = candidate
    return factors