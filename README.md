# arraykit

A small collection of classic algorithms over integer sequences and strings,
written as plain Python functions with no dependencies. Every function takes
ordinary sequences and returns new values; the inputs are never modified.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions |
| --- | --- |
| `arraykit.arrays` | `rotate`, `product_except_self`, `max_subarray_sum_brute`, `kadane`, `max_area`, `remove_duplicates`, `second_largest`, `special_index_count`, `count_candies` |
| `arraykit.number_theory` | `gcd`, `lcm`, `max_gcd_after_removal`, `count_lcm_pairs_brute`, `count_lcm_pairs`, `count_common_factor_pairs`, `count_mod_pairs_brute`, `count_mod_pairs`, `primes_up_to`, `smallest_prime_factors` |
| `arraykit.prefix_sums` | `even_index_range_sums`, `odd_index_range_sums` |
| `arraykit.searching` | `search_rotated`, `find_peak` |
| `arraykit.sorting` | `quicksort`, `count_activities` |
| `arraykit.palindromes` | `is_palindrome`, `longest_palindrome_brute`, `longest_palindrome` |
| `arraykit.cli` | `main` |

Where a problem has both a straightforward and a faster solution, both are
provided; the `_brute` variants are handy as a reference when checking the
faster one.

A few behaviours worth knowing:

- `rotate` rotates to the right; `k` is taken modulo the length.
- `max_subarray_sum_brute` counts the empty run, so it never returns less than
  zero; `kadane` requires a non-empty run and raises `ValueError` on empty input.
- `second_largest` returns the largest value strictly below the maximum and
  raises `ValueError` when there are fewer than two distinct values.
- `max_gcd_after_removal` returns `(best_gcd, removed_value)`, preferring the
  earliest position on ties, and needs at least two values.
- `count_mod_pairs` and `count_mod_pairs_brute` raise `ValueError` for a
  modulus that is not positive.
- `smallest_prime_factors(n)` returns a list indexed from 0 to `n`, with 0 and
  1 at positions 0 and 1.
- The range-sum functions take inclusive `(left, right)` queries and raise
  `IndexError` for positions outside the sequence and `ValueError` when
  `left > right`.
- `search_rotated` returns `-1` when the target is absent.
- `find_peak` returns a value strictly greater than its neighbours (the ends
  count as having lower neighbours outside) and raises `ValueError` when there
  is none or the input is empty.
- `count_activities` lets an activity start exactly when the previous one
  finishes, and raises `ValueError` if the two sequences differ in length.

## Examples

```python
from arraykit.arrays import max_area, count_candies, rotate
from arraykit.number_theory import gcd, primes_up_to
from arraykit.searching import search_rotated
from arraykit.palindromes import longest_palindrome

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])      # 49
count_candies([4, 4, 5, 4, 4, 4])          # 7
rotate([1, 2, 3, 4, 5], 2)                 # [4, 5, 1, 2, 3]
gcd(12, 18)                                # 6
primes_up_to(10)                           # [2, 3, 5, 7]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)   # 4
longest_palindrome("babad")                # 3
```

## Command line

The package installs an `arraykit` command with three subcommands:

```
arraykit rotate -k 2 1 2 3 4 5   # Rotated array: 4 5 1 2 3
arraykit primes 10               # 2, 3, 5, 7
                                 # Count of primes = 4
arraykit sort 3 1 2              # 1 2 3
```

See all options with:

```
arraykit --help
```

## What it does not do

The command line exposes only rotation, the prime sieve and quicksort; every
other algorithm is available from Python only. The command takes its numbers
as arguments and does not prompt for input or read from standard input.