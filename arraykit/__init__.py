"""Classic array, number-theory, searching, sorting and palindrome algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "number_theory",
    "prefix_sums",
    "searching",
    "sorting",
    "palindromes",
    "cli",
]