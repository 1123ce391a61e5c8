"""Palindrome checks and longest palindromic substrings."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return text == text[::-1]


def longest_palindrome_brute(text: str) -> int:
    """Length of the longest palindromic substring, checking every substring."""
    best = 0
    for start in range(len(text)):
        for stop in range(start + 1, len(text) + 1):
            if stop - start > best and is_palindrome(text[start:stop]):
                best = stop - start
    return best


def _expand(text: str, left: int, right: int) -> int:
    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(text: str) -> int:
    """Length of the longest palindromic substring, expanding around each centre."""
    best = 0
    for centre in range(len(text)):
        best = max(best, _expand(text, centre, centre), _expand(text, centre, centre + 1))
    return best