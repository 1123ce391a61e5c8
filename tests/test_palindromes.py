import pytest

from arraykit.palindromes import (
    is_palindrome,
    longest_palindrome,
    longest_palindrome_brute,
)

SAMPLES = ["", "a", "ab", "aa", "babad", "cbbd", "forgeeksskeegfor", "abacdfgdcaba", "xyzzyxq"]


@pytest.mark.parametrize("text", ["", "a", "racecar", "abba"])
def test_is_palindrome_true(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "abca", "racecars"])
def test_is_palindrome_false(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("text", SAMPLES)
def test_both_methods_agree(text):
    assert longest_palindrome(text) == longest_palindrome_brute(text)


def test_odd_length_answer():
    assert longest_palindrome("babad") == 3


def test_even_length_answer():
    assert longest_palindrome("cbbd") == 2


@pytest.mark.parametrize("text", ["racecar", "abba", "zzzz", "q"])
def test_whole_palindrome(text):
    assert longest_palindrome(text) == len(text)
    assert longest_palindrome_brute(text) == len(text)


def test_embedded_palindrome():
    inner = "abccba"
    text = "xy" + inner + "q"
    assert longest_palindrome(text) == len(inner)


def test_empty_string():
    assert longest_palindrome("") == len("")


def test_bounded_by_length():
    for text in SAMPLES:
        result = longest_palindrome(text)
        assert (result >= 1) == bool(text)
        assert result <= len(text)