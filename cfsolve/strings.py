"""Solutions to string-processing problems."""

from __future__ import annotations

import string
from collections import Counter

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)


def is_nearly_lucky(number: int | str) -> bool:
    """Return True if the count of lucky digits (4 and 7) is itself 4 or 7."""
    lucky = sum(digit in "47" for digit in str(number))
    return lucky in (4, 7)


def compare_ignoring_case(first: str, second: str) -> int:
    """Compare two equal-length strings ignoring ASCII case; return -1, 0 or 1."""
    if len(first) != len(second):
        raise ValueError("strings must have the same length")
    for left, right in zip(first.translate(_TO_LOWER), second.translate(_TO_LOWER)):
        if left != right:
            return 1 if left > right else -1
    return 0


def produces_output(program: str) -> bool:
    """Return True if an HQ9+ program prints anything."""
    return any(instruction in "HQ9" for instruction in program)


def can_restore_names(guest: str, host: str, pile: str) -> bool:
    """Return True if the pile of uppercase letters is exactly the two names."""
    for text in (guest, host, pile):
        if not set(text) <= _UPPER:
            raise ValueError("names must consist of uppercase Latin letters")
    return Counter(guest) + Counter(host) == Counter(pile)


def gender_by_username(username: str) -> str:
    """Guess a gender from the parity of distinct characters in a username."""
    letters = set(username)
    if not letters <= _LOWER:
        raise ValueError("username must consist of lowercase Latin letters")
    return "IGNORE HIM" if len(letters) % 2 else "CHAT WITH HER!"


def stones_to_remove(stones: str) -> int:
    """Count stones to remove so that no two neighbours share a colour."""
    return sum(left == right for left, right in zip(stones, stones[1:]))


def capitalize_word(word: str) -> str:
    """Uppercase the first letter of a word if it is a lowercase ASCII letter."""
    if word and word[0] in _LOWER:
        return word[0].translate(_TO_UPPER) + word[1:]
    return word


def fix_word_case(word: str) -> str:
    """Convert a word to lowercase unless it has more uppercase letters."""
    balance = sum((ch in _LOWER) - (ch in _UPPER) for ch in word)
    return word.translate(_TO_UPPER) if balance < 0 else word.translate(_TO_LOWER)


def xor_digits(first: str, second: str) -> str:
    """Return the digit-wise difference of two equal-length binary strings."""
    if len(first) != len(second):
        raise ValueError("numbers must have the same length")
    return "".join("0" if left == right else "1" for left, right in zip(first, second))


def abbreviate(word: str) -> str:
    """Abbreviate words longer than ten characters as first, count, last."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def rearrange_sum(expression: str) -> str:
    """Reorder a sum of the terms 1, 2 and 3 into non-decreasing order."""
    terms = expression.split("+")
    if any(term not in ("1", "2", "3") for term in terms):
        raise ValueError("expression must be a sum of the numbers 1, 2 and 3")
    return "+".join(sorted(terms))