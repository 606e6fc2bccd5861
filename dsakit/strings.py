"""Common string puzzles: brackets, prefixes, palindromes, rotations and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(s: str) -> bool:
    """True if every (), {} and [] in ``s`` is closed in the right order.

    Characters that are not brackets are ignored.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def first_unique_char(s: str) -> int:
    """Index of the first character that occurs only once, or -1 if there is none."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Longest prefix shared by every string; empty when there are no strings."""
    items = list(strs)
    if not items:
        return ""
    first, last = min(items), max(items)
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def is_numeric(s: str) -> bool:
    """True if ``s`` holds only the digits 0-9 (an empty string qualifies)."""
    return all("0" <= char <= "9" for char in s)


def reverse_words(s: str) -> str:
    """The words of ``s`` in reverse order, joined by single spaces."""
    return " ".join(reversed(s.split()))


def reverse_string(s: str) -> str:
    """``s`` read back to front."""
    return s[::-1]


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` is a rearrangement of the characters of ``s``."""
    return sorted(s) == sorted(t)


def is_palindrome(s: str) -> bool:
    """Palindrome test over ASCII letters and digits only, ignoring case."""
    kept = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return kept == kept[::-1]


def longest_unique_substring(s: str) -> int:
    """Length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    left = best = 0
    for right, char in enumerate(s):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def is_rotation(s1: str, s2: str) -> bool:
    """True if ``s2`` is ``s1`` rotated by some number of places."""
    return len(s1) == len(s2) and s2 in s1 + s1