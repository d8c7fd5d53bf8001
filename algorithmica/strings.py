"""String puzzles: reversal, anagrams, bracket matching and more."""

from __future__ import annotations

from collections import Counter

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping the spacing."""
    return " ".join(reversed(text.split(" ")))


def reverse_string(text: str) -> str:
    """Return the characters of text in reverse order."""
    return text[::-1]


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters equally often."""
    return Counter(first) == Counter(second)


def is_balanced(expression: str) -> bool:
    """Strict bracket check.

    Any character other than an opening bracket met while no bracket is
    open makes the expression unbalanced; other characters are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        if char in _PAIRS and stack.pop() != _PAIRS[char]:
            return False
    return not stack


def is_valid_brackets(text: str) -> bool:
    """Tell whether every bracket is closed by its own kind, in order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    valid = True
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if stack and stack[-1] == _PAIRS[char]:
                stack.pop()
            else:
                valid = False
    return valid and not stack


def minimum_ternary_string(text: str) -> str:
    """Smallest string reachable by swapping adjacent 0/1 and 1/2 pairs."""
    if set(text) - {"0", "1", "2"}:
        raise ValueError(f"expected only the digits 0, 1 and 2: {text!r}")
    ones = "1" * text.count("1")
    first_two = text.find("2")
    if first_two == -1:
        return "0" * text.count("0") + ones
    head = text[:first_two]
    return "0" * head.count("0") + ones + text[first_two:].replace("1", "")


def star_pattern(lines: int, reverse: bool = False) -> list[str]:
    """Rows of a right triangle of stars, growing or, if reverse, shrinking."""
    if lines <= 0:
        raise ValueError(f"number of lines must be positive, got {lines}")
    rows = ["*" * width for width in range(1, lines + 1)]
    return rows[::-1] if reverse else rows