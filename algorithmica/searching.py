"""Searching in sequences and strings, and inversion counting."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Any


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to target, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of target in the ascending sequence values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        current = values[middle]
        if current == target:
            return middle
        if current > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def contains_sorted(values: Iterable[Any], target: Any) -> bool:
    """Sort values and report whether target is among them."""
    ordered = sorted(values)
    position = bisect_left(ordered, target)
    return position < len(ordered) and ordered[position] == target


def lps_table(pattern: Sequence[Any]) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of pattern."""
    table = [0] * len(pattern)
    length = 0
    for index in range(1, len(pattern)):
        while length and pattern[index] != pattern[length]:
            length = table[length - 1]
        if pattern[index] == pattern[length]:
            length += 1
        table[index] = length
    return table


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Return every start index of pattern in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = lps_table(pattern)
    matches: list[int] = []
    matched = 0
    for index, symbol in enumerate(text):
        while matched and symbol != pattern[matched]:
            matched = table[matched - 1]
        if symbol == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            matches.append(index - matched + 1)
            matched = table[matched - 1]
    return matches


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return sum(1 for first, second in combinations(values, 2) if first > second)