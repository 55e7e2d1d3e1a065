"""Small operations on lists of integers."""

from __future__ import annotations

from collections.abc import Iterable


def find_max(numbers: Iterable[int]) -> int:
    """Return the largest value in ``numbers``, or 0 when it is empty."""
    return max(numbers, default=0)


def remove_duplicates(numbers: Iterable[int]) -> list[int]:
    """Return a new list without repeated values, keeping first occurrences in order."""
    return list(dict.fromkeys(numbers))


def reverse_slice(values: Iterable[int]) -> list[int]:
    """Return a new list with the elements of ``values`` in reverse order."""
    return list(values)[::-1]


def filter_even(numbers: Iterable[int]) -> list[int]:
    """Return a new list holding only the even numbers of ``numbers``."""
    return [number for number in numbers if number % 2 == 0]