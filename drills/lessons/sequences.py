"""Sequence exercises: arrays, lists, slices and tuple indexing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def middle_slice(values: Sequence[Any]) -> Sequence[Any]:
    """Return the elements at positions 1 to 3."""
    return values[1:4]


def second_element(numbers: Sequence[Any]) -> Any:
    """Return the second element of a sequence."""
    return numbers[1]