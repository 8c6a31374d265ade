"""Conversion exercises: people from text and colours from integer triples."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_USIZE_MAX = (1 << 64) - 1
_CHANNEL_MAX = 255


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer strictly: optional '+' and ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text.removeprefix("+")
    if not digits or any(c not in _DIGITS for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int


def default_person() -> Person:
    """The fallback person: John, aged 30."""
    return Person(name="John", age=30)


def person_from(text: str) -> Person:
    """Build a person from "name,age", falling back to the default on any problem."""
    if not text:
        return default_person()
    fields = text.split(",")
    name = fields[0]
    if not name or len(fields) < 2:
        return default_person()
    try:
        age = _parse_usize(fields[1])
    except ValueError:
        return default_person()
    return Person(name=name, age=age)


class ParsePersonError(ValueError):
    """Text could not be parsed into a person.

    ``kind`` is one of EMPTY, BAD_LEN, NO_NAME or PARSE_INT; for PARSE_INT
    ``cause`` holds the integer parsing error.
    """

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"

    def __init__(self, kind: str, cause: ValueError | None = None) -> None:
        super().__init__(kind if cause is None else f"{kind}: {cause}")
        self.kind = kind
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePersonError):
            return NotImplemented
        return self.kind == other.kind and str(self.cause) == str(other.cause)

    def __hash__(self) -> int:
        return hash(self.kind)


def parse_person(text: str) -> Person:
    """Parse "name,age" into a person, raising ParsePersonError on any problem."""
    if not text:
        raise ParsePersonError(ParsePersonError.EMPTY)
    fields = text.split(",")
    if len(fields) != 2:
        raise ParsePersonError(ParsePersonError.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(ParsePersonError.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as exc:
        raise ParsePersonError(ParsePersonError.PARSE_INT, exc) from exc
    return Person(name=name, age=age)


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorError(ValueError):
    """Values could not be converted into a colour."""

    BAD_LEN = "incorrect number of values"
    INT_CONVERSION = "value out of the 0..=255 range"

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntoColorError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


def _channel(value: int) -> int:
    if not 0 <= value <= _CHANNEL_MAX:
        raise IntoColorError(IntoColorError.INT_CONVERSION)
    return value


def _from_three(values: Sequence[int]) -> Color:
    red, green, blue = (_channel(value) for value in values)
    return Color(red=red, green=green, blue=blue)


def _require_three(values: Sequence[int], kind: str) -> None:
    if len(values) != 3:
        raise TypeError(f"a colour {kind} holds exactly three values, got {len(values)}")


def color_from_tuple(values: tuple[int, int, int]) -> Color:
    """Convert a triple of integers into a colour."""
    _require_three(values, "tuple")
    return _from_three(values)


def color_from_array(values: Sequence[int]) -> Color:
    """Convert a fixed array of three integers into a colour."""
    _require_three(values, "array")
    return _from_three(values)


def color_from_slice(values: Sequence[int]) -> Color:
    """Convert a sequence of integers into a colour, checking its length."""
    if len(values) != 3:
        raise IntoColorError(IntoColorError.BAD_LEN)
    return _from_three(values)