"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

_BULK_THRESHOLD = 40
_REGULAR_PRICE = 2
_BULK_PRICE = 1


def calculate_price_of_apples(counts: int) -> int:
    """Price of an order: 2 each, or 1 each when more than 40 are bought."""
    price = _BULK_PRICE if counts > _BULK_THRESHOLD else _REGULAR_PRICE
    return counts * price


class Command:
    """An action the transformer applies to a string."""


@dataclass(frozen=True)
class Uppercase(Command):
    """Uppercase the string."""


@dataclass(frozen=True)
class Trim(Command):
    """Strip whitespace from both ends of the string."""


@dataclass(frozen=True)
class Append(Command):
    """Append "bar" to the string a given number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, keeping the input order."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: Any
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )