"""Error handling exercises: optional values, parsing and validated integers."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_CLOSING_HOUR = 22
_LAST_HOUR = 23


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly: optional sign and ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or any(c not in _DIGITS for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 1 << (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a given hour, or None for an hour past 23."""
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day < _CLOSING_HOUR:
        return 5
    if time_of_day <= _LAST_HOUR:
        return 0
    return None


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is rejected."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed quantity of items, including the processing fee."""
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost < 1 << 31:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationError(ValueError):
    """A value cannot be made into a positive nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive nonzero integer.

    ``error`` holds the underlying CreationError or integer parsing error.
    """

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive nonzero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc