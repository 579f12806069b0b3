"""Range checks for command arguments and note properties."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T", int, float, str)


def validate_range(value: T, minimum: T, maximum: T) -> T:
    """Return `value` if it lies in [minimum, maximum], else raise ValueError."""
    if value < minimum or value > maximum:
        raise ValueError(f"value must be in range [{minimum}, {maximum}], got: {value}")
    return value


def validate_note_value(value: int) -> int:
    """Return `value` if it is a power of two in [1, 128], else raise ValueError."""
    low = value & 0xFF
    if value < 1 or value > 128 or low & ((low - 1) & 0xFF) != 0:
        raise ValueError(f"note value must be a power of 2 in the range [1, 128], got: {value}")
    return value


def validate_tuplet(value: int) -> int:
    """Return `value` if it is a supported tuplet division (3 or 5), else raise ValueError."""
    if value in (3, 5):
        return value
    raise ValueError(f"invalid tuplet value, got: {value}")