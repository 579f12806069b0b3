"""Timing and range constants shared across the package."""

from __future__ import annotations

from datetime import timedelta

TICKS_PER_QUARTER = 960
TICKS_PER_WHOLE = 4 * TICKS_PER_QUARTER
DEFAULT_TEMPO = 120
DEFAULT_VELOCITY = 100
MAX_VALUE = 127
MAX_BEATS_PER_BAR = 128
MIN_TRACK = 1
MAX_TRACK = 16
PERCUSSION_TRACK = 10
MIN_VOICE = 1
MAX_VOICE = 4

_NANOS_PER_MINUTE = 60_000_000_000


def ticks_duration(tempo: float, ticks: int) -> timedelta:
    """Return how long `ticks` last at `tempo` beats per minute.

    The tick resolution is TICKS_PER_QUARTER ticks per quarter note.
    """
    if tempo <= 0:
        raise ValueError(f"tempo must be positive, got: {tempo}")
    if ticks < 0:
        raise ValueError(f"ticks must not be negative, got: {ticks}")
    nanos = round(_NANOS_PER_MINUTE * ticks / (tempo * TICKS_PER_QUARTER))
    return timedelta(microseconds=nanos / 1000)