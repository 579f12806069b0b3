"""Timed events produced by evaluating a script."""

from __future__ import annotations

from dataclasses import dataclass

from balafon.constants import MAX_TRACK, MAX_VOICE
from balafon.nodes import Note


class Channel(int):
    """A MIDI channel, 0-based."""

    def __new__(cls, value: int) -> Channel:
        if not 0 <= value < MAX_TRACK:
            raise ValueError(f"MIDI channel must be in range [0, {MAX_TRACK - 1}], got: {value}")
        return super().__new__(cls, value)

    def human(self) -> int:
        """Return the 1-based channel number."""
        return int(self) + 1


class Voice(int):
    """A score voice; 0 means none."""

    def __new__(cls, value: int = 0) -> Voice:
        if not 0 <= value <= MAX_VOICE:
            raise ValueError(f"voice must be in range [0, {MAX_VOICE}], got: {value}")
        return super().__new__(cls, value)


def channel_from_midi(ch: int) -> Channel:
    """Create a channel from a 0-based MIDI channel number."""
    return Channel(ch)


def channel_from_human(ch: int) -> Channel:
    """Create a channel from a 1-based channel number."""
    return Channel(ch - 1)


@dataclass
class Event:
    """A message placed in a bar.

    `pos` is in ticks from the beginning of the bar, `duration` in ticks,
    and `track` is the 1-based MIDI channel (0 when unset).
    """

    note: Note | None = None
    message: object = ""
    is_flat: bool = False
    pos: int = 0
    duration: int = 0
    voice: Voice = Voice(0)
    track: int = 0

    def __str__(self) -> str:
        parts = []
        if self.track > 0:
            parts.append(f"track: {self.track} ")
        parts.append(f"pos: {self.pos} dur: {self.duration}")
        if self.voice > 0:
            parts.append(f" voice: {self.voice}")
        if self.note is not None:
            parts.append(f" note: {self.note}")
        parts.append(f" message: {self.message}")
        return "".join(parts)