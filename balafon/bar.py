"""A bar of timed events under a time signature."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from balafon.constants import MAX_BEATS_PER_BAR, TICKS_PER_WHOLE, ticks_duration
from balafon.event import Event
from balafon.validation import validate_note_value, validate_range


@dataclass
class Bar:
    """A single bar of events."""

    events: list[Event] = field(default_factory=list)
    time_sig: tuple[int, int] = (4, 4)

    def set_time_sig(self, num: int, denom: int) -> None:
        """Set the time signature."""
        validate_range(num, 1, MAX_BEATS_PER_BAR)
        validate_note_value(denom)
        self.time_sig = (num, denom)

    def __str__(self) -> str:
        num, denom = self.time_sig
        text = f"time: {num}/{denom}"
        if self.events:
            text += "\nevents:\n" + "".join(f"{ev}\n" for ev in self.events)
        return text

    def is_zero_duration(self) -> bool:
        """Report whether the bar consists only of zero duration events."""
        return all(ev.duration <= 0 for ev in self.events)

    def cap(self) -> int:
        """Return the bar's capacity in ticks."""
        num, denom = self.time_sig
        return num * (TICKS_PER_WHOLE // denom)

    def duration(self, tempo: float) -> timedelta:
        """Return how long the bar lasts at `tempo`."""
        if self.is_zero_duration():
            return timedelta(0)
        return ticks_duration(tempo, self.cap())