"""Script commands: note assignment, tempo, time, channel, voice and friends."""

from __future__ import annotations

from dataclasses import dataclass, field

from balafon.constants import MAX_BEATS_PER_BAR, MAX_TRACK, MAX_VALUE, MAX_VOICE, MIN_TRACK, MIN_VOICE
from balafon.lexer import Pos
from balafon.validation import validate_note_value, validate_range

_MAX_UINT16 = 0xFFFF


@dataclass(frozen=True)
class CmdAssign:
    """Assigns a MIDI key to a note symbol."""

    note: str
    key: int
    pos: Pos = field(default_factory=Pos, compare=False)

    def __str__(self) -> str:
        return f":assign {self.note} {self.key}"


@dataclass(frozen=True)
class CmdTempo:
    """Changes the tempo in beats per minute."""

    bpm: int

    def value(self) -> float:
        """Return the tempo as a float."""
        return float(self.bpm)

    def __str__(self) -> str:
        return f":tempo {self.bpm}"


@dataclass(frozen=True)
class CmdTime:
    """Changes the time signature."""

    num: int
    denom: int

    def __str__(self) -> str:
        return f":time {self.num} {self.denom}"


@dataclass(frozen=True)
class CmdChannel:
    """Changes the MIDI channel, in human numbering."""

    channel: int

    def __str__(self) -> str:
        return f":channel {self.channel}"


@dataclass(frozen=True)
class CmdVoice:
    """Changes the score voice."""

    voice: int

    def __str__(self) -> str:
        return f":voice {self.voice}"


@dataclass(frozen=True)
class CmdVelocity:
    """Changes the note velocity."""

    velocity: int

    def __str__(self) -> str:
        return f":velocity {self.velocity}"


@dataclass(frozen=True)
class CmdProgram:
    """Sends a program change."""

    program: int

    def __str__(self) -> str:
        return f":program {self.program}"


@dataclass(frozen=True)
class CmdControl:
    """Sends a control change."""

    control: int
    parameter: int

    def __str__(self) -> str:
        return f":control {self.control} {self.parameter}"


@dataclass(frozen=True)
class CmdPlay:
    """Plays a named bar."""

    bar_name: str
    pos: Pos = field(default_factory=Pos, compare=False)

    def __str__(self) -> str:
        return f":play {self.bar_name}"


@dataclass(frozen=True)
class CmdStart:
    """Sends a start message."""

    def __str__(self) -> str:
        return ":start"


@dataclass(frozen=True)
class CmdStop:
    """Sends a stop message."""

    def __str__(self) -> str:
        return ":stop"


@dataclass(frozen=True)
class CmdKey:
    """Changes the key signature."""

    key: str

    def __str__(self) -> str:
        return f":key {self.key}"


def new_cmd_assign(pos: Pos, note: str, key: int) -> CmdAssign:
    """Create a note assignment command."""
    if len(note) != 1:
        raise ValueError(f"note must be a single character, got: {note!r}")
    validate_range(key, 0, MAX_VALUE)
    return CmdAssign(note=note, key=key, pos=pos)


def new_cmd_tempo(bpm: int) -> CmdTempo:
    """Create a tempo command."""
    validate_range(bpm, 1, _MAX_UINT16)
    return CmdTempo(bpm)


def new_cmd_time(num: int, denom: int) -> CmdTime:
    """Create a time signature command."""
    validate_range(num, 1, MAX_BEATS_PER_BAR)
    validate_note_value(denom)
    return CmdTime(num, denom)


def new_cmd_channel(value: int) -> CmdChannel:
    """Create a channel change command."""
    validate_range(value, MIN_TRACK, MAX_TRACK)
    return CmdChannel(value)


def new_cmd_voice(value: int) -> CmdVoice:
    """Create a voice change command."""
    validate_range(value, MIN_VOICE, MAX_VOICE)
    return CmdVoice(value)


def new_cmd_velocity(value: int) -> CmdVelocity:
    """Create a velocity change command."""
    validate_range(value, 0, MAX_VALUE)
    return CmdVelocity(value)


def new_cmd_program(value: int) -> CmdProgram:
    """Create a program change command."""
    validate_range(value, 0, MAX_VALUE)
    return CmdProgram(value)


def new_cmd_control(control: int, value: int) -> CmdControl:
    """Create a control change command."""
    validate_range(control, 0, MAX_VALUE)
    validate_range(value, 0, MAX_VALUE)
    return CmdControl(control, value)


def new_cmd_play(pos: Pos, bar_name: str) -> CmdPlay:
    """Create a bar play command."""
    return CmdPlay(bar_name=bar_name, pos=pos)


def new_cmd_key(key: str) -> CmdKey:
    """Create a key change command."""
    return CmdKey(key)