"""MusicXML score model with serialization to partwise XML."""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.sax.saxutils import escape

_TEXT_ENTITIES = {'"': "&#34;", "'": "&#39;", "\t": "&#x9;", "\r": "&#xD;"}
_ATTR_ENTITIES = {**_TEXT_ENTITIES, "\n": "&#xA;"}


def _attrs(attrs: dict[str, str]) -> str:
    return "".join(f' {name}="{escape(value, _ATTR_ENTITIES)}"' for name, value in attrs.items())


def _element(name: str, body: str = "", **attrs: str) -> str:
    return f"<{name}{_attrs(attrs)}>{body}</{name}>"


def _text(name: str, value: object) -> str:
    return _element(name, escape(str(value), _TEXT_ENTITIES))


@dataclass
class ScoreInstrument:
    """An instrument of a score part."""

    id: str
    name: str

    def _xml(self) -> str:
        return _element("score-instrument", _text("instrument-name", self.name), id=self.id)


@dataclass
class ScorePart:
    """An entry of the part list."""

    id: str
    name: str
    score_instrument: ScoreInstrument | None = None

    def _xml(self) -> str:
        body = _text("part-name", self.name)
        if self.score_instrument is not None:
            body += self.score_instrument._xml()
        return _element("score-part", body, id=self.id)


@dataclass
class PartList:
    """The list of parts in a score."""

    parts: list[ScorePart] = field(default_factory=list)

    def _xml(self) -> str:
        return _element("part-list", "".join(part._xml() for part in self.parts))


@dataclass
class Encoding:
    """Encoding information."""

    software: str = ""
    date: str = ""

    def _xml(self) -> str:
        body = ""
        if self.software:
            body += _text("software", self.software)
        if self.date:
            body += _text("encoding-date", self.date)
        return _element("encoding", body)


@dataclass
class Identification:
    """Identification information of a score."""

    composer: str = ""
    encoding: Encoding | None = None
    rights: str = ""
    source: str = ""
    title: str = ""

    def _xml(self) -> str:
        body = ""
        if self.composer:
            body += _text("creator", self.composer)
        if self.encoding is not None:
            body += self.encoding._xml()
        if self.rights:
            body += _text("rights", self.rights)
        if self.source:
            body += _text("source", self.source)
        if self.title:
            body += _text("movement-title", self.title)
        return _element("identification", body)


@dataclass
class Clef:
    """A clef change."""

    sign: str
    line: int = 0

    def _xml(self) -> str:
        body = _text("sign", self.sign)
        if self.line:
            body += _text("line", self.line)
        return _element("clef", body)


@dataclass
class Key:
    """A key signature change."""

    mode: str
    fifths: int

    def _xml(self) -> str:
        return _element("key", _text("mode", self.mode) + _text("fifths", self.fifths))


@dataclass
class Time:
    """A time signature change."""

    beats: int
    beat_type: int

    def _xml(self) -> str:
        return _element("time", _text("beats", self.beats) + _text("beat-type", self.beat_type))


@dataclass
class Attributes:
    """Measure attributes."""

    key: Key | None = None
    time: Time | None = None
    clef: Clef | None = None
    divisions: int = 0

    def _xml(self) -> str:
        body = "".join(part._xml() for part in (self.key, self.time, self.clef) if part is not None)
        if self.divisions:
            body += _text("divisions", self.divisions)
        return _element("attributes", body)


@dataclass
class Pitch:
    """The pitch of a note."""

    step: str
    octave: int
    alter: int = 0

    def _xml(self) -> str:
        return _element("pitch", _text("step", self.step) + _text("octave", self.octave) + _text("alter", self.alter))


@dataclass
class Tie:
    """A tie start or stop."""

    type: str

    def _xml(self) -> str:
        return _element("tie", type=self.type)


@dataclass
class NoteHead:
    """A notehead element; `value` is inserted as raw inner XML."""

    filled: str = ""
    parentheses: str = ""
    value: str = ""

    def _xml(self) -> str:
        return _element("notehead", self.value, filled=self.filled, parentheses=self.parentheses)


@dataclass
class Note:
    """A note or rest in a measure."""

    duration: int
    pitch: Pitch | None = None
    rest: bool = False
    chord: bool = False
    tie: Tie | None = None
    notehead: NoteHead | None = None
    type: str = ""
    voice: int = 0

    def _xml(self) -> str:
        body = ""
        if self.pitch is not None:
            body += self.pitch._xml()
        if self.rest:
            body += _element("rest")
        if self.chord:
            body += _element("chord")
        if self.tie is not None:
            body += self.tie._xml()
        if self.notehead is not None:
            body += self.notehead._xml()
        if self.type:
            body += _text("type", self.type)
        body += _text("duration", self.duration)
        if self.voice:
            body += _text("voice", self.voice)
        return _element("note", body)


@dataclass
class Backup:
    """Moves the time cursor back within a measure."""

    duration: int

    def _xml(self) -> str:
        return _element("backup", _text("duration", self.duration))


@dataclass
class Measure:
    """A measure of a part."""

    number: int
    attributes: Attributes = field(default_factory=Attributes)
    notes: list[Note | Backup] = field(default_factory=list)

    def _xml(self) -> str:
        body = self.attributes._xml() + "".join(note._xml() for note in self.notes)
        return _element("measure", body, number=str(self.number))


@dataclass
class Part:
    """A part of a score."""

    id: str
    measures: list[Measure] = field(default_factory=list)

    def _xml(self) -> str:
        return _element("part", "".join(m._xml() for m in self.measures), id=self.id)


@dataclass
class Score:
    """A partwise MusicXML score."""

    version: str = ""
    identification: Identification | None = None
    part_list: PartList = field(default_factory=PartList)
    parts: list[Part] = field(default_factory=list)

    def to_xml(self) -> str:
        """Serialize the score as a compact score-partwise XML element."""
        body = ""
        if self.identification is not None:
            body += self.identification._xml()
        body += self.part_list._xml()
        body += "".join(part._xml() for part in self.parts)
        return _element("score-partwise", body, version=self.version)