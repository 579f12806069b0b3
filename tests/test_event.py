import pytest

from balafon.event import Channel, Event, Voice, channel_from_human, channel_from_midi
from balafon.lexer import Pos, Token, TokenType
from balafon.nodes import Note
from balafon.properties import PropertyList


@pytest.mark.parametrize("human", range(1, 17))
def test_channel_human_round_trip(human):
    ch = channel_from_human(human)
    assert ch.human() == human
    assert channel_from_midi(int(ch)) == ch


def test_channel_from_midi_keeps_value():
    assert channel_from_midi(9) == 9
    assert channel_from_midi(9).human() == 10


@pytest.mark.parametrize("value", [-1, 16])
def test_channel_out_of_range(value):
    with pytest.raises(ValueError):
        Channel(value)


def test_channel_from_human_zero_is_invalid():
    with pytest.raises(ValueError):
        channel_from_human(0)


def test_voice_out_of_range():
    with pytest.raises(ValueError):
        Voice(5)


def test_minimal_event_string():
    assert str(Event(pos=0, duration=960, message="m")) == "pos: 0 dur: 960 message: m"


def test_full_event_string():
    note = Note("c", PropertyList((Token(TokenType.UINT, "8", Pos()),)))
    event = Event(note=note, message="m", pos=5, duration=480, voice=Voice(2), track=10)
    text = str(event)
    assert text.startswith("track: 10 pos: 5 dur: 480")
    assert " voice: 2" in text
    assert text.endswith(" note: c8 message: m")


def test_zero_track_and_voice_omitted():
    text = str(Event(message="m"))
    assert "track" not in text
    assert "voice" not in text