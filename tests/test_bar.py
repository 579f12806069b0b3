from datetime import timedelta

import pytest

from balafon.bar import Bar
from balafon.constants import TICKS_PER_QUARTER, TICKS_PER_WHOLE
from balafon.event import Event


@pytest.mark.parametrize(
    "num, denom, capacity",
    [(1, 4, TICKS_PER_QUARTER), (4, 4, TICKS_PER_WHOLE)],
)
def test_bar_cap_time_signatures(num, denom, capacity):
    bar = Bar()
    bar.set_time_sig(num, denom)
    assert bar.cap() == capacity


def test_zero_duration_bar():
    bar = Bar(events=[Event(message="program change")])
    bar.set_time_sig(1, 1)
    assert bar.is_zero_duration()
    assert bar.duration(60) == timedelta(0)


def test_whole_note_bar_duration():
    bar = Bar(events=[Event(duration=TICKS_PER_WHOLE)])
    bar.set_time_sig(1, 1)
    assert not bar.is_zero_duration()
    assert bar.duration(60) == timedelta(seconds=4)


def test_bar_duration_multi_track():
    bar = Bar(events=[Event(duration=TICKS_PER_QUARTER), Event(duration=TICKS_PER_QUARTER)])
    bar.set_time_sig(1, 4)
    assert bar.duration(60) == timedelta(seconds=1)


@pytest.mark.parametrize("num, denom", [(1, 4), (2, 8)])
def test_bar_duration_time_signatures(num, denom):
    bar = Bar(events=[Event(duration=TICKS_PER_QUARTER)])
    bar.set_time_sig(num, denom)
    assert bar.duration(60) == timedelta(seconds=1)


def test_set_time_sig_rejects_invalid_denominator():
    bar = Bar()
    with pytest.raises(ValueError, match="range"):
        bar.set_time_sig(4, 5)


def test_bar_string():
    bar = Bar(events=[Event(duration=TICKS_PER_QUARTER, message="m")])
    bar.set_time_sig(1, 4)
    assert str(bar) == "time: 1/4\nevents:\npos: 0 dur: 960 message: m\n"


def test_empty_bar_string():
    bar = Bar()
    bar.set_time_sig(3, 8)
    assert str(bar) == "time: 3/8"