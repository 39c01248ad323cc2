"""Tests for the teatimer clock and formatter."""

import time

import pytest

from teatimer.clock import Clock, format_seconds


# === format_seconds ===

def test_format_zero():
    assert format_seconds(0) == "00:00:00"


def test_format_seconds_field():
    assert format_seconds(59) == "00:00:59"


def test_format_minute_rollover():
    assert format_seconds(60) == "00:01:00"


def test_format_all_fields():
    assert format_seconds(3661) == "01:01:01"


def test_format_last_two_digit_hour():
    assert format_seconds(359999) == "99:59:59"


def test_format_hours_widen_past_99():
    assert format_seconds(360000) == "100:00:00"


def test_format_matches_field_arithmetic():
    for s in (1, 61, 599, 3599, 3600, 86399, 86400, 123456):
        hh, mm, ss = format_seconds(s).split(":")
        assert int(ss) == s % 60
        assert int(mm) == (s // 60) % 60
        assert int(hh) == s // 3600
        assert len(mm) == len(ss) == 2


# === Clock ===

class FakeSource:
    """Monotonic source that returns preset readings in order."""

    def __init__(self, *readings):
        self.readings = list(readings)

    def __call__(self):
        return self.readings.pop(0)


def test_clock_default_source_is_monotonic():
    assert Clock()._source is time.monotonic


def test_clock_elapsed_whole_seconds():
    clock = Clock(FakeSource(100.0, 100.4, 101.0, 162.9))
    clock.start()
    assert clock.elapsed_seconds() == 0
    assert clock.elapsed_seconds() == 1
    assert clock.elapsed_seconds() == 62


def test_clock_never_decreases():
    clock = Clock(FakeSource(5.0, 5.1, 5.9, 6.0, 6.0, 7.5, 9.2))
    clock.start()
    readings = [clock.elapsed_seconds() for _ in range(6)]
    assert readings == sorted(readings)


def test_clock_not_negative():
    clock = Clock(FakeSource(10.0, 9.5))
    clock.start()
    assert clock.elapsed_seconds() == 0


def test_clock_requires_start():
    clock = Clock(FakeSource(1.0))
    assert not clock.started
    with pytest.raises(RuntimeError):
        clock.elapsed_seconds()


def test_clock_start_only_once():
    clock = Clock(FakeSource(1.0, 2.0))
    clock.start()
    assert clock.started
    with pytest.raises(RuntimeError):
        clock.start()


def test_clock_real_source_progresses():
    clock = Clock()
    clock.start()
    first = clock.elapsed_seconds()
    second = clock.elapsed_seconds()
    assert 0 <= first <= second
