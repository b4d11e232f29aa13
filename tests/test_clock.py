"""Tests for the set-once service clock and timestamp format."""

import re
from datetime import datetime, timedelta

import pytest

from demoapp.services.clock import ClockError, ServiceClock, format_timestamp

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


def test_format_timestamp_pattern():
    assert format_timestamp(datetime(2024, 3, 7, 9, 5, 2)) == "2024-03-07 09:05:02"


def test_start_is_set_once():
    clock = ServiceClock()
    clock.start()
    with pytest.raises(ClockError):
        clock.start()


def test_read_before_start_raises():
    clock = ServiceClock()
    assert not clock.started
    with pytest.raises(ClockError):
        clock.uptime_seconds()


def test_uptime_is_whole_seconds():
    clock = ServiceClock()
    started = clock.start(datetime(2024, 1, 1, 12, 0, 0))
    assert clock.uptime_seconds(started + timedelta(seconds=5, milliseconds=900)) == 5


def test_uptime_never_negative():
    clock = ServiceClock()
    started = clock.start(datetime(2024, 1, 1, 12, 0, 0))
    assert clock.uptime_seconds(started - timedelta(seconds=3)) == 0
