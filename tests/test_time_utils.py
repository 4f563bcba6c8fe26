import re

import pytest

from transit_journeys.errors import MalformedTimeError
from transit_journeys.time_utils import (
    parse_gtfs_time, minutes_between, format_time_12h, format_duration, format_minutes, current_time,
)


def test_parse_gtfs_time_formats():
    assert parse_gtfs_time("08:10") == 490
    assert parse_gtfs_time("08:10:59") == 490
    assert parse_gtfs_time(" 8:05 ") == 485
    assert parse_gtfs_time("00:00:00") == 0


def test_parse_gtfs_time_past_midnight():
    assert parse_gtfs_time("25:30:00") == 25 * 60 + 30


@pytest.mark.parametrize("value", ["", "8h10", "08:60", "08:10:75", "abc", None, "08"])
def test_parse_gtfs_time_malformed(value):
    with pytest.raises(MalformedTimeError):
        parse_gtfs_time(value)


def test_malformed_time_is_a_value_error():
    with pytest.raises(ValueError):
        parse_gtfs_time("noon")


def test_minutes_between():
    assert minutes_between(490, 505) == 15
    assert minutes_between(505, 505) == 0
    # 23:50 to 00:10 reads as crossing midnight
    assert minutes_between(1430, 10) == 20


def test_format_time_12h():
    assert format_time_12h("00:05") == "12:05 AM"
    assert format_time_12h("08:10:00") == "8:10 AM"
    assert format_time_12h("12:30") == "12:30 PM"
    assert format_time_12h("13:45:00") == "1:45 PM"
    assert format_time_12h("24:15:00") == "12:15 AM"
    assert format_time_12h("bad") == "N/A"


def test_format_duration_and_minutes():
    assert format_duration(45) == "45m"
    assert format_duration(65) == "1h 5m"
    assert format_minutes(1510) == "25:10"


def test_current_time_shape():
    assert re.match(r"^\d{2}:\d{2}$", current_time("Europe/Madrid"))
    # Unknown zones fall back to UTC instead of failing
    assert re.match(r"^\d{2}:\d{2}$", current_time("Not/AZone"))
