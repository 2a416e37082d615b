from datetime import date, datetime, timedelta

import pytest

from chronolog.common.datetime_utils import fixed_clock, format_duration, parse_iso_date


def test_parse_iso_date():
    assert parse_iso_date("2026-02-03") == date(2026, 2, 3)
    with pytest.raises(ValueError):
        parse_iso_date("03/02/2026")


def test_fixed_clock_always_answers_same_moment():
    moment = datetime(2026, 2, 2, 8, 0, 0)
    clock = fixed_clock(moment)

    assert clock() == moment
    assert clock() == moment


def test_format_duration():
    assert format_duration(timedelta(hours=8, minutes=5, seconds=9)) == "8:05:09"
    assert format_duration(timedelta(hours=30)) == "30:00:00"
    assert format_duration(timedelta(minutes=-90)) == "-1:30:00"
