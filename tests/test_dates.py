from datetime import date

import pytest

from utils.dates import format_date, format_time, iso_day, local_start


def test_iso_day_formats():
    assert iso_day("2025-09-20") == "2025-09-20"
    assert iso_day("20250920") == "2025-09-20"
    assert iso_day(date(2025, 9, 20)) == "2025-09-20"
    with pytest.raises(ValueError):
        iso_day("next friday")


def test_format_time():
    assert format_time("19:20:00") == "19:20"
    assert format_time(None) == "TBD"


def test_format_date():
    assert format_date("2025-09-20") == "Saturday, September 20, 2025"
    assert format_date("2025-09-20", long=False) == "Sat, Sep 20"
    assert format_date("") == ""


def test_local_start_converts_from_utc():
    assert local_start("2025-09-20", "09:30:00", "Australia/Sydney") == "2025-09-20T19:30:00+10:00"
    assert local_start("2025-09-20", None, "Australia/Sydney") is None
    assert local_start("2025-09-20", "09:30:00", "Not/AZone") is None
