# utils/dates.py
import re
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# upstream dates/times are UTC
SOURCE_TZ = timezone.utc


def today_iso() -> str:
    return datetime.now(SOURCE_TZ).date().isoformat()


def iso_day(d: date | str) -> str:
    """Accepts a date, YYYY-MM-DD or YYYYMMDD and returns YYYY-MM-DD. Raises ValueError otherwise."""
    if isinstance(d, datetime):
        return d.date().isoformat()
    if isinstance(d, date):
        return d.isoformat()
    s = (d or "").strip()
    if re.fullmatch(r"\d{8}", s):
        s = f"{s[:4]}-{s[4:6]}-{s[6:8]}"
    return date.fromisoformat(s).isoformat()


def format_time(t: str | None) -> str:
    if not t:
        return "TBD"
    return t[:5]


def format_date(d: str | None, long: bool = True) -> str:
    """'2025-09-20' -> 'Saturday, September 20, 2025' (or 'Sat, Sep 20')."""
    if not d:
        return ""
    try:
        parsed = date.fromisoformat(d)
    except ValueError:
        return d
    if long:
        return f"{parsed:%A}, {parsed:%B} {parsed.day}, {parsed.year}"
    return f"{parsed:%a}, {parsed:%b} {parsed.day}"


def local_start(d: str | None, t: str | None, tz_name: str) -> str | None:
    """Event start as an ISO datetime in tz_name, or None if there is no date/time or the zone is unknown."""
    if not d or not t:
        return None
    try:
        tz = ZoneInfo(tz_name)
        start = datetime.fromisoformat(f"{d}T{t}").replace(tzinfo=SOURCE_TZ)
    except (ZoneInfoNotFoundError, ValueError):
        return None
    return start.astimezone(tz).isoformat()
