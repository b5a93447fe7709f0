# services/fixtures.py
import logging
import os
from datetime import date, timedelta

import requests

from models import SportEvent
from normalize import normalize_events
from services.mock_data import generate_mock_events
from utils.dates import iso_day, today_iso

logger = logging.getLogger(__name__)

FIXTURES_API_URL = os.getenv("FIXTURES_API_URL", "https://ff-worker.luke-076.workers.dev")
FIXTURES_HTTP_TIMEOUT = float(os.getenv("FIXTURES_HTTP_TIMEOUT", "15"))


class FetchError(Exception):
    """Network failure, non-2xx status or unreadable body from the fixtures source."""

    def __init__(self, message: str, *, requested_url: str = "", status_code: int | None = None,
                 body_preview: str = ""):
        super().__init__(message)
        self.requested_url = requested_url
        self.status_code = status_code
        self.body_preview = body_preview

    def detail(self) -> dict:
        return {
            "source": "fixtures",
            "error": str(self),
            "requested_url": self.requested_url,
            "status_code": self.status_code,
            "body_preview": self.body_preview,
        }


class UpstreamReportedError(FetchError):
    """HTTP 200, but the body carries an `error` field."""


def fetch_raw(params: dict | None = None) -> dict:
    try:
        r = requests.get(FIXTURES_API_URL, params=params or None, timeout=FIXTURES_HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise FetchError(f"Fixtures request failed: {type(e).__name__}: {e}", requested_url=FIXTURES_API_URL) from e

    logger.debug("GET %s -> %s", r.url, r.status_code)
    if not 200 <= r.status_code < 300:
        raise FetchError(
            f"HTTP error! status: {r.status_code}",
            requested_url=r.url, status_code=r.status_code, body_preview=r.text[:800],
        )

    try:
        data = r.json()
    except ValueError as e:
        raise FetchError(
            "Fixtures source returned non-JSON",
            requested_url=r.url, status_code=r.status_code, body_preview=r.text[:800],
        ) from e

    if not isinstance(data, dict):
        raise FetchError(
            f"Fixtures source expected object, got {type(data).__name__}",
            requested_url=r.url, status_code=r.status_code,
        )
    if data.get("error"):
        raise UpstreamReportedError(str(data["error"]), requested_url=r.url, status_code=r.status_code)
    if not isinstance(data.get("events") or [], list):
        raise FetchError(
            "Fixtures source returned non-list events",
            requested_url=r.url, status_code=r.status_code, body_preview=r.text[:800],
        )
    return data


def fetch_by_day(day: date | str | None = None) -> list[SportEvent]:
    d = iso_day(day) if day else today_iso()
    data = fetch_raw({"day": d})
    # source returns null rather than [] for empty days
    return normalize_events(data.get("events") or [])


def fetch_todays_fixtures() -> list[SportEvent]:
    return fetch_by_day(today_iso())


def fetch_range(start: date | str | None, num_days: int, isolate_failures: bool = False) -> list[SportEvent]:
    """
    One request per day, in order. The first failure aborts the whole
    range unless isolate_failures is set, in which case that day is skipped.
    """
    first = date.fromisoformat(iso_day(start) if start else today_iso())
    events: list[SportEvent] = []
    for i in range(num_days):
        d = (first + timedelta(days=i)).isoformat()
        try:
            events.extend(fetch_by_day(d))
        except FetchError as e:
            if not isolate_failures:
                raise
            logger.warning("Skipping %s: %s", d, e)
    return events


def fetch_all_upcoming() -> list[SportEvent]:
    try:
        data = fetch_raw()
    except FetchError as e:
        logger.warning("All-upcoming fetch failed (%s); falling back to mock data", e)
        return generate_mock_events()
    return normalize_events(data.get("events") or [])
