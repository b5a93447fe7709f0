import pytest
import requests

from conftest import FakeResponse, raw_event

import services.fixtures as fixtures
from models import EventStatus
from normalize import dedupe
from services.fixtures import (
    FetchError,
    UpstreamReportedError,
    fetch_all_upcoming,
    fetch_by_day,
    fetch_range,
)
from services.grouping import group_by_sport, partition_live_upcoming


@pytest.fixture
def calls(monkeypatch):
    """Records requests.get calls; set calls.responses to a day -> response mapping or a callable."""
    class Calls(list):
        responses = {}

    recorded = Calls()

    def fake_get(url, params=None, timeout=None):
        recorded.append(dict(params or {}))
        day = (params or {}).get("day")
        resp = recorded.responses(day) if callable(recorded.responses) else recorded.responses.get(day)
        if isinstance(resp, Exception):
            raise resp
        return resp

    monkeypatch.setattr(fixtures.requests, "get", fake_get)
    return recorded


def test_fetch_by_day_sends_day_param(calls):
    calls.responses = {"2025-09-20": FakeResponse(payload={"events": [raw_event("1")]})}
    events = fetch_by_day("2025-09-20")
    assert calls == [{"day": "2025-09-20"}]
    assert [e.id for e in events] == ["1"]


def test_fetch_by_day_null_events_is_empty(calls):
    calls.responses = {"2025-09-20": FakeResponse(payload={"events": None})}
    assert fetch_by_day("2025-09-20") == []
    calls.responses = {"2025-09-20": FakeResponse(payload={})}
    assert fetch_by_day("2025-09-20") == []


def test_fetch_by_day_http_error(calls):
    calls.responses = {"2025-09-20": FakeResponse(status_code=503, text="unavailable")}
    with pytest.raises(FetchError) as exc:
        fetch_by_day("2025-09-20")
    assert exc.value.status_code == 503
    assert exc.value.detail()["body_preview"] == "unavailable"


def test_fetch_by_day_network_error(calls):
    calls.responses = {"2025-09-20": requests.ConnectionError("boom")}
    with pytest.raises(FetchError):
        fetch_by_day("2025-09-20")


def test_fetch_by_day_non_json(calls):
    calls.responses = {"2025-09-20": FakeResponse(payload=ValueError("no json"), text="<html>")}
    with pytest.raises(FetchError):
        fetch_by_day("2025-09-20")


def test_fetch_by_day_upstream_error_field(calls):
    calls.responses = {"2025-09-20": FakeResponse(payload={"error": "quota exceeded"})}
    with pytest.raises(UpstreamReportedError, match="quota exceeded"):
        fetch_by_day("2025-09-20")


def test_fetch_range_is_sequential_and_concatenated(calls):
    calls.responses = lambda day: FakeResponse(payload={"events": [raw_event(day)]})
    events = fetch_range("2025-09-29", 3)
    assert [c["day"] for c in calls] == ["2025-09-29", "2025-09-30", "2025-10-01"]
    assert [e.id for e in events] == ["2025-09-29", "2025-09-30", "2025-10-01"]


def test_fetch_range_propagates_first_error(calls):
    calls.responses = {
        "2025-09-20": FakeResponse(payload={"events": [raw_event("1")]}),
        "2025-09-21": FakeResponse(status_code=500),
        "2025-09-22": FakeResponse(payload={"events": [raw_event("3")]}),
    }
    with pytest.raises(FetchError):
        fetch_range("2025-09-20", 3)
    assert len(calls) == 2


def test_fetch_range_isolated_failures(calls):
    calls.responses = {
        "2025-09-20": FakeResponse(payload={"events": [raw_event("1")]}),
        "2025-09-21": FakeResponse(status_code=500),
        "2025-09-22": FakeResponse(payload={"events": [raw_event("3")]}),
    }
    events = fetch_range("2025-09-20", 3, isolate_failures=True)
    assert [e.id for e in events] == ["1", "3"]


def test_overlapping_day_duplicates_become_one_live_event(calls):
    dup = raw_event("1", sport="Rugby Union", league="Rugby Championship", status="Live")
    calls.responses = {"2025-09-20": FakeResponse(payload={"events": [dup, dict(dup)]})}

    events = dedupe(fetch_by_day("2025-09-20"))
    live, upcoming = partition_live_upcoming(group_by_sport(events))

    assert list(live) == ["Rugby Union"]
    assert len(live["Rugby Union"]) == 1
    assert live["Rugby Union"][0].status is EventStatus.LIVE
    assert upcoming == {}


def test_fetch_all_upcoming_no_params(calls):
    calls.responses = {None: FakeResponse(payload={"events": [raw_event("9")]})}
    events = fetch_all_upcoming()
    assert calls == [{}]
    assert [e.id for e in events] == ["9"]


@pytest.mark.parametrize("resp", [
    requests.Timeout("slow"),
    FakeResponse(status_code=404),
    FakeResponse(payload={"error": "worker down", "events": []}),
    FakeResponse(payload=["not", "an", "object"]),
    FakeResponse(payload={"events": 5}),
    FakeResponse(payload={"events": True}),
])
def test_fetch_all_upcoming_falls_back_to_mock(calls, resp):
    calls.responses = {None: resp}
    events = fetch_all_upcoming()
    assert len(events) == 40
    assert all(e.id.startswith("mock_") for e in events)


def test_fetch_todays_fixtures_uses_utc_today(calls):
    from utils.dates import today_iso

    calls.responses = lambda day: FakeResponse(payload={"events": []})
    assert fixtures.fetch_todays_fixtures() == []
    assert calls == [{"day": today_iso()}]


@pytest.mark.parametrize("events", [5, True, "abc", {"id": "1"}])
def test_fetch_by_day_non_list_events(calls, events):
    calls.responses = {"2025-09-20": FakeResponse(payload={"events": events})}
    with pytest.raises(FetchError, match="non-list events"):
        fetch_by_day("2025-09-20")
