import pytest

from normalize import normalize_event


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, url="https://fixtures.test/"):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))
        self.url = url

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def raw_event(id, sport="Australian Football", league="AFL", home="Richmond Tigers",
              away="Carlton Blues", day="2025-09-20", time="19:20:00", status="NS",
              country="Australia", **extra):
    raw = {
        "idEvent": id,
        "strEvent": f"{home} vs {away}",
        "strSport": sport,
        "strLeague": league,
        "strHomeTeam": home,
        "strAwayTeam": away,
        "dateEvent": day,
        "strTime": time,
        "strStatus": status,
        "strCountry": country,
        "intHomeScore": None,
        "intAwayScore": None,
    }
    raw.update(extra)
    return raw


@pytest.fixture
def make_event():
    def _make(id, **kwargs):
        return normalize_event(raw_event(id, **kwargs))
    return _make
