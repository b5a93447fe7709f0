# normalize.py
# ---------- Event normalization ----------
import logging
import re
from typing import Any, Iterable, Optional

from models import EventStatus, SportEvent
from services.sports import sport_for_competition

logger = logging.getLogger(__name__)

# exact upstream codes; anything not listed is treated as upcoming
LIVE_STATUSES = frozenset({"Live", "1H", "2H"})

_STATUS_CODES = {
    **{code: EventStatus.LIVE for code in LIVE_STATUSES},
    "FT": EventStatus.FINISHED,
    "AET": EventStatus.FINISHED,
    "PEN": EventStatus.FINISHED,
    "Match Finished": EventStatus.FINISHED,
    "PST": EventStatus.POSTPONED,
    "Postponed": EventStatus.POSTPONED,
    "CANC": EventStatus.CANCELLED,
    "Cancelled": EventStatus.CANCELLED,
    "ABD": EventStatus.CANCELLED,
}

# structured Match records use a closed lowercase vocabulary
_MATCH_STATUSES = {
    "scheduled": EventStatus.UPCOMING,
    "live": EventStatus.LIVE,
    "finished": EventStatus.FINISHED,
    "postponed": EventStatus.POSTPONED,
    "cancelled": EventStatus.CANCELLED,
}

_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2}))?")


def classify_status(raw: str | None) -> EventStatus:
    return _STATUS_CODES.get(raw or "", EventStatus.UPCOMING)


def _text(x: Any) -> str:
    if x is None:
        return ""
    return str(x).strip()


def _safe_int(x: Any) -> Optional[int]:
    try:
        if x is None:
            return None
        if isinstance(x, str) and x.strip() == "":
            return None
        return int(float(x))
    except (TypeError, ValueError):
        return None


def _clean_date(x: Any) -> str:
    m = _DATE_RE.match(_text(x))
    return m.group(1) if m else ""


def _clean_time(x: Any) -> Optional[str]:
    """HH:MM or HH:MM:SS (optionally with a zone suffix) -> HH:MM:SS; else None."""
    m = _TIME_RE.match(_text(x))
    if not m:
        return None
    hh, mm, ss = m.group(1), m.group(2), m.group(3) or "00"
    return f"{hh}:{mm}:{ss}"


def _name(obj: Any) -> str:
    if isinstance(obj, dict):
        return _text(obj.get("name") or obj.get("shortName"))
    return _text(obj)


def _from_flat(raw: dict) -> SportEvent:
    status_text = _text(raw.get("strStatus"))
    home = _text(raw.get("strHomeTeam"))
    away = _text(raw.get("strAwayTeam"))
    title = _text(raw.get("strEvent")) or (f"{home} vs {away}" if home or away else "")
    return SportEvent(
        id=_text(raw.get("idEvent")),
        title=title,
        sport=_text(raw.get("strSport")),
        league=_text(raw.get("strLeague")),
        home_team=home,
        away_team=away,
        date=_clean_date(raw.get("dateEvent")),
        time=_clean_time(raw.get("strTime")),
        status=classify_status(status_text),
        status_text=status_text,
        home_score=_safe_int(raw.get("intHomeScore")),
        away_score=_safe_int(raw.get("intAwayScore")),
        venue=_text(raw.get("strVenue")),
        city=_text(raw.get("strCity")),
        country=_text(raw.get("strCountry")),
    )


def _from_match(raw: dict) -> SportEvent:
    home = _name(raw.get("homeTeam"))
    away = _name(raw.get("awayTeam"))
    venue = raw.get("venue") or {}
    if not isinstance(venue, dict):
        venue = {"name": venue}
    score = raw.get("score") or {}
    if not isinstance(score, dict):
        score = {}
    competition = _text(raw.get("competition"))
    status_text = _text(raw.get("status"))

    return SportEvent(
        id=_text(raw.get("id")),
        title=f"{home} vs {away}",
        sport=_text(raw.get("sport")) or sport_for_competition(competition),
        league=competition,
        home_team=home,
        away_team=away,
        date=_clean_date(raw.get("date")),
        time=_clean_time(raw.get("time")),
        status=_MATCH_STATUSES.get(status_text.lower(), EventStatus.UPCOMING),
        status_text=status_text,
        home_score=_safe_int(score.get("home")),
        away_score=_safe_int(score.get("away")),
        venue=_text(venue.get("name")),
        city=_text(venue.get("city")),
        country=_text(venue.get("country")),
    )


def normalize_event(raw: Any) -> SportEvent | None:
    """
    Single ingestion point for upstream records.
    Returns None for records that can't be keyed (no id) or aren't objects.
    """
    if not isinstance(raw, dict):
        logger.warning("Skipping non-object event record: %r", type(raw).__name__)
        return None

    if "idEvent" in raw:
        event = _from_flat(raw)
    elif isinstance(raw.get("homeTeam"), dict):
        event = _from_match(raw)
    else:
        event = _from_flat(raw)

    if not event.id:
        logger.warning("Skipping event without id: %s", event.title or "<untitled>")
        return None
    return event


def normalize_events(raws: Iterable[Any] | None) -> list[SportEvent]:
    out = []
    for raw in raws or []:
        event = normalize_event(raw)
        if event is not None:
            out.append(event)
    return out


# ---------- Deduplication ----------

def dedupe(events: Iterable[SportEvent]) -> list[SportEvent]:
    """Keep the first event seen for each id; order preserved."""
    seen: set[str] = set()
    out = []
    for e in events:
        if e.id in seen:
            continue
        seen.add(e.id)
        out.append(e)
    return out
