# models.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class EventStatus(str, Enum):
    LIVE = "live"
    UPCOMING = "upcoming"
    FINISHED = "finished"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SportEvent:
    """
    One fixture, after normalization.

    Built only by normalize.normalize_event(); both upstream shapes
    (flat strXxx records and structured Match records) end up here.
    """
    id: str
    title: str
    sport: str
    league: str
    home_team: str
    away_team: str
    date: str
    time: Optional[str]
    status: EventStatus
    status_text: str = ""
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    venue: str = ""
    city: str = ""
    country: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "sport": self.sport,
            "league": self.league,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "date": self.date,
            "time": self.time,
            "status": self.status.value,
            "status_text": self.status_text,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "venue": self.venue,
            "city": self.city,
            "country": self.country,
        }


@dataclass(frozen=True)
class FilterCriteria:
    """User-selected filters. None or "" means "no constraint"."""
    date: Optional[str] = None
    sport: Optional[str] = None
    country: Optional[str] = None
    team: Optional[str] = None
    search_text: Optional[str] = None

    def is_empty(self) -> bool:
        return not any((self.date, self.sport, self.country, self.team, self.search_text))
