# services/sports.py
from typing import Iterable

from models import SportEvent

SPORTS: list[dict] = [
    {
        "id": 1,
        "name": "Football",
        "icon": "⚽",
        "competitions": ["Premier League", "La Liga", "Bundesliga", "Serie A", "Champions League"],
    },
    {
        "id": 2,
        "name": "Basketball",
        "icon": "🏀",
        "competitions": ["NBA", "EuroLeague", "FIBA World Cup"],
    },
    {
        "id": 3,
        "name": "Tennis",
        "icon": "🎾",
        "competitions": ["Australian Open", "French Open", "Wimbledon", "US Open"],
    },
    {
        "id": 4,
        "name": "Cricket",
        "icon": "🏏",
        "competitions": ["ICC World Cup", "IPL", "Ashes Series"],
    },
    {
        "id": 5,
        "name": "Australian Football",
        "icon": "🏈",
        "competitions": ["AFL", "AFL Finals"],
    },
    {
        "id": 6,
        "name": "Rugby League",
        "icon": "🏉",
        "competitions": ["NRL", "NRL Finals", "State of Origin"],
    },
    {
        "id": 7,
        "name": "Rugby Union",
        "icon": "🏉",
        "competitions": ["Rugby Championship", "Super Rugby Pacific", "Super Rugby"],
    },
]

SPORT_ICONS = {
    # Australian codes
    "Australian Football": "🏈",
    "Rugby Union": "🏉",
    "Rugby League": "🏉",
    "AFL": "🏈",
    "NRL": "🏉",
    "Super Rugby": "🏉",
    "Super Rugby Pacific": "🏉",
    "AFL Finals": "🏈",
    "NRL Finals": "🏉",
    "Rugby Championship": "🏉",
    "State of Origin": "🏉",

    # everything else
    "Soccer": "⚽",
    "Football": "⚽",
    "Basketball": "🏀",
    "Cricket": "🏏",
    "Tennis": "🎾",
    "Golf": "⛳",
    "Boxing": "🥊",
    "MMA": "🥊",
    "Formula 1": "🏎️",
    "Athletics": "🏃",
    "Swimming": "🏊",
    "Cycling": "🚴",
    "Surfing": "🏄",
}

DEFAULT_ICON = "🏈"


def sport_icon(name: str | None) -> str:
    return SPORT_ICONS.get(name or "", DEFAULT_ICON)


def sport_for_competition(competition: str | None) -> str:
    """Reverse lookup: competition name -> catalog sport name ("" if unknown)."""
    comp = (competition or "").strip().lower()
    if not comp:
        return ""
    for sport in SPORTS:
        for c in sport["competitions"]:
            if c.lower() == comp:
                return sport["name"]
    return ""


def events_for_sport(events: Iterable[SportEvent], sport_name: str) -> list[SportEvent]:
    """Events whose league mentions one of the catalog competitions for sport_name."""
    sport = next((s for s in SPORTS if s["name"].lower() == (sport_name or "").lower()), None)
    if sport is None:
        return []
    comps = [c.lower() for c in sport["competitions"]]
    return [e for e in events if any(c in e.league.lower() for c in comps)]
