# services/grouping.py
import logging
from typing import Iterable

from models import EventStatus, SportEvent

logger = logging.getLogger(__name__)

GroupedEvents = dict[str, list[SportEvent]]

OTHER_LEAGUE = "Other"

# region code -> lowercase keywords matched against league/sport text
REGION_KEYWORDS: dict[str, frozenset[str]] = {
    "AU": frozenset({
        "afl", "nrl", "super rugby", "wallabies", "australian football",
        "rugby league", "state of origin", "a-league", "big bash", "nbl",
        "sheffield shield", "supercars",
    }),
    "NZ": frozenset({
        "super rugby", "all blacks", "nrl", "rugby championship",
        "black caps", "npc",
    }),
    "US": frozenset({
        "nfl", "nba", "mlb", "nhl", "mls", "ncaa", "american football", "wnba",
    }),
    "CA": frozenset({"nhl", "cfl", "nba", "mlb", "mls"}),
    "GB": frozenset({
        "premier league", "championship", "fa cup", "six nations",
        "premiership", "super league", "county championship",
    }),
    "IE": frozenset({"gaa", "hurling", "urc", "six nations", "league of ireland"}),
    "ZA": frozenset({"urc", "currie cup", "springboks", "psl", "rugby championship"}),
    "IN": frozenset({"ipl", "cricket", "isl", "kabaddi"}),
}


def group_by_sport(events: Iterable[SportEvent]) -> GroupedEvents:
    out: GroupedEvents = {}
    for e in events:
        out.setdefault(e.sport, []).append(e)
    return out


def group_by_league(events: Iterable[SportEvent]) -> GroupedEvents:
    out: GroupedEvents = {}
    for e in events:
        out.setdefault(e.league or OTHER_LEAGUE, []).append(e)
    return out


def sorted_sports(grouped: GroupedEvents) -> list[str]:
    return sorted(grouped)


# ---------- Live / upcoming ----------

def is_live(event: SportEvent) -> bool:
    return event.status is EventStatus.LIVE


def partition_live_upcoming(grouped: GroupedEvents) -> tuple[GroupedEvents, GroupedEvents]:
    """
    Split each sport group in two. Finished/postponed/cancelled events
    stay in the upcoming bucket; only LIVE is pulled out.
    """
    live: GroupedEvents = {}
    upcoming: GroupedEvents = {}
    for sport, events in grouped.items():
        for e in events:
            bucket = live if is_live(e) else upcoming
            bucket.setdefault(sport, []).append(e)
    return live, upcoming


# ---------- Regional priority ----------

def region_keywords(user_region: str | None) -> frozenset[str]:
    return REGION_KEYWORDS.get((user_region or "").upper(), frozenset())


def regional_priority(sport: str, events: Iterable[SportEvent], user_region: str | None) -> int:
    keywords = region_keywords(user_region)
    if not keywords:
        return 2

    for e in events:
        league, sport_text = e.league.lower(), e.sport.lower()
        if any(k in league or k in sport_text for k in keywords):
            logger.debug("%s is regional for %s (matched %r)", sport, user_region, e.league or e.sport)
            return 1
    return 2


def sort_by_priority(grouped: GroupedEvents, user_region: str | None = None) -> list[tuple[str, list[SportEvent]]]:
    return sorted(
        grouped.items(),
        key=lambda item: (regional_priority(item[0], item[1], user_region), item[0]),
    )
