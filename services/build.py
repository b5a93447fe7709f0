# services/build.py
import asyncio
import logging
from functools import partial
from itertools import chain

from fastapi.concurrency import run_in_threadpool

from models import FilterCriteria, SportEvent
from normalize import dedupe
from services.filters import apply_filters, filter_options
from services.fixtures import FetchError, fetch_all_upcoming, fetch_by_day, fetch_range
from services.grouping import (
    group_by_league,
    group_by_sport,
    is_live,
    partition_live_upcoming,
    regional_priority,
    sort_by_priority,
)
from services.sports import sport_icon
from utils.dates import format_date, format_time, iso_day, local_start, today_iso

logger = logging.getLogger(__name__)


# ----------------------------
# Event / group serialization
# ----------------------------
def _event_out(e: SportEvent, tz: str | None) -> dict:
    out = e.to_dict()
    out["is_live"] = is_live(e)
    out["display_time"] = format_time(e.time)
    out["display_date"] = format_date(e.date, long=False)
    if tz:
        out["local_start"] = local_start(e.date, e.time, tz)
    return out


def _sections(grouped: dict[str, list[SportEvent]], user_region: str | None, tz: str | None) -> list[dict]:
    sections = []
    for sport, events in sort_by_priority(grouped, user_region):
        leagues = group_by_league(events)
        sections.append({
            "sport": sport,
            "icon": sport_icon(sport),
            "priority": regional_priority(sport, events, user_region),
            "count": len(events),
            "live_count": sum(1 for e in events if is_live(e)),
            "leagues": {league: len(evs) for league, evs in leagues.items()},
            "events": [_event_out(e, tz) for e in events],
        })
    return sections


# ----------------------------
# Builders
# ----------------------------
def build_view(
    events: list[SportEvent],
    criteria: FilterCriteria | None = None,
    user_region: str | None = None,
    tz: str | None = None,
) -> dict:
    """
    dedupe -> filter -> group by sport -> live/upcoming split -> regional ordering.
    Filter options come from the unfiltered set so dropdowns don't shrink.
    """
    unique = dedupe(events)
    filtered = apply_filters(unique, criteria or FilterCriteria())
    grouped = group_by_sport(filtered)
    live, upcoming = partition_live_upcoming(grouped)

    return {
        "region": user_region,
        "count": len(filtered),
        "total": len(unique),
        "live_count": sum(len(v) for v in live.values()),
        "upcoming_count": sum(len(v) for v in upcoming.values()),
        "live_sports": [sport for sport, _ in sort_by_priority(live, user_region)],
        "upcoming_sports": [sport for sport, _ in sort_by_priority(upcoming, user_region)],
        "sports": _sections(grouped, user_region, tz),
        "filters": filter_options(unique),
    }


def fixtures_for_day(day: str | None = None, criteria: FilterCriteria | None = None,
                     user_region: str | None = None, tz: str | None = None) -> dict:
    d = iso_day(day) if day else today_iso()
    view = build_view(fetch_by_day(d), criteria, user_region, tz)
    view["day"] = d
    return view


def fixtures_for_range(start: str | None, days: int, criteria: FilterCriteria | None = None,
                       user_region: str | None = None, tz: str | None = None) -> dict:
    d = iso_day(start) if start else today_iso()
    view = build_view(fetch_range(d, days), criteria, user_region, tz)
    view["day"] = d
    view["days"] = days
    return view


def all_upcoming(criteria: FilterCriteria | None = None, user_region: str | None = None,
                 tz: str | None = None) -> dict:
    return build_view(fetch_all_upcoming(), criteria, user_region, tz)


# ----------------------------
# Page load
# ----------------------------
async def load_dashboard(day: str | None = None, days: int = 7, user_region: str | None = None,
                         tz: str | None = None) -> dict:
    """
    Fetch today's fixtures, the next `days` days and the all-upcoming catalog
    concurrently. Each section is filled only if its own fetch succeeded;
    a failed section shows up under "errors" and the rest still render.
    """
    d = iso_day(day) if day else today_iso()
    loaders = {
        "today": partial(fetch_by_day, d),
        "upcoming": partial(fetch_range, d, days),
        "all": fetch_all_upcoming,
    }
    results = await asyncio.gather(
        *(run_in_threadpool(fn) for fn in loaders.values()),
        return_exceptions=True,
    )

    sections: dict[str, list[SportEvent]] = {}
    errors: dict[str, str] = {}
    for name, res in zip(loaders, results):
        if isinstance(res, FetchError):
            logger.warning("Dashboard section %s failed: %s", name, res)
            errors[name] = str(res)
        elif isinstance(res, BaseException):
            raise res
        else:
            sections[name] = res

    combined = dedupe(chain.from_iterable(sections.values()))
    live, upcoming = partition_live_upcoming(group_by_sport(combined))

    return {
        "day": d,
        "days": days,
        "region": user_region,
        "errors": errors,
        "counts": {name: len(dedupe(evs)) for name, evs in sections.items()},
        "live": _sections(live, user_region, tz),
        "upcoming": _sections(upcoming, user_region, tz),
    }
