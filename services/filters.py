# services/filters.py
from typing import Iterable

from models import FilterCriteria, SportEvent


def _contains(needle: str, *fields: str) -> bool:
    n = needle.lower()
    return any(n in (f or "").lower() for f in fields)


def matches(event: SportEvent, criteria: FilterCriteria) -> bool:
    if criteria.date and event.date != criteria.date:
        return False
    if criteria.sport and event.sport != criteria.sport:
        return False
    if criteria.country and event.country != criteria.country:
        return False
    if criteria.team and not _contains(criteria.team, event.home_team, event.away_team):
        return False
    if criteria.search_text and not _contains(
        criteria.search_text, event.title, event.league, event.home_team, event.away_team
    ):
        return False
    return True


def apply_filters(events: Iterable[SportEvent], criteria: FilterCriteria) -> list[SportEvent]:
    """AND of every supplied criterion; always re-run against the full set."""
    if criteria.is_empty():
        return list(events)
    return [e for e in events if matches(e, criteria)]


def filter_options(events: Iterable[SportEvent]) -> dict[str, list[str]]:
    """Distinct values for the UI dropdowns."""
    dates, sports, countries = set(), set(), set()
    for e in events:
        if e.date:
            dates.add(e.date)
        if e.sport:
            sports.add(e.sport)
        if e.country:
            countries.add(e.country)
    return {"dates": sorted(dates), "sports": sorted(sports), "countries": sorted(countries)}
