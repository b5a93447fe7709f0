from collections import Counter

from services.grouping import (
    group_by_league,
    group_by_sport,
    is_live,
    partition_live_upcoming,
    regional_priority,
    sort_by_priority,
    sorted_sports,
)


def test_group_by_sport_is_complete_and_ordered(make_event):
    events = [
        make_event("1", sport="Rugby Union", league="Super Rugby Pacific"),
        make_event("2", sport="Australian Football"),
        make_event("3", sport="Rugby Union", league="Rugby Championship"),
    ]
    grouped = group_by_sport(events)
    assert list(grouped) == ["Rugby Union", "Australian Football"]
    assert [e.id for e in grouped["Rugby Union"]] == ["1", "3"]
    rebuilt = [e for evs in grouped.values() for e in evs]
    assert Counter(e.id for e in rebuilt) == Counter(e.id for e in events)
    assert sorted_sports(grouped) == ["Australian Football", "Rugby Union"]


def test_group_by_league_uses_other_for_blank(make_event):
    grouped = group_by_league([make_event("1", league="NRL"), make_event("2", league="")])
    assert list(grouped) == ["NRL", "Other"]


def test_partition_live_upcoming(make_event):
    grouped = group_by_sport([
        make_event("1", sport="Rugby Union", status="Live"),
        make_event("2", sport="Rugby Union", status="NS"),
        make_event("3", sport="Rugby League", status="1H"),
        make_event("4", sport="Cricket", status="FT"),
    ])
    live, upcoming = partition_live_upcoming(grouped)
    assert set(live) == {"Rugby Union", "Rugby League"}
    assert set(upcoming) == {"Rugby Union", "Cricket"}
    assert [e.id for e in upcoming["Cricket"]] == ["4"]

    for sport, events in grouped.items():
        for e in events:
            in_live = e in live.get(sport, [])
            in_upcoming = e in upcoming.get(sport, [])
            assert in_live != in_upcoming
            assert in_live == is_live(e)


def test_regional_priority_au_vs_us(make_event):
    events = [make_event("1", sport="Rugby Union", league="Super Rugby Pacific")]
    assert regional_priority("Rugby Union", events, "AU") == 1
    assert regional_priority("Rugby Union", events, "au") == 1
    assert regional_priority("Rugby Union", events, "US") == 2


def test_regional_priority_unmapped_or_missing_region(make_event):
    events = [make_event("1", league="AFL")]
    assert regional_priority("Australian Football", events, "XX") == 2
    assert regional_priority("Australian Football", events, None) == 2
    assert regional_priority("Australian Football", events, "") == 2


def test_regional_priority_american_football(make_event):
    events = [make_event("1", sport="American Football", league="NFL")]
    assert regional_priority("American Football", events, "US") == 1
    assert regional_priority("American Football", events, "AU") == 2


def test_sort_by_priority(make_event):
    grouped = group_by_sport([
        make_event("1", sport="Soccer", league="Premier League"),
        make_event("2", sport="Rugby League", league="NRL"),
        make_event("3", sport="Basketball", league="NBA"),
        make_event("4", sport="Australian Football", league="AFL"),
    ])
    ordered = [sport for sport, _ in sort_by_priority(grouped, "AU")]
    assert ordered == ["Australian Football", "Rugby League", "Basketball", "Soccer"]

    alphabetical = [sport for sport, _ in sort_by_priority(grouped)]
    assert alphabetical == ["Australian Football", "Basketball", "Rugby League", "Soccer"]
