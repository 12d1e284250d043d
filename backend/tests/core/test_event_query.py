"""Event Query Planner — composition of league, season, opponent and date filters.

Tests cover:
    - parse_event_criteria validates ids, dates and dateRange before planning
    - seasonal_target uses the injected date only
    - compose_league_filter: intersection when both sets present, either one alone otherwise
    - plan_event_query marks an empty intersection as an empty plan
    - opponent and date bounds pass through regardless of the league outcome
"""

from datetime import date

import pytest

from sports_schedule.core.domain_types import DateRange, Season
from sports_schedule.core.errors import (
    InvalidDateError, InvalidIdentifierError, InvalidQueryError,
)
from sports_schedule.core.event_query import (
    EventCriteria,
    compose_league_filter,
    parse_event_criteria,
    plan_event_query,
    seasonal_target,
)

L1 = "65a1f0c2e4b0a1b2c3d4e501"
L2 = "65a1f0c2e4b0a1b2c3d4e502"
L3 = "65a1f0c2e4b0a1b2c3d4e503"
T1 = "65a1f0c2e4b0a1b2c3d4e5a1"
T2 = "65a1f0c2e4b0a1b2c3d4e5a2"


# ─── parse_event_criteria ────────────────────────────────────────

def test_no_params_gives_empty_criteria():
    assert parse_event_criteria() == EventCriteria()


def test_all_params_parsed():
    criteria = parse_event_criteria(
        league_ids=f"{L1},{L2}",
        date_range="nextSeason",
        opposing_team_ids=T1,
        start_date="2026-09-01",
        end_date="2026-11-30",
    )
    assert criteria.league_ids == frozenset({L1, L2})
    assert criteria.date_range is DateRange.NEXT_SEASON
    assert criteria.opposing_team_ids == frozenset({T1})
    assert criteria.start_date == date(2026, 9, 1)
    assert criteria.end_date == date(2026, 11, 30)


def test_malformed_league_id_is_client_error():
    with pytest.raises(InvalidIdentifierError):
        parse_event_criteria(league_ids="not-an-id")


def test_malformed_opponent_id_is_client_error():
    with pytest.raises(InvalidIdentifierError):
        parse_event_criteria(opposing_team_ids=f"{T1},bad")


def test_malformed_start_date_fails_whole_query():
    with pytest.raises(InvalidDateError):
        parse_event_criteria(league_ids=L1, start_date="not-a-date")


def test_malformed_end_date_fails_whole_query():
    with pytest.raises(InvalidDateError):
        parse_event_criteria(start_date="2026-09-01", end_date="2026-02-30")


def test_malformed_single_opponent_id_names_its_own_parameter():
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_event_criteria(opposing_team_ids=T1, opposing_team_id="bad")
    assert exc_info.value.field == "opposingTeamId"


def test_single_and_list_opponent_ids_are_combined():
    criteria = parse_event_criteria(opposing_team_ids=T1, opposing_team_id=T2)
    assert criteria.opposing_team_ids == frozenset({T1, T2})


def test_unknown_date_range_rejected():
    with pytest.raises(InvalidQueryError):
        parse_event_criteria(date_range="lastSeason")


# ─── seasonal_target ─────────────────────────────────────────────

def test_no_date_range_needs_no_season_lookup():
    assert seasonal_target(EventCriteria(), date(2026, 10, 1)) is None


def test_this_season_follows_injected_date():
    criteria = EventCriteria(date_range=DateRange.THIS_SEASON)
    assert seasonal_target(criteria, date(2026, 10, 1)) is Season.FALL
    assert seasonal_target(criteria, date(2027, 1, 15)) is Season.WINTER


def test_next_season_in_summer_is_undefined():
    criteria = EventCriteria(date_range=DateRange.NEXT_SEASON)
    assert seasonal_target(criteria, date(2026, 7, 10)) is None


# ─── compose_league_filter ───────────────────────────────────────

def test_neither_set_means_no_filter():
    assert compose_league_filter(None, None) is None


def test_explicit_only():
    assert compose_league_filter(frozenset({L1}), None) == frozenset({L1})


def test_seasonal_only():
    assert compose_league_filter(None, frozenset({L2})) == frozenset({L2})


def test_both_sets_intersect():
    result = compose_league_filter(frozenset({L1, L2}), frozenset({L2, L3}))
    assert result == frozenset({L2})


def test_disjoint_sets_give_empty_filter():
    assert compose_league_filter(frozenset({L1}), frozenset({L3})) == frozenset()


# ─── plan_event_query ────────────────────────────────────────────

def test_empty_intersection_short_circuits():
    criteria = EventCriteria(league_ids=frozenset({L1}))
    plan = plan_event_query(criteria, frozenset({L2}))
    assert plan.empty is True


def test_seasonal_lookup_with_no_leagues_short_circuits_explicit_filter():
    criteria = EventCriteria(league_ids=frozenset({L1}))
    plan = plan_event_query(criteria, frozenset())
    assert plan.empty is True


def test_overlap_becomes_league_filter():
    criteria = EventCriteria(league_ids=frozenset({L1, L2}))
    plan = plan_event_query(criteria, frozenset({L2, L3}))
    assert plan.empty is False
    assert plan.league_ids == frozenset({L2})


def test_opponent_and_dates_always_carried():
    criteria = EventCriteria(
        opposing_team_ids=frozenset({T1}),
        start_date=date(2026, 9, 1),
        end_date=date(2026, 9, 30),
    )
    plan = plan_event_query(criteria, None)
    assert plan.league_ids is None
    assert plan.opposing_team_ids == frozenset({T1})
    assert plan.start_date == date(2026, 9, 1)
    assert plan.end_date == date(2026, 9, 30)
    assert plan.empty is False


def test_no_criteria_plans_unfiltered_query():
    plan = plan_event_query(EventCriteria())
    assert plan.league_ids is None
    assert plan.empty is False
