"""Season Clock — season derivation is a pure function of the calendar month.

Tests:
    - Every month maps to the expected season (July/August map to none)
    - Succession is fall -> winter -> spring -> fall, none -> none
    - target_season resolves thisSeason / nextSeason from an explicit date
"""

from datetime import date

import pytest

from sports_schedule.core.domain_types import DateRange, Season
from sports_schedule.core.seasons import next_season, season_for_month, target_season


@pytest.mark.parametrize("month", [9, 10, 11])
def test_september_to_november_is_fall(month):
    assert season_for_month(month) is Season.FALL


@pytest.mark.parametrize("month", [12, 1, 2, 3])
def test_december_to_march_is_winter(month):
    assert season_for_month(month) is Season.WINTER


@pytest.mark.parametrize("month", [4, 5, 6])
def test_april_to_june_is_spring(month):
    assert season_for_month(month) is Season.SPRING


@pytest.mark.parametrize("month", [7, 8])
def test_summer_has_no_season(month):
    assert season_for_month(month) is None


def test_month_out_of_range_raises():
    with pytest.raises(ValueError):
        season_for_month(0)
    with pytest.raises(ValueError):
        season_for_month(13)


def test_next_season_cycles_through_three_seasons():
    assert next_season(Season.FALL) is Season.WINTER
    assert next_season(Season.WINTER) is Season.SPRING
    assert next_season(Season.SPRING) is Season.FALL


def test_next_season_of_none_is_none():
    assert next_season(None) is None


def test_target_season_this_season():
    assert target_season(DateRange.THIS_SEASON, date(2026, 10, 19)) is Season.FALL


def test_target_season_next_season():
    assert target_season(DateRange.NEXT_SEASON, date(2026, 10, 19)) is Season.WINTER
    assert target_season(DateRange.NEXT_SEASON, date(2027, 5, 1)) is Season.FALL


def test_target_season_in_summer_is_none():
    assert target_season(DateRange.THIS_SEASON, date(2026, 7, 4)) is None
    assert target_season(DateRange.NEXT_SEASON, date(2026, 8, 15)) is None
