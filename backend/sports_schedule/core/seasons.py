"""Season Clock — derives the school season from a calendar date.

Invariants:
    - Pure functions of their arguments; "today" is always passed in, never read
    - Months are calendar months 1-12 (September = 9)
    - July and August belong to no season; the season after no season is no season
"""

from datetime import date

from sports_schedule.core.domain_types import DateRange, Season

_SEASON_BY_MONTH: dict[int, Season] = {
    9: Season.FALL, 10: Season.FALL, 11: Season.FALL,
    12: Season.WINTER, 1: Season.WINTER, 2: Season.WINTER, 3: Season.WINTER,
    4: Season.SPRING, 5: Season.SPRING, 6: Season.SPRING,
}

_NEXT_SEASON: dict[Season, Season] = {
    Season.FALL: Season.WINTER,
    Season.WINTER: Season.SPRING,
    Season.SPRING: Season.FALL,
}


def season_for_month(month: int) -> Season | None:
    """Season for a calendar month, or None in summer."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return _SEASON_BY_MONTH.get(month)


def next_season(current: Season | None) -> Season | None:
    if current is None:
        return None
    return _NEXT_SEASON[current]


def target_season(date_range: DateRange, today: date) -> Season | None:
    """Resolve thisSeason / nextSeason relative to today."""
    current = season_for_month(today.month)
    if date_range is DateRange.THIS_SEASON:
        return current
    return next_season(current)
