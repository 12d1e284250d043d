"""Event Query Planner — composes optional filter criteria into one query plan.

Invariants:
    - All functions are PURE: no IO, no async, no clock (today is a parameter)
    - Every identifier and date is validated before a plan exists; a plan is never partial
    - Explicit and seasonal league sets intersect; an empty intersection yields an
      empty plan and the event store is not queried
    - Opponent and date bounds are independent AND conditions

Design Decisions:
    - Two-phase planning: seasonal_target() tells the shell which season to resolve,
      plan_event_query() composes once the seasonal league ids are known
"""

from dataclasses import dataclass
from datetime import date

from sports_schedule.core.domain_types import DateRange, EntityId, Season
from sports_schedule.core.errors import InvalidQueryError
from sports_schedule.core.parse_inputs import parse_calendar_date, parse_entity_id_list
from sports_schedule.core.seasons import target_season


@dataclass(frozen=True)
class EventCriteria:
    """Validated query criteria. None means 'not supplied'."""
    league_ids: frozenset[EntityId] | None = None
    date_range: DateRange | None = None
    opposing_team_ids: frozenset[EntityId] | None = None
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class EventQueryPlan:
    """Composed filter. empty=True means the result is [] without a store query."""
    league_ids: frozenset[EntityId] | None = None
    opposing_team_ids: frozenset[EntityId] | None = None
    start_date: date | None = None
    end_date: date | None = None
    empty: bool = False


def _union(
    first: frozenset[EntityId] | None, second: frozenset[EntityId] | None,
) -> frozenset[EntityId] | None:
    if first is None:
        return second
    if second is None:
        return first
    return first | second


def parse_event_criteria(
    league_ids: str | None = None,
    date_range: str | None = None,
    opposing_team_ids: str | None = None,
    opposing_team_id: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> EventCriteria:
    """Validate raw query-string values. Raises on the first malformed value."""
    parsed_range = None
    if date_range:
        try:
            parsed_range = DateRange(date_range)
        except ValueError:
            raise InvalidQueryError(
                f"dateRange must be one of: "
                f"{', '.join(r.value for r in DateRange)}",
                "dateRange",
            )
    return EventCriteria(
        league_ids=parse_entity_id_list(league_ids, "leagueIds"),
        date_range=parsed_range,
        opposing_team_ids=_union(
            parse_entity_id_list(opposing_team_ids, "opposingTeamIds"),
            parse_entity_id_list(opposing_team_id, "opposingTeamId"),
        ),
        start_date=parse_calendar_date(start_date, "startDate"),
        end_date=parse_calendar_date(end_date, "endDate"),
    )


def seasonal_target(criteria: EventCriteria, today: date) -> Season | None:
    """Season whose leagues must be looked up, or None if no seasonal filter applies."""
    if criteria.date_range is None:
        return None
    return target_season(criteria.date_range, today)


def compose_league_filter(
    explicit: frozenset[EntityId] | None,
    seasonal: frozenset[EntityId] | None,
) -> frozenset[EntityId] | None:
    """Season intersection rule. None = no league filter; empty set = no match possible."""
    if explicit is not None and seasonal is not None:
        return explicit & seasonal
    if explicit is not None:
        return explicit
    return seasonal


def plan_event_query(
    criteria: EventCriteria,
    seasonal_league_ids: frozenset[EntityId] | None = None,
) -> EventQueryPlan:
    """Compose criteria and the resolved seasonal league set into one plan."""
    league_filter = compose_league_filter(
        criteria.league_ids, seasonal_league_ids,
    )
    return EventQueryPlan(
        league_ids=league_filter,
        opposing_team_ids=criteria.opposing_team_ids,
        start_date=criteria.start_date,
        end_date=criteria.end_date,
        empty=league_filter is not None and not league_filter,
    )
