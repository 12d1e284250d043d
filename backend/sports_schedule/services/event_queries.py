"""Event Query Service — resolves seasonal leagues and runs a composed EventQueryPlan.

Invariants:
    - At most two reads: season -> league ids, then the event query
    - An empty plan returns [] without querying events
    - Results ordered by (date asc, time asc); id breaks remaining ties
"""

import logging
from datetime import date

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.core.domain_types import EntityId, Season
from sports_schedule.core.event_query import (
    EventCriteria, EventQueryPlan, plan_event_query, seasonal_target,
)
from sports_schedule.models.event import Event
from sports_schedule.models.league import League
from sports_schedule.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


def build_event_statement(plan: EventQueryPlan) -> Select:
    """Translate a non-empty plan into a SELECT over events."""
    query = select(Event)
    if plan.league_ids is not None:
        query = query.where(Event.league_id.in_(sorted(plan.league_ids)))
    if plan.opposing_team_ids is not None:
        query = query.where(
            Event.opposing_team_id.in_(sorted(plan.opposing_team_ids)),
        )
    if plan.start_date is not None:
        query = query.where(Event.date >= plan.start_date)
    if plan.end_date is not None:
        query = query.where(Event.date <= plan.end_date)
    return query.order_by(Event.date.asc(), Event.time.asc(), Event.id.asc())


class EventQueryService:
    """Read path for GET /events."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.store = EntityStore(db)

    async def league_ids_for_season(self, season: Season) -> frozenset[EntityId]:
        return await self.store.ids_where(League, League.season == season.value)

    async def find_events(self, criteria: EventCriteria, today: date) -> list[Event]:
        season = seasonal_target(criteria, today)
        seasonal_ids = (
            await self.league_ids_for_season(season) if season else None
        )
        plan = plan_event_query(criteria, seasonal_ids)
        if plan.empty:
            logger.info("Event query short-circuited: league filters do not overlap")
            return []
        result = await self.db.execute(build_event_statement(plan))
        return list(result.scalars().all())
