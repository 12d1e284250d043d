"""Event Routes — composed event query, CRUD, and detail expansion.

Invariants:
    - GET /events validates every id and date before the store is queried
    - GET /events/{id} expands the owning League and the linked opposing Team
    - POST/PUT/DELETE require an admin token
    - opposingTeam is never empty on write (default opponent applied)
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.api.dependencies import get_today, require_admin
from sports_schedule.core.domain_types import (
    EntityId, Identity, LinkedOpponent, opponent_columns,
)
from sports_schedule.core.event_query import parse_event_criteria
from sports_schedule.core.parse_inputs import parse_entity_id
from sports_schedule.infrastructure.database import get_db
from sports_schedule.models.event import Event
from sports_schedule.models.league import League
from sports_schedule.models.team import Team
from sports_schedule.schemas.base import CreatedResponse, MessageResponse
from sports_schedule.schemas.event import EventDetail, EventResponse, EventWrite
from sports_schedule.schemas.league import LeagueSummary
from sports_schedule.schemas.team import TeamSummary
from sports_schedule.services.entity_store import EntityStore
from sports_schedule.services.event_queries import EventQueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["events"])


def _event_values(body: EventWrite) -> dict:
    return {**body.column_values(), **opponent_columns(body.to_opponent())}


@router.get("/events", response_model=list[EventResponse])
async def list_events(
    league_ids: str | None = Query(None, alias="leagueIds"),
    date_range: str | None = Query(None, alias="dateRange"),
    opposing_team_ids: str | None = Query(None, alias="opposingTeamIds"),
    opposing_team_id: str | None = Query(None, alias="opposingTeamId"),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Events matching every supplied filter, ordered by date then time."""
    criteria = parse_event_criteria(
        league_ids=league_ids,
        date_range=date_range,
        opposing_team_ids=opposing_team_ids,
        opposing_team_id=opposing_team_id,
        start_date=start_date,
        end_date=end_date,
    )
    return await EventQueryService(db).find_events(criteria, today)


@router.get("/events/{event_id}", response_model=EventDetail)
async def get_event(event_id: str, db: AsyncSession = Depends(get_db)):
    """One event with its League and opposing Team expanded."""
    store = EntityStore(db)
    event = await store.get_or_404(Event, parse_entity_id(event_id, "event id"))
    detail = EventDetail.model_validate(event)

    league = await store.get(League, EntityId(event.league_id))
    if league is not None:
        detail.league = LeagueSummary.model_validate(league)
    opponent = event.opponent_ref()
    if isinstance(opponent, LinkedOpponent):
        team = await store.get(Team, opponent.team_id)
        if team is not None:
            detail.opponent = TeamSummary.model_validate(team)
    return detail


@router.post(
    "/events", response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    body: EventWrite,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    event = await EntityStore(db).create(Event, _event_values(body))
    logger.info("Event created", extra={"user_id": identity.user_id})
    return CreatedResponse(message="Event created successfully", id=event.id)


@router.put("/events/{event_id}", response_model=EventResponse)
async def replace_event(
    event_id: str,
    body: EventWrite,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Full replacement of an event."""
    entity_id = parse_entity_id(event_id, "event id")
    return await EntityStore(db).replace(Event, entity_id, _event_values(body))


@router.delete("/events/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    await EntityStore(db).delete(Event, parse_entity_id(event_id, "event id"))
    return MessageResponse(message="Event deleted successfully")
