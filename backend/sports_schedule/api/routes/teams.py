"""Team Routes — CRUD, per-league listing, and delete with event null-out.

Invariants:
    - DELETE /teams/{id} unlinks referencing Events (default opponent) and deletes the
      Team in one transaction
    - GET /leagues/{league_id}/teams is 404 when the League has no Teams
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.api.dependencies import get_integrity_engine, require_admin
from sports_schedule.core.domain_types import EntityId, Identity
from sports_schedule.core.errors import ResourceNotFoundError
from sports_schedule.core.parse_inputs import parse_entity_id
from sports_schedule.infrastructure.database import get_db
from sports_schedule.models.league import League
from sports_schedule.models.team import Team
from sports_schedule.schemas.base import CreatedResponse, MessageResponse
from sports_schedule.schemas.league import LeagueSummary
from sports_schedule.schemas.team import TeamDetail, TeamResponse, TeamWrite
from sports_schedule.services.entity_store import EntityStore
from sports_schedule.services.integrity_engine import IntegrityEngine

router = APIRouter(prefix="/api", tags=["teams"])


@router.get("/teams", response_model=list[TeamResponse])
async def list_teams(db: AsyncSession = Depends(get_db)):
    return await EntityStore(db).list_all(Team)


@router.get("/leagues/{league_id}/teams", response_model=list[TeamResponse])
async def list_league_teams(league_id: str, db: AsyncSession = Depends(get_db)):
    entity_id = parse_entity_id(league_id, "league id")
    teams = await EntityStore(db).list_all(
        Team, Team.league_id == entity_id, order_by=Team.name,
    )
    if not teams:
        raise ResourceNotFoundError("Teams for league", entity_id)
    return teams


@router.get("/teams/{team_id}", response_model=TeamDetail)
async def get_team(team_id: str, db: AsyncSession = Depends(get_db)):
    """One team with its League expanded."""
    store = EntityStore(db)
    team = await store.get_or_404(Team, parse_entity_id(team_id, "team id"))
    detail = TeamDetail.model_validate(team)
    league = await store.get(League, EntityId(team.league_id))
    if league is not None:
        detail.league = LeagueSummary.model_validate(league)
    return detail


@router.post(
    "/teams", response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_team(
    body: TeamWrite,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    team = await EntityStore(db).create(Team, body.model_dump())
    return CreatedResponse(message="Team created successfully", id=team.id)


@router.put("/teams/{team_id}", response_model=TeamResponse)
async def replace_team(
    team_id: str,
    body: TeamWrite,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    entity_id = parse_entity_id(team_id, "team id")
    return await EntityStore(db).replace(Team, entity_id, body.model_dump())


@router.delete("/teams/{team_id}", response_model=MessageResponse)
async def delete_team(
    team_id: str,
    engine: IntegrityEngine = Depends(get_integrity_engine),
    identity: Identity = Depends(require_admin),
):
    await engine.delete_team(parse_entity_id(team_id, "team id"))
    return MessageResponse(message="Team deleted and events updated")
