"""League Routes — CRUD with cascade delete.

Invariants:
    - DELETE /leagues/{id} removes the League, its Teams and its Events in one transaction
    - Text fields arrive lower-cased (LeagueWrite normalizes)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.api.dependencies import get_integrity_engine, require_admin
from sports_schedule.core.domain_types import Identity
from sports_schedule.core.parse_inputs import parse_entity_id
from sports_schedule.infrastructure.database import get_db
from sports_schedule.models.league import League
from sports_schedule.schemas.base import CreatedResponse, MessageResponse
from sports_schedule.schemas.league import LeagueResponse, LeagueWrite
from sports_schedule.services.entity_store import EntityStore
from sports_schedule.services.integrity_engine import IntegrityEngine

router = APIRouter(prefix="/api", tags=["leagues"])


@router.get("/leagues", response_model=list[LeagueResponse])
async def list_leagues(db: AsyncSession = Depends(get_db)):
    return await EntityStore(db).list_all(League)


@router.post(
    "/leagues", response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_league(
    body: LeagueWrite,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    league = await EntityStore(db).create(League, body.model_dump())
    return CreatedResponse(message="League created successfully", id=league.id)


@router.get("/leagues/{league_id}", response_model=LeagueResponse)
async def get_league(league_id: str, db: AsyncSession = Depends(get_db)):
    return await EntityStore(db).get_or_404(
        League, parse_entity_id(league_id, "league id"),
    )


@router.put("/leagues/{league_id}", response_model=LeagueResponse)
async def replace_league(
    league_id: str,
    body: LeagueWrite,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    entity_id = parse_entity_id(league_id, "league id")
    return await EntityStore(db).replace(League, entity_id, body.model_dump())


@router.delete("/leagues/{league_id}", response_model=MessageResponse)
async def delete_league(
    league_id: str,
    engine: IntegrityEngine = Depends(get_integrity_engine),
    identity: Identity = Depends(require_admin),
):
    """Cascade delete: Teams and Events of the League go with it."""
    await engine.delete_league(parse_entity_id(league_id, "league id"))
    return MessageResponse(message="League, teams and events deleted")
