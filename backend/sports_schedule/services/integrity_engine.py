"""Integrity Engine — executes IntegrityPlans all-or-nothing inside one transaction.

Invariants:
    - Steps run in plan order; the transaction commits only after the last step
    - A must_match step affecting zero rows rolls back and raises ResourceNotFoundError
    - Store errors, timeouts and cancellation roll back and surface IntegrityTransactionError
    - Nothing is read before the transaction: existence is the affected-row count of the
      root delete, so a concurrent delete still resolves to a clean not-found

Design Decisions:
    - Plans are built in core/integrity_plans.py; this module only maps EntityKind to
      models and StepAction to DELETE / UPDATE statements
"""

import asyncio
import logging

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.core.domain_types import EntityId, EntityKind
from sports_schedule.core.errors import (
    ErrorContext, IntegrityTransactionError, ResourceNotFoundError,
)
from sports_schedule.core.integrity_plans import (
    IntegrityPlan, IntegrityStep, StepAction,
    plan_league_deletion, plan_team_deletion,
)
from sports_schedule.models.event import Event
from sports_schedule.models.league import League
from sports_schedule.models.team import Team

logger = logging.getLogger(__name__)

_MODELS = {
    EntityKind.LEAGUE: League,
    EntityKind.TEAM: Team,
    EntityKind.EVENT: Event,
}


class IntegrityEngine:
    """Runs cascade and null-out plans against the database."""

    def __init__(self, db: AsyncSession, timeout_seconds: float = 10.0):
        self.db = db
        self.timeout_seconds = timeout_seconds

    async def delete_league(self, league_id: EntityId) -> dict[str, int]:
        return await self.execute(plan_league_deletion(league_id))

    async def delete_team(self, team_id: EntityId) -> dict[str, int]:
        return await self.execute(plan_team_deletion(team_id))

    async def execute(self, plan: IntegrityPlan) -> dict[str, int]:
        """Run plan; return affected rows per step name."""
        extra = {
            "entity": plan.root.value,
            "entity_id": plan.root_id,
            "steps": plan.step_names,
        }
        logger.info(f"Starting {plan.name}", extra=extra)
        try:
            affected = await asyncio.wait_for(
                self._run(plan), timeout=self.timeout_seconds,
            )
        except ResourceNotFoundError:
            logger.info(f"{plan.name} rolled back: root not found", extra=extra)
            raise
        except asyncio.TimeoutError:
            logger.error(f"{plan.name} timed out and was rolled back", extra=extra)
            raise IntegrityTransactionError(
                plan.name, "timeout",
                ErrorContext(entity=plan.root.value, entity_id=plan.root_id),
            )
        except SQLAlchemyError as e:
            logger.error(
                f"{plan.name} failed and was rolled back: {e}", extra=extra,
            )
            raise IntegrityTransactionError(
                plan.name, str(e),
                ErrorContext(entity=plan.root.value, entity_id=plan.root_id),
            )
        logger.info(f"Committed {plan.name}: {affected}", extra=extra)
        return affected

    async def _run(self, plan: IntegrityPlan) -> dict[str, int]:
        affected: dict[str, int] = {}
        try:
            for step in plan.steps:
                count = await self._apply(step)
                affected[step.name] = count
                if step.must_match and count == 0:
                    raise ResourceNotFoundError(
                        plan.root.value.capitalize(), plan.root_id,
                    )
            await self.db.commit()
        except BaseException:
            # BaseException: CancelledError from wait_for must roll back too
            await self.db.rollback()
            raise
        return affected

    async def _apply(self, step: IntegrityStep) -> int:
        model = _MODELS[step.entity]
        column = getattr(model, step.match_field)
        if step.action is StepAction.DELETE:
            statement = delete(model).where(column == step.match_value)
        else:
            statement = (
                update(model)
                .where(column == step.match_value)
                .values(**step.changes)
            )
        result = await self.db.execute(
            statement.execution_options(synchronize_session=False),
        )
        return result.rowcount
