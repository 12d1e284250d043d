"""Integrity Plans — cascade and null-out mutations described as ordered, storage-agnostic steps.

Invariants:
    - All functions are PURE: a plan is data, executing it is the shell's job
    - Steps run in list order inside one transaction
    - A step with must_match=True that affects zero rows aborts the whole plan as not-found
    - The deleting step of the root record always comes last, so a missing root
      rolls back every dependent change made before it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sports_schedule.core.domain_types import (
    EntityId, EntityKind, UnlinkedOpponent, opponent_columns,
)


class StepAction(str, Enum):
    DELETE = "delete"
    UPDATE = "update"


@dataclass(frozen=True)
class IntegrityStep:
    """One statement of a plan: act on every `entity` row where `match_field == match_value`."""
    name: str
    entity: EntityKind
    action: StepAction
    match_field: str
    match_value: EntityId
    changes: dict[str, Any] = field(default_factory=dict)
    must_match: bool = False


@dataclass(frozen=True)
class IntegrityPlan:
    """Named unit of work. root is the record whose absence means not-found."""
    name: str
    root: EntityKind
    root_id: EntityId
    steps: tuple[IntegrityStep, ...]

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]


def plan_league_deletion(league_id: EntityId) -> IntegrityPlan:
    """League delete cascades to its Teams and Events."""
    return IntegrityPlan(
        name="league deletion",
        root=EntityKind.LEAGUE,
        root_id=league_id,
        steps=(
            IntegrityStep(
                name="delete_league_teams",
                entity=EntityKind.TEAM,
                action=StepAction.DELETE,
                match_field="league_id",
                match_value=league_id,
            ),
            IntegrityStep(
                name="delete_league_events",
                entity=EntityKind.EVENT,
                action=StepAction.DELETE,
                match_field="league_id",
                match_value=league_id,
            ),
            IntegrityStep(
                name="delete_league",
                entity=EntityKind.LEAGUE,
                action=StepAction.DELETE,
                match_field="id",
                match_value=league_id,
                must_match=True,
            ),
        ),
    )


def plan_team_deletion(team_id: EntityId) -> IntegrityPlan:
    """Team delete unlinks referencing Events, which fall back to the default opponent."""
    return IntegrityPlan(
        name="team deletion",
        root=EntityKind.TEAM,
        root_id=team_id,
        steps=(
            IntegrityStep(
                name="unlink_opponent_events",
                entity=EntityKind.EVENT,
                action=StepAction.UPDATE,
                match_field="opposing_team_id",
                match_value=team_id,
                changes=opponent_columns(UnlinkedOpponent()),
            ),
            IntegrityStep(
                name="delete_team",
                entity=EntityKind.TEAM,
                action=StepAction.DELETE,
                match_field="id",
                match_value=team_id,
                must_match=True,
            ),
        ),
    )
