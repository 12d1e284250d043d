"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId is always a 24-char lowercase hex string once it leaves core/parse_inputs.py
    - An Event opponent is either linked (team id + name) or unlinked (name only)
    - An opponent name is never empty: unlinked opponents fall back to DEFAULT_OPPONENT_NAME

Design Decisions:
    - NewType for ids: zero runtime cost, full type-checker support
    - Opponent as a tagged union of frozen dataclasses: the fallback rule lives here,
      not in route handlers
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", str)

DEFAULT_OPPONENT_NAME = "Bayview Glen"


# ─── Enums ───────────────────────────────────────────────────────

class Season(str, Enum):
    """Seasons produced by calendar derivation. League.season itself is free text."""
    FALL = "fall"
    WINTER = "winter"
    SPRING = "spring"


class DateRange(str, Enum):
    """Relative season windows accepted by the event query."""
    THIS_SEASON = "thisSeason"
    NEXT_SEASON = "nextSeason"


class EntityKind(str, Enum):
    """Entities the integrity engine can address."""
    LEAGUE = "league"
    TEAM = "team"
    EVENT = "event"


# ─── Opponent Reference ──────────────────────────────────────────

@dataclass(frozen=True)
class LinkedOpponent:
    """Opponent backed by a Team record."""
    team_id: EntityId
    name: str


@dataclass(frozen=True)
class UnlinkedOpponent:
    """Opponent known by name only."""
    name: str = DEFAULT_OPPONENT_NAME


OpponentRef = Union[LinkedOpponent, UnlinkedOpponent]


def make_opponent(name: str | None, team_id: EntityId | None) -> OpponentRef:
    """Build an opponent reference; blank names take the default."""
    display = (name or "").strip() or DEFAULT_OPPONENT_NAME
    if team_id:
        return LinkedOpponent(team_id=team_id, name=display)
    return UnlinkedOpponent(name=display)


def opponent_columns(ref: OpponentRef) -> dict:
    """Column values for an Event row carrying this opponent."""
    if isinstance(ref, LinkedOpponent):
        return {"opposing_team_id": ref.team_id, "opposing_team": ref.name}
    return {"opposing_team_id": None, "opposing_team": ref.name}


# ─── Identity ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Identity:
    """Validated caller identity handed to the core by the access gate."""
    user_id: str
    name: str
    is_admin: bool = False
