"""Event ORM — one scheduled game tied to a League and optionally an opposing Team.

Invariants:
    - opposing_team is never empty; opposing_team_id is nullable
    - date is a calendar date, time a string ordered lexicographically ("HH:MM")

Design Decisions:
    - opponent_ref() reads the pair of opponent columns as one OpponentRef
"""

import datetime as dt

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sports_schedule.core.domain_types import (
    EntityId, OpponentRef, make_opponent,
)
from sports_schedule.db.base import Base, new_entity_id


class Event(Base):
    """Scheduled event entity."""
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_entity_id,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    league_id: Mapped[str] = mapped_column(
        String(24), nullable=False, index=True,
    )
    location: Mapped[str] = mapped_column(String(500), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[str] = mapped_column(String(20), nullable=False)
    opposing_team: Mapped[str] = mapped_column(String(200), nullable=False)
    opposing_team_id: Mapped[str | None] = mapped_column(
        String(24), nullable=True, index=True,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def opponent_ref(self) -> OpponentRef:
        team_id = EntityId(self.opposing_team_id) if self.opposing_team_id else None
        return make_opponent(self.opposing_team, team_id)
