"""League ORM — season/sport/division grouping that owns Teams and Events.

Invariants:
    - All descriptive columns are non-nullable and stored lower-cased (schemas normalize)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from sports_schedule.db.base import Base, new_entity_id


class League(Base):
    """League aggregate root."""
    __tablename__ = "leagues"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_entity_id,
    )
    season: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    sport: Mapped[str] = mapped_column(String(100), nullable=False)
    age_group: Mapped[str] = mapped_column(String(50), nullable=False)
    division: Mapped[str] = mapped_column(String(50), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
