"""Team ORM — an opposing team inside a League."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from sports_schedule.db.base import Base, new_entity_id


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_entity_id,
    )
    league_id: Mapped[str] = mapped_column(
        String(24), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    school: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=False)
