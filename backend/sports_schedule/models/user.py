"""User ORM — subject of the access gate. Username is unique."""

from sqlalchemy import Boolean, String, false
from sqlalchemy.orm import Mapped, mapped_column

from sports_schedule.db.base import Base, new_entity_id


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_entity_id,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
