"""Initial schema — leagues, teams, events, users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

References (teams.league_id, events.league_id, events.opposing_team_id) are
indexed columns without FK constraints; cascade and null-out are applied by
the integrity engine inside one transaction.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "leagues",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("season", sa.String(50), nullable=False),
        sa.Column("sport", sa.String(100), nullable=False),
        sa.Column("age_group", sa.String(50), nullable=False),
        sa.Column("division", sa.String(50), nullable=False),
        sa.Column("gender", sa.String(20), nullable=False),
    )
    op.create_index("ix_leagues_season", "leagues", ["season"])

    op.create_table(
        "teams",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("league_id", sa.String(24), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("school", sa.String(200), nullable=False),
        sa.Column("location", sa.String(500), nullable=False),
    )
    op.create_index("ix_teams_league_id", "teams", ["league_id"])

    op.create_table(
        "events",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("league_id", sa.String(24), nullable=False),
        sa.Column("location", sa.String(500), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("time", sa.String(20), nullable=False),
        sa.Column("opposing_team", sa.String(200), nullable=False),
        sa.Column("opposing_team_id", sa.String(24), nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
    )
    op.create_index("ix_events_league_id", "events", ["league_id"])
    op.create_index("ix_events_opposing_team_id", "events", ["opposing_team_id"])
    op.create_index("ix_events_date", "events", ["date"])

    op.create_table(
        "users",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_admin", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_events_date", table_name="events")
    op.drop_index("ix_events_opposing_team_id", table_name="events")
    op.drop_index("ix_events_league_id", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_teams_league_id", table_name="teams")
    op.drop_table("teams")
    op.drop_index("ix_leagues_season", table_name="leagues")
    op.drop_table("leagues")
