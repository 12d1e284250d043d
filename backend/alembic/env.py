"""Alembic environment — async migrations for the schedule store.

The URL comes from Settings (DATABASE_URL / .env, postgres URLs already
rewritten for asyncpg), so migrations and the app always target the same
database. alembic.ini only supplies logging and the script location.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import sports_schedule.models  # noqa: F401  (populates Base.metadata)
from sports_schedule.config import get_settings
from sports_schedule.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = get_settings().database_url


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=database_url.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
