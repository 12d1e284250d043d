"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - League is the ownership root; Team and Event carry league_id
    - Cross-entity references are indexed columns without FK constraints:
      cascade and null-out belong to services/integrity_engine.py

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from sports_schedule.models.league import League  # noqa: F401
from sports_schedule.models.team import Team  # noqa: F401
from sports_schedule.models.event import Event  # noqa: F401
from sports_schedule.models.user import User  # noqa: F401
