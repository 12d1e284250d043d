"""SQLAlchemy Declarative Base — shared base class and id factory for all ORM models.

Invariants:
    - All models inherit from Base
    - Primary keys are 24-char hex reference strings produced by new_entity_id()
"""

import secrets
import time

from sqlalchemy.orm import DeclarativeBase


def new_entity_id() -> str:
    """Timestamp-prefixed 24-char hex id (4-byte seconds + 8 random bytes)."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


class Base(DeclarativeBase):
    """Base class for all schedule ORM models."""
    pass
