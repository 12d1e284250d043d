"""Input Parsing — identifier and date parsing shared by routes, schemas and the query planner.

Invariants:
    - All functions are PURE: no IO, no clock, no DB
    - Malformed input raises a 400-level ScheduleError, never returns a partial value
    - Identifiers are normalized to lowercase hex before they reach the store
"""

import re
from datetime import date, datetime

from sports_schedule.core.domain_types import EntityId
from sports_schedule.core.errors import InvalidDateError, InvalidIdentifierError

_ENTITY_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def is_valid_entity_id(value: object) -> bool:
    """True if value is a 24-char hex reference string."""
    return isinstance(value, str) and bool(_ENTITY_ID_RE.match(value))


def parse_entity_id(value: str, field: str = "id") -> EntityId:
    if not is_valid_entity_id(value):
        raise InvalidIdentifierError(str(value), field)
    return EntityId(value.lower())


def parse_entity_id_list(raw: str | None, field: str) -> frozenset[EntityId] | None:
    """Parse a comma-separated id list. None or blank means 'not supplied'."""
    if raw is None or not raw.strip():
        return None
    ids = frozenset(
        parse_entity_id(part.strip(), field)
        for part in raw.split(",")
        if part.strip()
    )
    return ids or None


def parse_calendar_date(value: str | date | None, field: str = "date") -> date | None:
    """Parse YYYY-MM-DD or a full ISO-8601 timestamp into a calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        # "Z" suffix is accepted by JS clients but not by fromisoformat before 3.11
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidDateError(text, field)
