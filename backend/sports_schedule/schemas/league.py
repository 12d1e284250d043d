"""League Schemas — free-text fields are stripped and lower-cased on write.

Invariants:
    - LeagueWrite is used for both POST (create) and PUT (full replace)
    - Every field is required; blank values are rejected with a 400
"""

from sports_schedule.schemas.base import CamelModel, LowerText


class LeagueWrite(CamelModel):
    """League create / full-replace body."""
    season: LowerText
    sport: LowerText
    age_group: LowerText
    division: LowerText
    gender: LowerText


class LeagueResponse(CamelModel):
    id: str
    season: str
    sport: str
    age_group: str
    division: str
    gender: str


class LeagueSummary(CamelModel):
    """League fields expanded into Team and Event detail responses."""
    id: str
    sport: str
    age_group: str
