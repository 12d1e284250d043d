"""Team Schemas — leagueId is format-validated, existence is not checked on write."""

from sports_schedule.schemas.base import CamelModel, EntityIdStr, RequiredText
from sports_schedule.schemas.league import LeagueSummary


class TeamWrite(CamelModel):
    """Team create / full-replace body."""
    league_id: EntityIdStr
    name: RequiredText
    school: RequiredText
    location: RequiredText


class TeamResponse(CamelModel):
    id: str
    league_id: str
    name: str
    school: str
    location: str


class TeamSummary(CamelModel):
    """Team fields expanded into Event detail responses."""
    id: str
    name: str
    school: str


class TeamDetail(TeamResponse):
    """Team with its owning League expanded (None if the League is gone)."""
    league: LeagueSummary | None = None
