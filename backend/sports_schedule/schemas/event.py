"""Event Schemas — request bodies and responses for /events.

Invariants:
    - leagueId and opposingTeamId are format-validated (400 on malformed)
    - date accepts YYYY-MM-DD or an ISO timestamp and is stored as a calendar date
    - opposingTeam may be omitted or blank: to_opponent() applies the default name
"""

from datetime import date

from sports_schedule.core.domain_types import EntityId, OpponentRef, make_opponent
from sports_schedule.schemas.base import (
    CalendarDate, CamelModel, EntityIdStr, RequiredText,
)
from sports_schedule.schemas.league import LeagueSummary
from sports_schedule.schemas.team import TeamSummary


class EventWrite(CamelModel):
    """Event create / full-replace body."""
    type: RequiredText
    league_id: EntityIdStr
    location: RequiredText
    date: CalendarDate
    time: RequiredText
    opposing_team: str | None = None
    opposing_team_id: EntityIdStr | None = None
    notes: str | None = None

    def to_opponent(self) -> OpponentRef:
        team_id = EntityId(self.opposing_team_id) if self.opposing_team_id else None
        return make_opponent(self.opposing_team, team_id)

    def column_values(self) -> dict:
        """Columns for Event(**values) / replace(), opponent pair excluded."""
        return {
            "type": self.type,
            "league_id": self.league_id,
            "location": self.location,
            "date": self.date,
            "time": self.time,
            "notes": self.notes,
        }


class EventResponse(CamelModel):
    id: str
    type: str
    league_id: str
    location: str
    date: date
    time: str
    opposing_team: str
    opposing_team_id: str | None = None
    notes: str | None = None


class EventDetail(EventResponse):
    """Event with owning League and opposing Team expanded when they exist."""
    league: LeagueSummary | None = None
    opponent: TeamSummary | None = None
