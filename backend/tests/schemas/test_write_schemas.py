"""Write schemas — camelCase input, normalization and the default opponent."""

from datetime import date

import pytest
from pydantic import ValidationError

from sports_schedule.core.domain_types import (
    DEFAULT_OPPONENT_NAME, LinkedOpponent, UnlinkedOpponent,
)
from sports_schedule.schemas.event import EventWrite
from sports_schedule.schemas.league import LeagueWrite
from sports_schedule.schemas.team import TeamWrite

LEAGUE_ID = "65a1f0c2e4b0a1b2c3d4e501"
TEAM_ID = "65a1f0c2e4b0a1b2c3d4e5a1"


def _event_body(**overrides) -> dict:
    body = {
        "type": "game",
        "leagueId": LEAGUE_ID,
        "location": "Main Gym",
        "date": "2026-10-20",
        "time": "16:00",
    }
    body.update(overrides)
    return body


class TestLeagueWrite:
    def test_fields_are_trimmed_and_lowercased(self):
        league = LeagueWrite.model_validate({
            "season": " Fall ", "sport": "Basketball", "ageGroup": "U14",
            "division": "A", "gender": "Girls",
        })
        assert league.model_dump() == {
            "season": "fall", "sport": "basketball", "age_group": "u14",
            "division": "a", "gender": "girls",
        }

    def test_blank_field_rejected(self):
        with pytest.raises(ValidationError):
            LeagueWrite.model_validate({
                "season": "fall", "sport": "  ", "ageGroup": "u14",
                "division": "a", "gender": "girls",
            })

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            LeagueWrite.model_validate({"season": "fall"})


class TestTeamWrite:
    def test_league_id_lowercased(self):
        team = TeamWrite.model_validate({
            "leagueId": LEAGUE_ID.upper(), "name": "Hawks",
            "school": "Northside", "location": "North Gym",
        })
        assert team.league_id == LEAGUE_ID

    def test_malformed_league_id_rejected(self):
        with pytest.raises(ValidationError):
            TeamWrite.model_validate({
                "leagueId": "123", "name": "Hawks",
                "school": "Northside", "location": "North Gym",
            })


class TestEventWrite:
    def test_date_only_string(self):
        event = EventWrite.model_validate(_event_body())
        assert event.date == date(2026, 10, 20)

    def test_iso_timestamp_reduced_to_calendar_date(self):
        event = EventWrite.model_validate(
            _event_body(date="2026-10-20T00:00:00.000Z"),
        )
        assert event.date == date(2026, 10, 20)

    def test_unparseable_date_rejected(self):
        with pytest.raises(ValidationError):
            EventWrite.model_validate(_event_body(date="next tuesday"))

    def test_malformed_opponent_id_rejected(self):
        with pytest.raises(ValidationError):
            EventWrite.model_validate(_event_body(opposingTeamId="xyz"))

    def test_omitted_opponent_uses_default_name(self):
        event = EventWrite.model_validate(_event_body())
        assert event.to_opponent() == UnlinkedOpponent()
        assert event.to_opponent().name == DEFAULT_OPPONENT_NAME

    def test_linked_opponent(self):
        event = EventWrite.model_validate(
            _event_body(opposingTeam="Hawks", opposingTeamId=TEAM_ID),
        )
        assert event.to_opponent() == LinkedOpponent(team_id=TEAM_ID, name="Hawks")

    def test_column_values_exclude_opponent_pair(self):
        values = EventWrite.model_validate(_event_body(notes="Bring water")).column_values()
        assert "opposing_team" not in values
        assert "opposing_team_id" not in values
        assert values["notes"] == "Bring water"
        assert values["league_id"] == LEAGUE_ID
