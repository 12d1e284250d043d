"""Integrity Plans — step order and must-match placement for cascades and null-outs."""

from sports_schedule.core.domain_types import DEFAULT_OPPONENT_NAME, EntityKind
from sports_schedule.core.integrity_plans import (
    StepAction, plan_league_deletion, plan_team_deletion,
)

LEAGUE_ID = "65a1f0c2e4b0a1b2c3d4e501"
TEAM_ID = "65a1f0c2e4b0a1b2c3d4e5a1"


def test_league_deletion_cascades_teams_then_events_then_league():
    plan = plan_league_deletion(LEAGUE_ID)
    assert plan.root is EntityKind.LEAGUE
    assert plan.root_id == LEAGUE_ID
    assert [(s.entity, s.action) for s in plan.steps] == [
        (EntityKind.TEAM, StepAction.DELETE),
        (EntityKind.EVENT, StepAction.DELETE),
        (EntityKind.LEAGUE, StepAction.DELETE),
    ]
    assert all(s.match_value == LEAGUE_ID for s in plan.steps)


def test_league_deletion_only_root_step_must_match():
    plan = plan_league_deletion(LEAGUE_ID)
    assert [s.must_match for s in plan.steps] == [False, False, True]
    assert plan.steps[-1].match_field == "id"


def test_team_deletion_unlinks_events_before_deleting_team():
    plan = plan_team_deletion(TEAM_ID)
    unlink, delete = plan.steps
    assert unlink.entity is EntityKind.EVENT
    assert unlink.action is StepAction.UPDATE
    assert unlink.match_field == "opposing_team_id"
    assert unlink.changes == {
        "opposing_team_id": None,
        "opposing_team": DEFAULT_OPPONENT_NAME,
    }
    assert not unlink.must_match
    assert delete.entity is EntityKind.TEAM
    assert delete.must_match


def test_step_names_listed_in_order():
    assert plan_team_deletion(TEAM_ID).step_names == [
        "unlink_opponent_events", "delete_team",
    ]
