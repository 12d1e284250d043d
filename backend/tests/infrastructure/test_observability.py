"""JSON log formatter and logging setup."""

import json
import logging

from sports_schedule.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "sports_schedule.test", logging.INFO, __file__, 1, "Committed %s", ("plan",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_known_extras():
    line = JSONFormatter().format(
        _record(entity="league", entity_id="abc", steps=["delete_league"]),
    )
    payload = json.loads(line)

    assert payload["message"] == "Committed plan"
    assert payload["level"] == "INFO"
    assert payload["entity"] == "league"
    assert payload["steps"] == ["delete_league"]
    assert "user_id" not in payload


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")

    named = [h for h in logging.root.handlers if h.get_name() == "sports_schedule"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
