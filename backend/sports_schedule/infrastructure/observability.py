"""Structured Logging — one handler on the root logger, JSON in production.

Invariants:
    - Every JSON line carries timestamp, level, logger and message
    - Schedule extras (error_code, path, entity, entity_id, user_id, steps) appear only when set
    - setup_logging replaces its own handler on repeat calls and leaves foreign handlers alone
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "sports_schedule"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_EXTRA_FIELDS = (
    "error_code", "path", "entity", "entity_id", "user_id", "steps",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
