"""Single-line JSON logging shared by the SoteROS services.

Context goes in ``extra={...}``; every extra key becomes a top-level field of
the emitted object. Keys that can carry credentials (API keys, SMTP
passwords, reset OTPs) are masked before serialization, including inside
nested dicts.
"""

import json
import logging
import sys
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord has; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

SECRET_KEYS = frozenset({"api_key", "password", "otp", "token", "plain_password"})
MASK = "***"


def _mask(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {
            k: MASK if k in SECRET_KEYS else _mask(v) for k, v in value.items()
        }
    return value


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self._service:
            entry["service"] = self._service

        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        entry.update(_mask(extras))

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    suppress: Sequence[str] = (),
    service: str | None = None,
) -> None:
    """Route the root logger to stdout as JSON lines.

    ``suppress`` names chatty third-party loggers (httpx, werkzeug) that are
    capped at WARNING.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(service))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)
