"""Logging setup for admin_feed (delegates to shared)."""

from soteros_shared.log import JsonFormatter, setup_logging as _setup

__all__ = ["JsonFormatter", "setup_logging"]


def setup_logging(level: str = "INFO") -> None:
    _setup(level, suppress=["werkzeug", "sqlalchemy.engine"], service="admin_feed")
