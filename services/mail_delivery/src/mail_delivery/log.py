"""Logging setup for mail_delivery (delegates to shared)."""

from soteros_shared.log import JsonFormatter, setup_logging as _setup

__all__ = ["JsonFormatter", "setup_logging"]


def setup_logging(level: str = "INFO") -> None:
    _setup(level, suppress=["httpx", "httpcore"], service="mail_delivery")
