"""Database layer: models, repositories, engine/session utilities."""

from soteros_shared.db.base import Base, create_db_engine, create_session_factory
from soteros_shared.db.models import AdminNotification
from soteros_shared.db.repositories import (
    AdminNotificationRepository,
    NotificationFilters,
    NotificationPage,
)

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "AdminNotification",
    "AdminNotificationRepository",
    "NotificationFilters",
    "NotificationPage",
]
