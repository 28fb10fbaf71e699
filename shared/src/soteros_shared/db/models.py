"""SQLAlchemy ORM models for the admin notification feed."""

import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from soteros_shared.db.base import Base
from soteros_shared.db.types import JSONBCompatible
from soteros_shared.enums import NotificationType, PriorityLevel, Severity


class AdminNotification(Base):
    """One entry in the admin notification feed.

    ``admin_id`` of ``None`` marks a broadcast notification that every admin
    sees. Broadcasts share a single ``is_read`` flag, so a read by one admin
    is a read for all.
    """

    __tablename__ = "admin_notifications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    admin_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    type: Mapped[str] = mapped_column(
        String(32), nullable=False, default=NotificationType.SYSTEM, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str] = mapped_column(
        String(16), nullable=False, default=Severity.INFO, index=True
    )
    priority_level: Mapped[str] = mapped_column(
        String(16), nullable=False, default=PriorityLevel.MEDIUM, index=True
    )
    is_read: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True
    )
    related_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    related_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    action_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # ``metadata`` is reserved on declarative classes.
    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", JSONBCompatible, nullable=True
    )
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (
        Index(
            "ix_admin_notifications_lookup", "admin_id", "is_read", "created_at"
        ),
        Index(
            "ix_admin_notifications_type_priority",
            "type",
            "priority_level",
            "created_at",
        ),
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {
            "id": self.id,
            "admin_id": self.admin_id,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "severity": self.severity,
            "priority_level": self.priority_level,
            "is_read": self.is_read,
            "related_type": self.related_type,
            "related_id": self.related_id,
            "action_url": self.action_url,
            "metadata": self.metadata_,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
        }


def _isoformat(value: datetime.datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
