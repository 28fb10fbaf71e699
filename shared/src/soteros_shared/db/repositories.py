"""Data access repositories with constructor-injected sessions."""

import math
from dataclasses import dataclass

from sqlalchemy import ColumnElement, case, delete, func, or_, select, update
from sqlalchemy.orm import Session

from soteros_shared.db.models import AdminNotification
from soteros_shared.enums import PRIORITY_RANK, URGENT_PRIORITIES

_UNRANKED = len(PRIORITY_RANK) + 1


@dataclass(frozen=True, slots=True)
class NotificationFilters:
    """Optional narrowing applied to an admin's feed listing."""

    unread_only: bool = False
    type: str | None = None
    severity: str | None = None


@dataclass(frozen=True, slots=True)
class NotificationPage:
    """One page of an admin's feed plus the counters the UI needs."""

    notifications: list[AdminNotification]
    total: int
    unread_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)


def _visible_to(admin_id: int) -> ColumnElement[bool]:
    """Rows owned by the admin or broadcast to all admins."""
    return or_(
        AdminNotification.admin_id == admin_id,
        AdminNotification.admin_id.is_(None),
    )


class AdminNotificationRepository:
    """Persistence for the admin notification feed.

    Every read and mutation is scoped to what the requesting admin can see.
    "Not found" and "not visible" look the same to callers, so another
    admin's private notifications are never revealed.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(
        self,
        notification: AdminNotification,
        target_admin_id: int | None = None,
    ) -> int:
        """Insert a notification and return its id.

        ``target_admin_id=None`` broadcasts to every admin. Storage errors
        propagate to the caller unchanged.
        """
        notification.admin_id = target_admin_id
        self._session.add(notification)
        self._session.flush()
        return notification.id

    def get_for_admin(
        self, notification_id: int, admin_id: int
    ) -> AdminNotification | None:
        """Fetch a single notification if the admin can see it."""
        stmt = select(AdminNotification).where(
            AdminNotification.id == notification_id,
            _visible_to(admin_id),
        )
        return self._session.scalars(stmt).first()

    def list_for_admin(
        self,
        admin_id: int,
        page: int = 1,
        page_size: int = 20,
        filters: NotificationFilters | None = None,
    ) -> NotificationPage:
        """Return one page of the admin's feed.

        Ordered by priority rank (critical first), then newest first.
        ``unread_count`` ignores ``filters`` and always counts every unread
        notification visible to the admin.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        filters = filters or NotificationFilters()
        conditions = [_visible_to(admin_id)]
        if filters.unread_only:
            conditions.append(AdminNotification.is_read.is_(False))
        if filters.type is not None:
            conditions.append(AdminNotification.type == filters.type)
        if filters.severity is not None:
            conditions.append(AdminNotification.severity == filters.severity)

        rank = case(
            PRIORITY_RANK,
            value=AdminNotification.priority_level,
            else_=_UNRANKED,
        )
        stmt = (
            select(AdminNotification)
            .where(*conditions)
            .order_by(
                rank,
                AdminNotification.created_at.desc(),
                AdminNotification.id.desc(),
            )
            .limit(page_size)
            .offset((page - 1) * page_size)
        )
        notifications = list(self._session.scalars(stmt).all())

        total = self._session.scalar(
            select(func.count()).select_from(AdminNotification).where(*conditions)
        )

        return NotificationPage(
            notifications=notifications,
            total=total or 0,
            unread_count=self.unread_count(admin_id),
            page=page,
            page_size=page_size,
        )

    def mark_read(self, notification_id: int, admin_id: int) -> bool:
        """Mark one notification read. Returns False if not found or not visible."""
        stmt = (
            update(AdminNotification)
            .where(AdminNotification.id == notification_id, _visible_to(admin_id))
            .values(is_read=True)
        )
        result = self._session.execute(stmt)
        return result.rowcount > 0

    def mark_all_read(self, admin_id: int) -> int:
        """Mark every unread notification visible to the admin as read.

        Returns the number of rows changed.
        """
        stmt = (
            update(AdminNotification)
            .where(_visible_to(admin_id), AdminNotification.is_read.is_(False))
            .values(is_read=True)
        )
        result = self._session.execute(stmt)
        return result.rowcount

    def delete(self, notification_id: int, admin_id: int) -> bool:
        """Delete one notification. Returns False if not found or not visible."""
        stmt = delete(AdminNotification).where(
            AdminNotification.id == notification_id, _visible_to(admin_id)
        )
        result = self._session.execute(stmt)
        return result.rowcount > 0

    def unread_count(self, admin_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(AdminNotification)
            .where(_visible_to(admin_id), AdminNotification.is_read.is_(False))
        )
        return self._session.scalar(stmt) or 0

    def priority_unread_count(self, admin_id: int) -> int:
        """Count unread high/critical notifications (the UI's urgent badge)."""
        stmt = (
            select(func.count())
            .select_from(AdminNotification)
            .where(
                _visible_to(admin_id),
                AdminNotification.is_read.is_(False),
                AdminNotification.priority_level.in_(sorted(URGENT_PRIORITIES)),
            )
        )
        return self._session.scalar(stmt) or 0
