"""AdminNotificationRepository against a migrated PostgreSQL."""

import datetime

import pytest
from sqlalchemy.orm import Session, sessionmaker

from soteros_shared.db import (
    AdminNotification,
    AdminNotificationRepository,
    NotificationFilters,
)

pytestmark = pytest.mark.integration

_T0 = datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


def _notification(level: str, minutes: int) -> AdminNotification:
    return AdminNotification(
        type="incident",
        title=level,
        message=f"{level} incident",
        severity="warning",
        priority_level=level,
        created_at=_T0 + datetime.timedelta(minutes=minutes),
    )


class TestPostgresStore:
    def test_priority_ordering_and_counts(
        self, session_factory: sessionmaker[Session]
    ) -> None:
        with session_factory() as session:
            repo = AdminNotificationRepository(session)
            for minutes, level in enumerate(["low", "critical", "medium", "high"]):
                repo.create(_notification(level, minutes))
            repo.create(_notification("critical", 10), target_admin_id=99)
            session.commit()

        with session_factory() as session:
            repo = AdminNotificationRepository(session)
            page = repo.list_for_admin(1)

            assert [n.title for n in page.notifications] == [
                "critical",
                "high",
                "medium",
                "low",
            ]
            assert page.unread_count == 4
            assert repo.priority_unread_count(1) == 2
            assert repo.priority_unread_count(99) == 3

    def test_metadata_stored_as_jsonb(
        self, session_factory: sessionmaker[Session]
    ) -> None:
        with session_factory() as session:
            notification_id = AdminNotificationRepository(session).create(
                AdminNotification(
                    title="Alert",
                    message="Typhoon",
                    metadata_={"alert_id": 3, "tags": ["wind", "rain"]},
                )
            )
            session.commit()

        with session_factory() as session:
            n = AdminNotificationRepository(session).get_for_admin(notification_id, 1)
            assert n is not None
            assert n.metadata_ == {"alert_id": 3, "tags": ["wind", "rain"]}
            assert n.created_at.tzinfo is not None

    def test_mark_all_read_then_unread_only_is_empty(
        self, session_factory: sessionmaker[Session]
    ) -> None:
        with session_factory() as session:
            repo = AdminNotificationRepository(session)
            repo.create(_notification("high", 0))
            repo.create(_notification("low", 1), target_admin_id=1)
            assert repo.mark_all_read(1) == 2
            session.commit()

        with session_factory() as session:
            page = AdminNotificationRepository(session).list_for_admin(
                1, filters=NotificationFilters(unread_only=True)
            )
            assert page.total == 0
            assert page.unread_count == 0
