"""Turn domain events into admin feed notifications.

The ``create_*`` functions write through a repository and let storage
errors propagate. ``AdminNotifier`` is what request handlers call: it
owns the transaction and never lets a feed failure break the action that
triggered it (reporting an incident must succeed even if the feed is down).
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from soteros_shared.db.models import AdminNotification
from soteros_shared.db.repositories import AdminNotificationRepository
from soteros_shared.enums import (
    NotificationType,
    PriorityLevel,
    RelatedType,
    Severity,
)
from soteros_shared.events import (
    AlertIssuedPayload,
    AnyTypedEvent,
    IncidentReportedPayload,
    SafetyProtocolPayload,
    SystemNoticePayload,
    WelfareReportedPayload,
)

from admin_feed import severity as mapping

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)


def create_incident_notification(
    repo: AdminNotificationRepository, incident: IncidentReportedPayload
) -> int:
    emoji = mapping.INCIDENT_EMOJI.get(incident.priority_level or "", mapping.DEFAULT_EMOJI)
    location = incident.location or "unknown location"
    return repo.create(
        AdminNotification(
            type=NotificationType.INCIDENT,
            title=f"{emoji} New Incident: {incident.incident_type}",
            message=incident.description
            or f"New {incident.incident_type} incident reported at {location}",
            severity=mapping.incident_severity(incident.priority_level),
            priority_level=mapping.incident_priority(incident.priority_level),
            related_type=RelatedType.INCIDENT,
            related_id=incident.incident_id,
            action_url="/admin/incidents/view",
            metadata_={
                "incident_id": incident.incident_id,
                "incident_type": incident.incident_type,
                "latitude": incident.latitude,
                "longitude": incident.longitude,
                "location": incident.location,
                "reported_by": incident.reported_by,
            },
        )
    )


def create_welfare_notification(
    repo: AdminNotificationRepository, report: WelfareReportedPayload
) -> int:
    full_name = f"{report.first_name or ''} {report.last_name or ''}".strip()
    user_name = full_name or f"User #{report.user_id}"
    needs_help = report.status == "needs_help"
    status_label = "NEEDS HELP" if needs_help else report.status.upper()
    return repo.create(
        AdminNotification(
            type=NotificationType.WELFARE,
            title=f"❤️ Welfare Check - {status_label}",
            message=(
                f"{user_name} reported {report.status}. "
                f"{report.additional_info or 'Immediate attention may be required.'}"
            ),
            severity=Severity.CRITICAL if needs_help else Severity.WARNING,
            priority_level=PriorityLevel.HIGH if needs_help else PriorityLevel.MEDIUM,
            related_type=RelatedType.WELFARE,
            related_id=report.report_id,
            action_url="/admin/welfare",
            metadata_={
                "report_id": report.report_id,
                "user_id": report.user_id,
                "user_name": user_name,
                "status": report.status,
                "submitted_at": (
                    report.submitted_at.isoformat() if report.submitted_at else None
                ),
            },
        )
    )


def create_alert_notification(
    repo: AdminNotificationRepository, alert: AlertIssuedPayload
) -> int:
    emoji = mapping.ALERT_EMOJI.get(alert.alert_severity, mapping.DEFAULT_EMOJI)
    return repo.create(
        AdminNotification(
            type=NotificationType.ALERT,
            title=f"{emoji} Alert Issued: {alert.title}",
            message=alert.description,
            severity=mapping.alert_severity(alert.alert_severity),
            priority_level=mapping.alert_priority(alert.alert_severity),
            related_type=RelatedType.ALERT,
            related_id=alert.id,
            action_url="/admin/alerts",
            metadata_={
                "alert_id": alert.id,
                "alert_type": alert.alert_type,
                "alert_severity": alert.alert_severity,
            },
        )
    )


def create_safety_protocol_notification(
    repo: AdminNotificationRepository, protocol: SafetyProtocolPayload
) -> int:
    emoji = mapping.PROTOCOL_EMOJI.get(protocol.type, mapping.DEFAULT_PROTOCOL_EMOJI)
    return repo.create(
        AdminNotification(
            type=NotificationType.SAFETY_PROTOCOL,
            title=f"{emoji} New Safety Protocol: {protocol.title}",
            message=protocol.description,
            severity=Severity.WARNING,
            priority_level=PriorityLevel.MEDIUM,
            related_type=RelatedType.PROTOCOL,
            related_id=protocol.protocol_id,
            action_url="/admin/safety-protocols",
            metadata_={
                "protocol_id": protocol.protocol_id,
                "protocol_type": protocol.type,
            },
        )
    )


def create_system_notification(
    repo: AdminNotificationRepository, notice: SystemNoticePayload
) -> int:
    return repo.create(
        AdminNotification(
            type=NotificationType.SYSTEM,
            title=f"\U0001f527 {notice.title}",
            message=notice.message,
            severity=notice.severity,
            priority_level=notice.priority,
        )
    )


_PRODUCERS: dict[type[BaseModel], Callable[[AdminNotificationRepository, BaseModel], int]] = {
    IncidentReportedPayload: create_incident_notification,  # type: ignore[dict-item]
    WelfareReportedPayload: create_welfare_notification,  # type: ignore[dict-item]
    AlertIssuedPayload: create_alert_notification,  # type: ignore[dict-item]
    SafetyProtocolPayload: create_safety_protocol_notification,  # type: ignore[dict-item]
    SystemNoticePayload: create_system_notification,  # type: ignore[dict-item]
}


def create_from_event(repo: AdminNotificationRepository, event: AnyTypedEvent) -> int:
    """Dispatch a typed event to its producer."""
    producer = _PRODUCERS[type(event.payload)]
    return producer(repo, event.payload)


class AdminNotifier:
    """Best-effort feed writer for request handlers and workflows."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def notify(
        self,
        producer: Callable[[AdminNotificationRepository, P], int],
        payload: P,
    ) -> int | None:
        """Run ``producer`` in its own transaction.

        Returns the new notification id, or None if storage failed. The
        failure is logged, never raised.
        """
        with self._session_factory() as session:
            try:
                notification_id = producer(AdminNotificationRepository(session), payload)
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                logger.exception(
                    "Failed to create admin notification",
                    extra={"producer": producer.__name__},
                )
                return None

        logger.info(
            "Admin notification created",
            extra={"notification_id": notification_id, "producer": producer.__name__},
        )
        return notification_id

    def incident_reported(self, incident: IncidentReportedPayload) -> int | None:
        return self.notify(create_incident_notification, incident)

    def welfare_reported(self, report: WelfareReportedPayload) -> int | None:
        return self.notify(create_welfare_notification, report)

    def alert_issued(self, alert: AlertIssuedPayload) -> int | None:
        return self.notify(create_alert_notification, alert)

    def safety_protocol_published(self, protocol: SafetyProtocolPayload) -> int | None:
        return self.notify(create_safety_protocol_notification, protocol)

    def system_notice(self, notice: SystemNoticePayload) -> int | None:
        return self.notify(create_system_notification, notice)
