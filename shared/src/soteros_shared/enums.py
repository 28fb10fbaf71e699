from enum import StrEnum


class DomainEventType(StrEnum):
    INCIDENT_REPORTED = "incident.reported"
    WELFARE_REPORTED = "welfare.reported"
    ALERT_ISSUED = "alert.issued"
    SAFETY_PROTOCOL_PUBLISHED = "safety_protocol.published"
    SYSTEM_NOTICE = "system.notice"


ALL_EVENT_TYPES: set[str] = {e.value for e in DomainEventType}


class NotificationType(StrEnum):
    INCIDENT = "incident"
    WELFARE = "welfare"
    ALERT = "alert"
    SAFETY_PROTOCOL = "safety_protocol"
    SYSTEM = "system"


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    HIGH = "high"
    CRITICAL = "critical"


class PriorityLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# Listing order for the admin feed: lower rank sorts first.
PRIORITY_RANK: dict[str, int] = {
    PriorityLevel.CRITICAL: 1,
    PriorityLevel.HIGH: 2,
    PriorityLevel.MEDIUM: 3,
    PriorityLevel.LOW: 4,
}

URGENT_PRIORITIES: frozenset[str] = frozenset(
    {PriorityLevel.HIGH, PriorityLevel.CRITICAL}
)


class RelatedType(StrEnum):
    INCIDENT = "incident"
    WELFARE = "welfare"
    ALERT = "alert"
    PROTOCOL = "protocol"
