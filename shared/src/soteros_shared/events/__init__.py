from soteros_shared.events.base import EventMetadata
from soteros_shared.events.payloads import (
    AlertIssuedPayload,
    IncidentReportedPayload,
    SafetyProtocolPayload,
    SystemNoticePayload,
    WelfareReportedPayload,
)
from soteros_shared.events.typed import (
    AlertIssuedEvent,
    AnyTypedEvent,
    IncidentReportedEvent,
    SafetyProtocolPublishedEvent,
    SystemNoticeEvent,
    WelfareReportedEvent,
    parse_event,
)

__all__ = [
    "EventMetadata",
    "IncidentReportedPayload",
    "WelfareReportedPayload",
    "AlertIssuedPayload",
    "SafetyProtocolPayload",
    "SystemNoticePayload",
    "IncidentReportedEvent",
    "WelfareReportedEvent",
    "AlertIssuedEvent",
    "SafetyProtocolPublishedEvent",
    "SystemNoticeEvent",
    "AnyTypedEvent",
    "parse_event",
]
