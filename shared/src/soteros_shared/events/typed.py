from typing import Any, ClassVar, Self

from pydantic import BaseModel, model_validator

from soteros_shared.enums import DomainEventType
from soteros_shared.events.base import EventMetadata
from soteros_shared.events.payloads import (
    AlertIssuedPayload,
    IncidentReportedPayload,
    SafetyProtocolPayload,
    SystemNoticePayload,
    WelfareReportedPayload,
)


class _TypedEvent(BaseModel):
    """Envelope whose ``metadata.event_type`` is pinned to ``EVENT_TYPE``."""

    EVENT_TYPE: ClassVar[DomainEventType]

    metadata: EventMetadata

    @model_validator(mode="before")
    @classmethod
    def _set_event_type(cls, data: Any) -> Any:
        if isinstance(data, dict):
            meta = data.setdefault("metadata", {})
            if isinstance(meta, dict):
                meta.setdefault("event_type", cls.EVENT_TYPE)
        return data

    @model_validator(mode="after")
    def _check_event_type(self) -> Self:
        if self.metadata.event_type != self.EVENT_TYPE:
            raise ValueError(
                f"Expected event_type={self.EVENT_TYPE.value!r}, "
                f"got {self.metadata.event_type.value!r}"
            )
        return self


class IncidentReportedEvent(_TypedEvent):
    EVENT_TYPE = DomainEventType.INCIDENT_REPORTED

    payload: IncidentReportedPayload


class WelfareReportedEvent(_TypedEvent):
    EVENT_TYPE = DomainEventType.WELFARE_REPORTED

    payload: WelfareReportedPayload


class AlertIssuedEvent(_TypedEvent):
    EVENT_TYPE = DomainEventType.ALERT_ISSUED

    payload: AlertIssuedPayload


class SafetyProtocolPublishedEvent(_TypedEvent):
    EVENT_TYPE = DomainEventType.SAFETY_PROTOCOL_PUBLISHED

    payload: SafetyProtocolPayload


class SystemNoticeEvent(_TypedEvent):
    EVENT_TYPE = DomainEventType.SYSTEM_NOTICE

    payload: SystemNoticePayload


AnyTypedEvent = (
    IncidentReportedEvent
    | WelfareReportedEvent
    | AlertIssuedEvent
    | SafetyProtocolPublishedEvent
    | SystemNoticeEvent
)

_EVENT_REGISTRY: dict[str, type[_TypedEvent]] = {
    cls.EVENT_TYPE: cls
    for cls in (
        IncidentReportedEvent,
        WelfareReportedEvent,
        AlertIssuedEvent,
        SafetyProtocolPublishedEvent,
        SystemNoticeEvent,
    )
}


def parse_event(raw: dict[str, Any]) -> AnyTypedEvent:
    """Deserialize a raw dict (e.g. a POSTed envelope) into a typed event.

    Raises ValueError if event_type is missing or unknown; pydantic's
    ValidationError (a ValueError subclass) if the payload is invalid.
    """
    try:
        event_type = raw["metadata"]["event_type"]
    except (KeyError, TypeError) as exc:
        raise ValueError("Missing metadata.event_type in raw event") from exc

    event_cls = _EVENT_REGISTRY.get(event_type)
    if event_cls is None:
        raise ValueError(f"Unknown event type: {event_type!r}")

    return event_cls.model_validate(raw)  # type: ignore[return-value]
