import pytest
from pydantic import ValidationError

from soteros_shared.enums import DomainEventType, PriorityLevel, Severity
from soteros_shared.events import (
    IncidentReportedEvent,
    SafetyProtocolPayload,
    SystemNoticeEvent,
    SystemNoticePayload,
    WelfareReportedEvent,
    parse_event,
)


class TestTypedEvents:
    def test_event_type_is_filled_in(self):
        event = IncidentReportedEvent(
            metadata={},
            payload={"incident_id": 1, "incident_type": "Fire"},
        )
        assert event.metadata.event_type == DomainEventType.INCIDENT_REPORTED

    def test_mismatched_event_type_rejected(self):
        with pytest.raises(ValidationError):
            WelfareReportedEvent(
                metadata={"event_type": "alert.issued"},
                payload={"report_id": 1, "user_id": 2, "status": "safe"},
            )


class TestPayloadDefaults:
    def test_system_notice_defaults(self):
        payload = SystemNoticePayload(title="t", message="m")
        assert payload.severity == Severity.INFO
        assert payload.priority == PriorityLevel.LOW

    def test_safety_protocol_default_type(self):
        payload = SafetyProtocolPayload(protocol_id=1, title="t", description="d")
        assert payload.type == "general"


class TestParseEvent:
    def test_parses_known_type(self):
        event = parse_event({
            "metadata": {"event_type": "system.notice"},
            "payload": {"title": "Upgrade", "message": "Tonight"},
        })
        assert isinstance(event, SystemNoticeEvent)
        assert event.payload.title == "Upgrade"

    def test_missing_event_type(self):
        with pytest.raises(ValueError, match="Missing"):
            parse_event({"payload": {}})

    def test_unknown_event_type(self):
        with pytest.raises(ValueError, match="Unknown event type"):
            parse_event({"metadata": {"event_type": "user.registered"}, "payload": {}})

    def test_invalid_payload(self):
        with pytest.raises(ValidationError):
            parse_event({
                "metadata": {"event_type": "incident.reported"},
                "payload": {"incident_type": "Fire"},
            })
