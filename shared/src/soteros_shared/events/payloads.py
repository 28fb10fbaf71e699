from datetime import datetime

from pydantic import BaseModel

from soteros_shared.enums import PriorityLevel, Severity


class IncidentReportedPayload(BaseModel):
    incident_id: int
    incident_type: str
    description: str | None = None
    # Incident scale: critical / high / moderate / low.
    priority_level: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    location: str | None = None
    reported_by: int | None = None


class WelfareReportedPayload(BaseModel):
    report_id: int
    user_id: int
    status: str
    first_name: str | None = None
    last_name: str | None = None
    additional_info: str | None = None
    submitted_at: datetime | None = None


class AlertIssuedPayload(BaseModel):
    id: int
    title: str
    description: str
    alert_severity: str
    alert_type: str | None = None


class SafetyProtocolPayload(BaseModel):
    protocol_id: int
    title: str
    description: str
    type: str = "general"


class SystemNoticePayload(BaseModel):
    title: str
    message: str
    severity: Severity = Severity.INFO
    priority: PriorityLevel = PriorityLevel.LOW
