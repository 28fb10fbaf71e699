"""Domain event fields to feed severity/priority mapping tables."""

from soteros_shared.enums import PriorityLevel, Severity

INCIDENT_SEVERITY: dict[str, Severity] = {
    "critical": Severity.CRITICAL,
    "high": Severity.HIGH,
    "moderate": Severity.WARNING,
    "low": Severity.INFO,
}

# Incidents use "moderate" where the feed ranks "medium".
INCIDENT_PRIORITY: dict[str, PriorityLevel] = {
    "critical": PriorityLevel.CRITICAL,
    "high": PriorityLevel.HIGH,
    "moderate": PriorityLevel.MEDIUM,
    "low": PriorityLevel.LOW,
}

INCIDENT_EMOJI: dict[str, str] = {
    "critical": "\U0001f6a8",
    "high": "⚠️",
    "moderate": "⚡",
    "low": "ℹ️",
}

ALERT_SEVERITY: dict[str, Severity] = {
    "emergency": Severity.CRITICAL,
    "warning": Severity.WARNING,
    "info": Severity.INFO,
}

ALERT_EMOJI: dict[str, str] = {
    "emergency": "\U0001f6a8",
    "warning": "⚠️",
    "info": "ℹ️",
}

PROTOCOL_EMOJI: dict[str, str] = {
    "fire": "\U0001f525",
    "earthquake": "\U0001f30d",
    "medical": "\U0001f3e5",
    "intrusion": "\U0001f6a8",
    "general": "\U0001f6e1️",
}

DEFAULT_EMOJI = "\U0001f6a8"
DEFAULT_PROTOCOL_EMOJI = PROTOCOL_EMOJI["general"]


def incident_severity(priority_level: str | None) -> Severity:
    """Map an incident's priority to a feed severity (unknown -> warning)."""
    return INCIDENT_SEVERITY.get(priority_level or "", Severity.WARNING)


def incident_priority(priority_level: str | None) -> PriorityLevel:
    return INCIDENT_PRIORITY.get(priority_level or "", PriorityLevel.MEDIUM)


def alert_severity(alert_severity: str) -> Severity:
    return ALERT_SEVERITY.get(alert_severity, Severity.WARNING)


def alert_priority(alert_severity: str) -> PriorityLevel:
    if alert_severity == "emergency":
        return PriorityLevel.CRITICAL
    return PriorityLevel.HIGH
