"""Transactional emails sent to staff and users.

Each function renders one kind of email and hands it to the delivery
engine (or, for a whole team, the batch sender). None of them raise on
delivery failure; callers inspect the returned result.
"""

import datetime
from collections.abc import Sequence
from dataclasses import dataclass

from soteros_shared.config import FrontendConfig

from mail_delivery import templates
from mail_delivery.batch import BatchResult, BatchSender
from mail_delivery.engine import DeliveryEngine, DeliveryResult
from mail_delivery.providers import Message
from mail_delivery.renderer import render_template

OTP_EXPIRY_MINUTES = 10


@dataclass(frozen=True, slots=True)
class StaffMember:
    name: str
    email: str
    position: str = ""
    department: str = ""


@dataclass(frozen=True, slots=True)
class IncidentSummary:
    id: int
    type: str
    description: str
    priority_level: str = "Medium"
    location: str | None = None
    date_reported: datetime.datetime | None = None


def password_reset_message(email: str, otp: str) -> Message:
    body = render_template(
        templates.PASSWORD_RESET_BODY,
        {
            "heading": "Password Reset",
            "brand": templates.BRAND,
            "otp": otp,
            "expires_minutes": OTP_EXPIRY_MINUTES,
        },
    )
    return Message(email, templates.PASSWORD_RESET_SUBJECT, body)


def account_created_message(
    staff: StaffMember, plain_password: str, frontend: FrontendConfig
) -> Message:
    body = render_template(
        templates.ACCOUNT_CREATED_BODY,
        {
            "heading": "Welcome to SoteROS",
            "brand": templates.BRAND,
            "name": staff.name,
            "email": staff.email,
            "password": plain_password,
            "position": staff.position,
            "department": staff.department,
            "login_url": frontend.link("/staff/login"),
        },
    )
    return Message(staff.email, templates.ACCOUNT_CREATED_SUBJECT, body)


def assignment_message(
    staff: StaffMember,
    incident: IncidentSummary,
    frontend: FrontendConfig,
    *,
    personal: bool = False,
) -> Message:
    if personal:
        subject = templates.STAFF_ASSIGNMENT_SUBJECT
        intro = "You have been personally assigned to handle a new incident."
    else:
        subject = templates.TEAM_ASSIGNMENT_SUBJECT
        intro = "You have been assigned to handle a new incident through your team."

    reported = (
        incident.date_reported.strftime("%Y-%m-%d %H:%M")
        if incident.date_reported is not None
        else "Unknown"
    )
    body = render_template(
        templates.ASSIGNMENT_BODY,
        {
            "heading": "New Incident Assignment",
            "brand": templates.BRAND,
            "name": staff.name,
            "intro": intro,
            "priority": incident.priority_level,
            "priority_color": templates.PRIORITY_COLORS.get(
                incident.priority_level, templates.DEFAULT_PRIORITY_COLOR
            ),
            "incident_type": incident.type,
            "location": incident.location or "Not specified",
            "description": incident.description,
            "reported": reported,
            "incident_url": frontend.link(f"/staff/incidents/{incident.id}"),
        },
    )
    return Message(staff.email, subject.format(incident_type=incident.type), body)


def send_password_reset_otp(
    engine: DeliveryEngine, email: str, otp: str
) -> DeliveryResult:
    return engine.send_email(password_reset_message(email, otp))


def send_staff_account_creation(
    engine: DeliveryEngine,
    staff: StaffMember,
    plain_password: str,
    frontend: FrontendConfig | None = None,
) -> DeliveryResult:
    message = account_created_message(staff, plain_password, frontend or FrontendConfig())
    return engine.send_email(message)


def send_staff_assignment(
    engine: DeliveryEngine,
    staff: StaffMember,
    incident: IncidentSummary,
    frontend: FrontendConfig | None = None,
) -> DeliveryResult:
    message = assignment_message(
        staff, incident, frontend or FrontendConfig(), personal=True
    )
    return engine.send_email(message)


def send_incident_assignment(
    batch: BatchSender,
    members: Sequence[StaffMember],
    incident: IncidentSummary,
    frontend: FrontendConfig | None = None,
) -> BatchResult[StaffMember]:
    """Email every available member of the assigned team.

    ``members`` comes from the caller's team lookup, in the order it
    returned them. An empty team yields a result with ``no_recipients``.
    """
    frontend = frontend or FrontendConfig()
    return batch.send_to_many(
        members, lambda member: assignment_message(member, incident, frontend)
    )
