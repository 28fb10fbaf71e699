"""Email transports in their default fallback order."""

from mail_delivery.providers.base import (
    DeliveryProvider,
    ErrorKind,
    Message,
    ProviderError,
    ProviderFailure,
    Sent,
)
from mail_delivery.providers.brevo import BrevoProvider
from mail_delivery.providers.sendgrid import SendGridProvider
from mail_delivery.providers.smtp import SmtpProvider

__all__ = [
    "DeliveryProvider",
    "ErrorKind",
    "Message",
    "ProviderError",
    "ProviderFailure",
    "Sent",
    "BrevoProvider",
    "SendGridProvider",
    "SmtpProvider",
]
