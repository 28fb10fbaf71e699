"""Fallback chain over the email providers."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import ClassVar

from mail_delivery.config import (
    BrevoConfig,
    DeliveryConfig,
    SendGridConfig,
    SenderConfig,
    SmtpConfig,
)
from mail_delivery.providers import (
    BrevoProvider,
    DeliveryProvider,
    ErrorKind,
    Message,
    ProviderFailure,
    SendGridProvider,
    Sent,
    SmtpProvider,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Failed:
    """Every provider that was tried failed.

    ``attempts`` lists each invoked provider in priority order; providers
    skipped as unconfigured are not included.
    """

    attempts: tuple[ProviderFailure, ...]

    ok: ClassVar[bool] = False

    @property
    def reason(self) -> ErrorKind:
        """Error kind of the final attempt."""
        if not self.attempts:
            return ErrorKind.NOT_CONFIGURED
        return self.attempts[-1].error

    @property
    def detail(self) -> str:
        return self.attempts[-1].detail if self.attempts else ""


DeliveryResult = Sent | Failed


class DeliveryEngine:
    """Tries providers in a fixed priority order until one accepts the message.

    ``providers`` are gated: each is skipped when ``is_configured()`` is
    false. ``last_resort`` is not gated and is attempted whenever every
    gated provider has been skipped or has failed. Nothing is retried.
    """

    def __init__(
        self,
        providers: Sequence[DeliveryProvider],
        last_resort: DeliveryProvider,
    ) -> None:
        self._providers = tuple(providers)
        self._last_resort = last_resort

    @property
    def chain(self) -> tuple[DeliveryProvider, ...]:
        return (*self._providers, self._last_resort)

    def send_email(self, message: Message) -> DeliveryResult:
        attempts: list[ProviderFailure] = []

        for provider in self._providers:
            if not provider.is_configured():
                logger.debug(
                    "Provider not configured, skipping",
                    extra={"provider": provider.name},
                )
                continue
            outcome = provider.send(message)
            if isinstance(outcome, Sent):
                return replace(outcome, attempts=tuple(attempts))
            attempts.append(outcome)
            logger.info(
                "Falling back to next provider",
                extra={"provider": provider.name, "error": outcome.error},
            )

        if not self._last_resort.is_configured():
            logger.warning(
                "Last-resort provider has no credentials, attempting anyway",
                extra={"provider": self._last_resort.name},
            )
        outcome = self._last_resort.send(message)
        if isinstance(outcome, Sent):
            return replace(outcome, attempts=tuple(attempts))
        attempts.append(outcome)

        logger.error(
            "All providers failed",
            extra={
                "recipient": message.recipient,
                "attempts": [f"{a.provider}:{a.error}" for a in attempts],
            },
        )
        return Failed(attempts=tuple(attempts))

    def close(self) -> None:
        for provider in self.chain:
            provider.close()


def create_default_engine(
    delivery: DeliveryConfig | None = None,
    brevo: BrevoConfig | None = None,
    sendgrid: SendGridConfig | None = None,
    smtp: SmtpConfig | None = None,
    sender: SenderConfig | None = None,
) -> DeliveryEngine:
    """Build the Brevo -> SendGrid -> SMTP chain from configuration."""
    delivery = delivery or DeliveryConfig()
    smtp = smtp or SmtpConfig()
    sender = sender or SenderConfig()
    if not sender.from_address:
        sender = sender.model_copy(update={"from_address": smtp.user})

    timeout = delivery.provider_timeout_seconds
    return DeliveryEngine(
        providers=[
            BrevoProvider(brevo or BrevoConfig(), sender, timeout),
            SendGridProvider(sendgrid or SendGridConfig(), sender, timeout),
        ],
        last_resort=SmtpProvider(smtp, sender),
    )
