"""Abstract delivery provider interface and the values it trades in."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

logger = logging.getLogger(__name__)

_DETAIL_LIMIT = 300


class ErrorKind(StrEnum):
    NOT_CONFIGURED = "not_configured"
    AUTH_ERROR = "auth_error"
    CONNECTION_ERROR = "connection_error"
    HOST_NOT_FOUND = "host_not_found"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"
    # Batch only: the recipient's message could not be built.
    BUILD_ERROR = "build_error"


@dataclass(frozen=True, slots=True)
class Message:
    """A rendered email ready for delivery."""

    recipient: str
    subject: str
    body: str


@dataclass(frozen=True, slots=True)
class ProviderFailure:
    """One provider's failed attempt at delivering a message."""

    provider: str
    error: ErrorKind
    detail: str = ""

    ok: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Sent:
    """Successful delivery.

    ``attempts`` holds the failures of higher-priority providers tried
    before this one; it is diagnostic history, not an error.
    """

    provider: str
    message_id: str | None
    attempts: tuple[ProviderFailure, ...] = ()

    ok: ClassVar[bool] = True


class ProviderError(Exception):
    """Classified transport failure raised inside a provider's ``_deliver``."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = truncate(detail)


def truncate(detail: str) -> str:
    return detail[:_DETAIL_LIMIT]


class DeliveryProvider(ABC):
    """Base class for all email transports.

    Subclasses implement ``_deliver`` and raise ``ProviderError`` for
    failures they can classify. ``send`` never raises: anything else a
    transport throws is reported as ``TRANSPORT_ERROR``.
    """

    name: ClassVar[str]

    def is_configured(self) -> bool:
        """Whether the provider has the credentials it needs.

        Must be cheap and free of side effects; the engine calls it before
        every attempt.
        """
        return True

    def send(self, message: Message) -> Sent | ProviderFailure:
        log_ctx = {"provider": self.name, "recipient": message.recipient}
        try:
            message_id = self._deliver(message)
        except ProviderError as exc:
            logger.warning(
                "Provider attempt failed",
                extra={**log_ctx, "error": exc.kind, "detail": exc.detail},
            )
            return ProviderFailure(self.name, exc.kind, exc.detail)
        except Exception as exc:
            logger.exception("Unclassified provider error", extra=log_ctx)
            return ProviderFailure(
                self.name, ErrorKind.TRANSPORT_ERROR, truncate(str(exc))
            )

        logger.info("Email sent", extra={**log_ctx, "message_id": message_id})
        return Sent(provider=self.name, message_id=message_id)

    @abstractmethod
    def _deliver(self, message: Message) -> str | None:
        """Hand the message to the transport and return its message id."""

    def close(self) -> None:
        """Release transport resources held by the provider."""
