"""Direct SMTP provider: the last-resort transport."""

import smtplib
import socket
import ssl
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from mail_delivery.config import SenderConfig, SmtpConfig
from mail_delivery.providers.base import (
    DeliveryProvider,
    ErrorKind,
    Message,
    ProviderError,
)


class SmtpProvider(DeliveryProvider):
    """Plain SMTP submission with STARTTLS or implicit TLS.

    Always available but slower and more fragile than the API providers
    (hosted platforms often block outbound SMTP). The engine attempts it
    last without checking ``is_configured``.
    """

    name = "smtp"

    def __init__(self, config: SmtpConfig, sender: SenderConfig) -> None:
        self._config = config
        self._from_name = sender.from_name
        self._from_email = sender.from_address or config.user

    def is_configured(self) -> bool:
        return bool(self._config.host and self._config.user and self._config.password)

    def _build(self, message: Message) -> EmailMessage:
        domain = self._from_email.rpartition("@")[2] or None
        email = EmailMessage()
        email["From"] = formataddr((self._from_name, self._from_email))
        email["To"] = message.recipient
        email["Subject"] = message.subject
        email["Message-ID"] = make_msgid(domain=domain)
        email.set_content(message.body, subtype="html")
        return email

    def _connect(self) -> smtplib.SMTP:
        config = self._config
        if config.implicit_tls:
            return smtplib.SMTP_SSL(
                config.host,
                config.port,
                timeout=config.timeout_seconds,
                context=ssl.create_default_context(),
            )
        return smtplib.SMTP(config.host, config.port, timeout=config.timeout_seconds)

    def _deliver(self, message: Message) -> str | None:
        email = self._build(message)
        config = self._config

        try:
            with self._connect() as smtp:
                if not config.implicit_tls:
                    smtp.ehlo()
                    if smtp.has_extn("starttls"):
                        smtp.starttls(context=ssl.create_default_context())
                        smtp.ehlo()
                if config.user and config.password:
                    smtp.login(config.user, config.password)
                smtp.send_message(email)
        # smtplib exceptions subclass OSError, so they are matched first.
        except smtplib.SMTPAuthenticationError as exc:
            raise ProviderError(ErrorKind.AUTH_ERROR, _describe(exc)) from exc
        except (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected) as exc:
            raise ProviderError(ErrorKind.CONNECTION_ERROR, _describe(exc)) from exc
        except smtplib.SMTPException as exc:
            raise ProviderError(ErrorKind.TRANSPORT_ERROR, _describe(exc)) from exc
        except socket.gaierror as exc:
            raise ProviderError(
                ErrorKind.HOST_NOT_FOUND, f"{config.host}: {exc}"
            ) from exc
        except TimeoutError as exc:
            raise ProviderError(
                ErrorKind.TIMEOUT, f"{config.host}:{config.port} timed out"
            ) from exc
        except OSError as exc:
            raise ProviderError(ErrorKind.CONNECTION_ERROR, _describe(exc)) from exc

        return email["Message-ID"]


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"
