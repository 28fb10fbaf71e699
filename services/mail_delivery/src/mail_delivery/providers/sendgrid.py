"""SendGrid v3 mail API provider."""

import httpx

from mail_delivery.config import SendGridConfig, SenderConfig
from mail_delivery.providers.base import ErrorKind, Message, ProviderError
from mail_delivery.providers.http_api import HttpApiProvider


class SendGridProvider(HttpApiProvider):
    name = "sendgrid"

    def __init__(
        self,
        config: SendGridConfig,
        sender: SenderConfig,
        timeout_seconds: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(config.base_url, timeout_seconds, client)
        self._api_key = config.api_key
        self._from_name = sender.from_name
        self._from_email = sender.address(config.from_email)

    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _deliver(self, message: Message) -> str | None:
        if not self._api_key:
            raise ProviderError(
                ErrorKind.NOT_CONFIGURED, "SENDGRID_API_KEY is not set"
            )

        response = self._post(
            "/v3/mail/send",
            json={
                "personalizations": [{"to": [{"email": message.recipient}]}],
                "from": {"email": self._from_email, "name": self._from_name},
                "subject": message.subject,
                "content": [{"type": "text/html", "value": message.body}],
            },
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
        # SendGrid answers 202 with an empty body; the id is a header.
        return response.headers.get("X-Message-Id")
