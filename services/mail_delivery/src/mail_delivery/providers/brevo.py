"""Brevo (ex-Sendinblue) transactional email API provider."""

import httpx

from mail_delivery.config import BrevoConfig, SenderConfig
from mail_delivery.providers.base import ErrorKind, Message, ProviderError
from mail_delivery.providers.http_api import HttpApiProvider, json_body


class BrevoProvider(HttpApiProvider):
    """First choice: low-latency API with a free daily quota."""

    name = "brevo"

    def __init__(
        self,
        config: BrevoConfig,
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
            raise ProviderError(ErrorKind.NOT_CONFIGURED, "BREVO_API_KEY is not set")

        response = self._post(
            "/v3/smtp/email",
            json={
                "sender": {"name": self._from_name, "email": self._from_email},
                "to": [{"email": message.recipient}],
                "subject": message.subject,
                "htmlContent": message.body,
            },
            headers={"api-key": self._api_key, "accept": "application/json"},
        )
        return json_body(response).get("messageId")
