"""Shared plumbing for transactional email providers spoken to over HTTPS."""

import socket
from typing import Any

import httpx

from mail_delivery.providers.base import DeliveryProvider, ErrorKind, ProviderError

_DNS_FAILURE_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
)


def _is_dns_failure(exc: BaseException) -> bool:
    current: BaseException | None = exc
    while current is not None:
        if isinstance(current, socket.gaierror):
            return True
        current = current.__cause__ or current.__context__
    message = str(exc).lower()
    return any(marker in message for marker in _DNS_FAILURE_MARKERS)


class HttpApiProvider(DeliveryProvider):
    """Provider that posts JSON to a vendor API with a bounded timeout.

    Passing ``client`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = client or httpx.Client()

    def _post(
        self, path: str, *, json: dict[str, Any], headers: dict[str, str]
    ) -> httpx.Response:
        """POST and classify every failure into a ``ProviderError``."""
        try:
            response = self._client.post(
                f"{self._base_url}{path}",
                json=json,
                headers=headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            raise ProviderError(ErrorKind.TIMEOUT, str(exc)) from exc
        except httpx.ConnectError as exc:
            kind = (
                ErrorKind.HOST_NOT_FOUND
                if _is_dns_failure(exc)
                else ErrorKind.CONNECTION_ERROR
            )
            raise ProviderError(kind, str(exc)) from exc
        except httpx.NetworkError as exc:
            raise ProviderError(ErrorKind.CONNECTION_ERROR, str(exc)) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(ErrorKind.TRANSPORT_ERROR, str(exc)) from exc

        if response.status_code in (401, 403):
            raise ProviderError(
                ErrorKind.AUTH_ERROR,
                f"HTTP {response.status_code}: {response.text}",
            )
        if not response.is_success:
            raise ProviderError(
                ErrorKind.TRANSPORT_ERROR,
                f"HTTP {response.status_code}: {response.text}",
            )
        return response

    def close(self) -> None:
        self._client.close()


def json_body(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body, tolerating empty or non-JSON replies."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
