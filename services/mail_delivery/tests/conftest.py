"""Test fixtures for mail_delivery tests."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from mail_delivery.config import SenderConfig
from mail_delivery.providers import (
    DeliveryProvider,
    ErrorKind,
    Message,
    ProviderFailure,
    Sent,
)

ProviderFactory = Callable[..., MagicMock]


@pytest.fixture()
def message() -> Message:
    return Message(
        recipient="responder@example.com",
        subject="Test",
        body="<p>Hello</p>",
    )


@pytest.fixture()
def sender_config() -> SenderConfig:
    return SenderConfig(
        from_name="SoteROS Emergency Management",
        from_address="noreply@soteros.example",
    )


@pytest.fixture()
def make_provider() -> ProviderFactory:
    """Build a mock provider that either succeeds or fails with ``error``."""

    def _make(
        name: str,
        *,
        configured: bool = True,
        error: ErrorKind | None = None,
    ) -> MagicMock:
        provider = MagicMock(spec=DeliveryProvider)
        provider.name = name
        provider.is_configured.return_value = configured
        if error is None:
            provider.send.return_value = Sent(provider=name, message_id=f"{name}-id")
        else:
            provider.send.return_value = ProviderFailure(name, error, f"{name} broke")
        return provider

    return _make
