"""Tests for the batch send coordinator."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from mail_delivery.batch import BatchResult, BatchSender, RecipientFailure
from mail_delivery.config import DeliveryConfig
from mail_delivery.engine import DeliveryEngine, Failed
from mail_delivery.providers import ErrorKind, Message, ProviderFailure, Sent

ProviderFactory = Callable[..., MagicMock]


def _engine(failures: dict[str, ErrorKind]) -> MagicMock:
    """Engine mock that fails for the recipients listed in ``failures``."""

    def send_email(message: Message) -> Sent | Failed:
        kind = failures.get(message.recipient)
        if kind is None:
            return Sent(provider="brevo", message_id=f"id-{message.recipient}")
        return Failed(attempts=(ProviderFailure("smtp", kind, "nope"),))

    engine = MagicMock(spec=DeliveryEngine)
    engine.send_email.side_effect = send_email
    return engine


def _build(recipient: str) -> Message:
    return Message(recipient, "Assignment", f"<p>Hi {recipient}</p>")


class TestBatchSender:
    def test_one_failure_does_not_stop_the_rest(self) -> None:
        engine = _engine({"r2@example.com": ErrorKind.TIMEOUT})
        sender = BatchSender(engine)

        result = sender.send_to_many(
            ["r1@example.com", "r2@example.com", "r3@example.com"], _build
        )

        assert result.total_recipients == 3
        assert result.sent == 2
        assert result.failed == 1
        assert result.failures == (
            RecipientFailure("r2@example.com", ErrorKind.TIMEOUT, "nope"),
        )
        assert engine.send_email.call_count == 3

    def test_failures_follow_recipient_order(self) -> None:
        engine = _engine(
            {
                "c@example.com": ErrorKind.AUTH_ERROR,
                "a@example.com": ErrorKind.CONNECTION_ERROR,
            }
        )

        result = BatchSender(engine).send_to_many(
            ["c@example.com", "b@example.com", "a@example.com"], _build
        )

        assert [f.recipient for f in result.failures] == [
            "c@example.com",
            "a@example.com",
        ]

    def test_empty_recipients_is_no_recipients_not_failure(self) -> None:
        engine = _engine({})

        result = BatchSender(engine).send_to_many([], _build)

        assert result.total_recipients == 0
        assert result.sent == 0
        assert result.failed == 0
        assert result.no_recipients is True
        engine.send_email.assert_not_called()

    def test_all_failed_is_distinguishable_from_empty(self) -> None:
        engine = _engine({"a@example.com": ErrorKind.TIMEOUT})

        result = BatchSender(engine).send_to_many(["a@example.com"], _build)

        assert result.no_recipients is False
        assert result.failed == result.total_recipients == 1

    def test_build_error_is_recorded_per_recipient(self) -> None:
        engine = _engine({})

        def build(recipient: str) -> Message:
            if recipient == "bad":
                raise KeyError("email")
            return _build(recipient)

        result = BatchSender(engine).send_to_many(["ok@example.com", "bad"], build)

        assert result.sent == 1
        assert result.failed == 1
        failure = result.failures[0]
        assert failure.recipient == "bad"
        assert failure.reason == ErrorKind.BUILD_ERROR
        assert "KeyError" in failure.detail
        assert engine.send_email.call_count == 1

    def test_engine_exception_is_isolated_to_its_recipient(self) -> None:
        engine = _engine({})
        sent_ok = engine.send_email.side_effect

        def send_email(message: Message) -> Sent | Failed:
            if message.recipient == "r2@example.com":
                raise RuntimeError("credential store unreachable")
            return sent_ok(message)

        engine.send_email.side_effect = send_email

        result = BatchSender(engine).send_to_many(
            ["r1@example.com", "r2@example.com", "r3@example.com"], _build
        )

        assert (result.total_recipients, result.sent, result.failed) == (3, 2, 1)
        failure = result.failures[0]
        assert failure.recipient == "r2@example.com"
        assert failure.reason == ErrorKind.TRANSPORT_ERROR
        assert "credential store unreachable" in failure.detail
        assert engine.send_email.call_count == 3

    def test_provider_raising_in_is_configured_does_not_abort_batch(
        self, make_provider: ProviderFactory
    ) -> None:
        flaky = make_provider("brevo")
        flaky.is_configured.side_effect = RuntimeError("credential store unreachable")
        engine = DeliveryEngine([flaky], last_resort=make_provider("smtp"))

        result = BatchSender(engine, max_workers=2).send_to_many(
            ["a@example.com", "b@example.com"], _build
        )

        assert result.total_recipients == 2
        assert result.failed == 2
        assert [f.recipient for f in result.failures] == [
            "a@example.com",
            "b@example.com",
        ]
        assert {f.reason for f in result.failures} == {ErrorKind.TRANSPORT_ERROR}

    def test_parallel_send_keeps_order_and_counts(self) -> None:
        recipients = [f"r{i}@example.com" for i in range(20)]
        failing = {r: ErrorKind.TIMEOUT for r in recipients[::3]}
        engine = _engine(failing)

        result = BatchSender(engine, max_workers=4).send_to_many(recipients, _build)

        assert result.total_recipients == 20
        assert result.sent + result.failed == result.total_recipients
        assert [f.recipient for f in result.failures] == recipients[::3]

    def test_from_config_uses_batch_max_workers(self) -> None:
        sender = BatchSender.from_config(_engine({}), DeliveryConfig(batch_max_workers=3))

        assert sender._max_workers == 3

    def test_max_workers_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            BatchSender(_engine({}), max_workers=0)


class TestBatchResult:
    def test_fold_of_nothing_is_empty(self) -> None:
        result = BatchResult.fold([])

        assert result == BatchResult(total_recipients=0, sent=0, failed=0)
        assert result.no_recipients
