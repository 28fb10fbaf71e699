"""Fan one logical notification out to many recipients."""

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

from mail_delivery.config import DeliveryConfig
from mail_delivery.engine import DeliveryEngine, DeliveryResult, Failed
from mail_delivery.providers import ErrorKind, Message, Sent
from mail_delivery.providers.base import truncate

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class RecipientFailure(Generic[R]):
    recipient: R
    reason: ErrorKind
    detail: str = ""


@dataclass(frozen=True, slots=True)
class RecipientOutcome(Generic[R]):
    """What happened for one recipient.

    ``result`` is None when no delivery result exists: the message could not
    be built, or the engine raised. ``error_kind`` and ``error`` say which.
    """

    recipient: R
    result: DeliveryResult | None
    error: str = ""
    error_kind: ErrorKind = ErrorKind.BUILD_ERROR

    def failure(self) -> RecipientFailure[R] | None:
        if isinstance(self.result, Sent):
            return None
        if isinstance(self.result, Failed):
            return RecipientFailure(
                self.recipient, self.result.reason, self.result.detail
            )
        return RecipientFailure(
            self.recipient, self.error_kind, self.error
        )


@dataclass(frozen=True, slots=True)
class BatchResult(Generic[R]):
    """Aggregate of a fan-out. ``sent + failed == total_recipients``."""

    total_recipients: int
    sent: int
    failed: int
    failures: tuple[RecipientFailure[R], ...] = ()

    @property
    def no_recipients(self) -> bool:
        """Nobody to notify, as opposed to every delivery failing."""
        return self.total_recipients == 0

    @classmethod
    def fold(cls, outcomes: Iterable[RecipientOutcome[R]]) -> "BatchResult[R]":
        total = 0
        failures: list[RecipientFailure[R]] = []
        for outcome in outcomes:
            total += 1
            failure = outcome.failure()
            if failure is not None:
                failures.append(failure)
        return cls(
            total_recipients=total,
            sent=total - len(failures),
            failed=len(failures),
            failures=tuple(failures),
        )


class BatchSender:
    """Sends a per-recipient message to each recipient independently.

    One recipient's failure never stops the others. With ``max_workers > 1``
    deliveries run on a bounded thread pool; outcomes are still reported
    in the order recipients were given.
    """

    def __init__(self, engine: DeliveryEngine, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._engine = engine
        self._max_workers = max_workers

    @classmethod
    def from_config(
        cls, engine: DeliveryEngine, delivery: DeliveryConfig | None = None
    ) -> "BatchSender":
        return cls(engine, (delivery or DeliveryConfig()).batch_max_workers)

    def send_to_many(
        self,
        recipients: Sequence[R],
        build_message: Callable[[R], Message],
    ) -> BatchResult[R]:
        if not recipients:
            logger.info("No recipients to notify")
            return BatchResult(total_recipients=0, sent=0, failed=0)

        def deliver(recipient: R) -> RecipientOutcome[R]:
            try:
                message = build_message(recipient)
            except Exception as exc:
                logger.exception(
                    "Could not build message", extra={"recipient": str(recipient)}
                )
                return RecipientOutcome(recipient, None, f"{type(exc).__name__}: {exc}")
            try:
                result = self._engine.send_email(message)
            except Exception as exc:
                logger.exception(
                    "Delivery raised", extra={"recipient": str(recipient)}
                )
                return RecipientOutcome(
                    recipient,
                    None,
                    truncate(f"{type(exc).__name__}: {exc}"),
                    ErrorKind.TRANSPORT_ERROR,
                )
            return RecipientOutcome(recipient, result)

        if self._max_workers == 1 or len(recipients) == 1:
            outcomes = [deliver(r) for r in recipients]
        else:
            workers = min(self._max_workers, len(recipients))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                outcomes = list(pool.map(deliver, recipients))

        result = BatchResult.fold(outcomes)
        logger.info(
            "Batch send completed",
            extra={
                "total_recipients": result.total_recipients,
                "sent": result.sent,
                "failed": result.failed,
            },
        )
        return result
