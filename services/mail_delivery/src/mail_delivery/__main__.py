"""Send a test email through the provider chain: python -m mail_delivery.

Shows which providers are configured and which one delivered, so a new
deployment's credentials can be checked without triggering a workflow.
"""

import argparse
import logging
import sys

from mail_delivery.config import DeliveryConfig
from mail_delivery.engine import create_default_engine
from mail_delivery.log import setup_logging
from mail_delivery.providers import Message

logger = logging.getLogger(__name__)

TEST_SUBJECT = "SoteROS email delivery test"
TEST_BODY = "<p>This is a test email from SoteROS. Delivery is working.</p>"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send a test email")
    parser.add_argument("recipient", help="Address to deliver the test email to")
    args = parser.parse_args(argv)

    delivery = DeliveryConfig()
    setup_logging(delivery.log_level)

    engine = create_default_engine(delivery)
    try:
        for provider in engine.chain:
            logger.info(
                "Provider status",
                extra={"provider": provider.name, "configured": provider.is_configured()},
            )
        result = engine.send_email(
            Message(recipient=args.recipient, subject=TEST_SUBJECT, body=TEST_BODY)
        )
    finally:
        engine.close()

    if result.ok:
        logger.info(
            "Test email sent",
            extra={"provider": result.provider, "message_id": result.message_id},
        )
        return 0

    logger.error(
        "Test email failed on every provider",
        extra={"reason": result.reason, "detail": result.detail},
    )
    return 1


if __name__ == "__main__":
    sys.exit(main())
