import logging

from flask import Flask
from sqlalchemy.orm import Session, sessionmaker

from admin_feed.config import AdminFeedConfig
from admin_feed.log import setup_logging
from admin_feed.routes import bp, health_bp

logger = logging.getLogger(__name__)


def create_app(
    session_factory: sessionmaker[Session],
    config: AdminFeedConfig | None = None,
) -> Flask:
    """Flask application factory.

    Args:
        session_factory: Bound sessionmaker (PostgreSQL, or SQLite in tests).
        config: Feed settings; read from the environment when omitted.
    """
    config = config or AdminFeedConfig()
    setup_logging(config.log_level)

    app = Flask(__name__)
    app.extensions["session_factory"] = session_factory
    app.extensions["admin_feed_config"] = config

    app.register_blueprint(bp)
    app.register_blueprint(health_bp)

    logger.info("Admin feed initialized")
    return app
