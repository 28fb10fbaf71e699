from collections.abc import Callable, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from soteros_shared.db import AdminNotification, Base, create_session_factory

from admin_feed.app import create_app
from admin_feed.config import AdminFeedConfig

ADMIN_ID = 7
OTHER_ADMIN_ID = 8


@pytest.fixture()
def db_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(db_engine)


@pytest.fixture()
def app(session_factory: sessionmaker[Session]) -> Flask:
    app = create_app(
        session_factory,
        AdminFeedConfig(default_page_size=20, max_page_size=50),
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Id": str(ADMIN_ID)}


@pytest.fixture()
def seed(
    session_factory: sessionmaker[Session],
) -> Callable[..., int]:
    """Insert a notification directly and return its id."""

    def _seed(
        admin_id: int | None = None,
        title: str = "Seeded",
        priority_level: str = "medium",
        severity: str = "info",
        type: str = "system",
        is_read: bool = False,
    ) -> int:
        with session_factory() as session:
            notification = AdminNotification(
                admin_id=admin_id,
                type=type,
                title=title,
                message=f"{title} message",
                severity=severity,
                priority_level=priority_level,
                is_read=is_read,
            )
            session.add(notification)
            session.commit()
            return notification.id

    return _seed
