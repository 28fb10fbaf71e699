"""Database fixtures for shared tests: in-memory SQLite, rolled back per test."""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from soteros_shared.db import AdminNotificationRepository, Base, create_db_engine


@pytest.fixture(scope="session")
def db_engine() -> Generator[Engine, None, None]:
    engine = create_db_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(db_engine: Engine) -> Generator[Session, None, None]:
    with db_engine.connect() as connection:
        outer = connection.begin()
        session = Session(bind=connection)
        try:
            yield session
        finally:
            session.close()
            if outer.is_active:
                outer.rollback()


@pytest.fixture()
def repo(db_session: Session) -> AdminNotificationRepository:
    return AdminNotificationRepository(db_session)
