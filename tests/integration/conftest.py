"""Integration test fixtures using testcontainers.

One PostgreSQL container per session, migrated with Alembic. The admin feed
runs in a background werkzeug server so tests talk to it over real HTTP.
"""

import threading
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest
from sqlalchemy import Engine, text
from sqlalchemy.orm import Session, sessionmaker
from testcontainers.postgres import PostgresContainer
from werkzeug.serving import make_server

from soteros_shared.db import create_db_engine, create_session_factory

pytestmark = pytest.mark.integration

# ---------------------------------------------------------------------------
# Database (session-scoped)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    with PostgresContainer("postgres:16-alpine", driver="psycopg2") as pg:
        yield pg


@pytest.fixture(scope="session")
def pg_dsn(postgres_container: PostgresContainer) -> str:
    return postgres_container.get_connection_url()


@pytest.fixture(scope="session")
def db_engine(pg_dsn: str) -> Generator[Engine, None, None]:
    """Create engine and run Alembic migrations against testcontainer PG."""
    from alembic import command
    from alembic.config import Config as AlembicConfig

    engine = create_db_engine(pg_dsn, pool_pre_ping=True)

    shared_dir = Path(__file__).resolve().parents[2] / "shared"
    alembic_cfg = AlembicConfig(str(shared_dir / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(shared_dir / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", pg_dsn)
    command.upgrade(alembic_cfg, "head")

    yield engine
    engine.dispose()


@pytest.fixture(scope="session")
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(db_engine)


@pytest.fixture(autouse=True)
def _cleanup_db(session_factory: sessionmaker[Session]) -> Generator[None, None, None]:
    yield
    with session_factory() as session:
        session.execute(text("TRUNCATE admin_notifications RESTART IDENTITY"))
        session.commit()


# ---------------------------------------------------------------------------
# Admin feed (function-scoped)
# ---------------------------------------------------------------------------


@pytest.fixture()
def feed_url(session_factory: sessionmaker[Session]) -> Generator[str, None, None]:
    """Start the admin feed in a background thread, yield base URL."""
    from admin_feed.app import create_app

    app = create_app(session_factory)
    app.config["TESTING"] = True

    server = make_server("127.0.0.1", 0, app)
    port = server.server_address[1]

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield f"http://127.0.0.1:{port}"

    server.shutdown()


@pytest.fixture()
def http_client(feed_url: str) -> Generator[httpx.Client, None, None]:
    with httpx.Client(base_url=feed_url, timeout=10.0) as client:
        yield client
