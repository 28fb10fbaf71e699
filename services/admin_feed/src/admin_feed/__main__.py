"""Dev entry point: python -m admin_feed."""
from soteros_shared.config import PostgresConfig
from soteros_shared.db import create_db_engine, create_session_factory

from admin_feed.app import create_app
from admin_feed.config import AdminFeedConfig


def main() -> None:
    config = AdminFeedConfig()
    engine = create_db_engine(PostgresConfig().dsn, pool_pre_ping=True)
    app = create_app(create_session_factory(engine), config)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
