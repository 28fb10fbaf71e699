"""WSGI entry point for gunicorn.

Usage:
    gunicorn admin_feed.wsgi:app --bind 0.0.0.0:8000
"""
from soteros_shared.config import PostgresConfig
from soteros_shared.db import create_db_engine, create_session_factory

from admin_feed.app import create_app

_engine = create_db_engine(PostgresConfig().dsn, pool_pre_ping=True)
app = create_app(create_session_factory(_engine))
