"""Database foundation: declarative base class, engine and session factories."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


def create_db_engine(dsn: str, **kwargs: object) -> Engine:
    """Create a SQLAlchemy engine from a DSN string.

    Pass ``pool_pre_ping=True`` outside of tests so a restarted database
    does not hand out dead pooled connections to the admin API.
    """
    return create_engine(dsn, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a sessionmaker bound to the given engine.

    ``expire_on_commit=False`` keeps committed notifications readable after
    the Flask request (or producer call) has closed its session.
    """
    return sessionmaker(bind=engine, expire_on_commit=False)
