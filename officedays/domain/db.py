"""Database initialization and utilities."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base


DATA_DIR_NAME = ".officedays"


def default_db_url() -> str:
    """SQLite file in the user's data directory (created if missing)."""
    data_dir = Path.home() / DATA_DIR_NAME
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'employees.db'}"


def create_db_engine(db_url: str | None = None, echo: bool = False):
    """Create SQLAlchemy engine."""
    return create_engine(db_url or default_db_url(), echo=echo)


def init_database(db_url: str | None = None) -> None:
    """Initialize database and create all tables."""
    engine = create_db_engine(db_url)
    Base.metadata.create_all(engine)
    print(f"[INFO] Database initialized: {engine.url}")


def get_session_factory(db_url: str | None = None):
    """Get a session factory for the database (tables are created if missing)."""
    engine = create_db_engine(db_url)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)


def get_session(db_url: str | None = None) -> Session:
    """Get a new database session."""
    SessionFactory = get_session_factory(db_url)
    return SessionFactory()


def reset_database(db_url: str | None = None) -> None:
    """Drop all tables and recreate (WARNING: deletes all data!)."""
    engine = create_db_engine(db_url)
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    print(f"[WARN] Database reset: {engine.url}")
