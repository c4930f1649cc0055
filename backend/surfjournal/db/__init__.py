"""Database connections package."""

from surfjournal.db.database import async_session, engine, init_db

__all__ = ["init_db", "engine", "async_session"]
