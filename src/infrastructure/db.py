"""Database infrastructure for the remote budget store.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the database holding the user_budgets table.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable, loading ``.env`` first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Server databases get a small pool with health checks; SQLite files use
    the driver defaults.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_budget_engine: Optional[Engine] = None


def get_budget_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the budget database.

    Returns:
        Engine: Lazily initialized engine read from ``BUDGET_DB_URL``.
    """
    global _budget_engine
    if _budget_engine is None:
        db_url = _get_env_var("BUDGET_DB_URL")
        _budget_engine = _create_engine(db_url)
    return _budget_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by the global engine."""

    def get_budget_engine(self) -> Engine:
        return get_budget_engine()


__all__ = [
    "get_budget_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
