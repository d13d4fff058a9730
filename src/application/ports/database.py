"""Database port for the remote budget store.

Infrastructure provides the concrete adapter; use cases and repositories
depend on this protocol instead of driver or configuration details.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the remote budget store."""

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """


__all__ = ["DatabaseEnginePort"]
