"""Ports for persisting budget records."""

from typing import Protocol

from src.domain.models import BudgetRecord


class BudgetRepositoryPort(Protocol):
    """Port exposing local persistence of the single budget record."""

    def load(self) -> BudgetRecord | None:
        """Return the stored record, or None when nothing is stored."""

    def save(self, record: BudgetRecord) -> bool:
        """Persist the record and report whether it was written."""

    def clear(self) -> None:
        """Remove the stored record."""


class RemoteBudgetStorePort(Protocol):
    """Port exposing a remote record store keyed by user id."""

    def fetch_by_user_id(self, user_id: str) -> BudgetRecord | None:
        """Return the remote record of a user, or None when absent."""

    def upsert(self, user_id: str, record: BudgetRecord) -> bool:
        """Insert or replace the remote record of a user."""


__all__ = ["BudgetRepositoryPort", "RemoteBudgetStorePort"]
