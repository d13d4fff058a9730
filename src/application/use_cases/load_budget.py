"""Use case to load the budget record from remote or local storage."""

from src.application.ports.budget_repository import (
    BudgetRepositoryPort,
    RemoteBudgetStorePort,
)
from src.domain.models import BudgetRecord
from src.infrastructure.logging.logger import get_app_logger


class LoadBudgetUseCase:
    """Load a budget record, preferring the remote store when signed in."""

    def __init__(
        self,
        repository: BudgetRepositoryPort,
        remote_store: RemoteBudgetStorePort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Local record repository used as fallback.
            remote_store: Optional remote store keyed by user id.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._remote_store = remote_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str | None = None) -> BudgetRecord | None:
        """Return the user's record, or None when nothing is stored.

        The remote store is tried first when a user id is given; a miss or
        a failure falls back to the local repository.

        Args:
            user_id: Optional id of the signed-in user.

        Returns:
            BudgetRecord | None: Loaded record.
        """
        if user_id and self._remote_store is not None:
            try:
                record = self._remote_store.fetch_by_user_id(user_id)
            except Exception as exc:
                self._logger.warning(
                    f"Remote budget fetch failed for {user_id}: {exc}"
                )
                record = None
            if record is not None:
                self._logger.info(f"Loaded remote budget for {user_id}")
                return record
            self._logger.info(
                f"No remote budget for {user_id}; checking local storage"
            )

        record = self._repository.load()
        if record is None:
            self._logger.info("No budget record found in local storage")
        return record


__all__ = ["LoadBudgetUseCase"]
