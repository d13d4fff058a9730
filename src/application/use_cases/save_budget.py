"""Use case to persist the budget record locally and remotely."""

from dataclasses import dataclass

from src.application.ports.budget_repository import (
    BudgetRepositoryPort,
    RemoteBudgetStorePort,
)
from src.domain.models import BudgetRecord
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveBudgetResult:
    """Outcome of a save.

    Attributes:
        local_saved: Whether the local repository accepted the record.
        remote_saved: Whether the remote store accepted the record; False
            when no remote save was attempted.
    """

    local_saved: bool
    remote_saved: bool


class SaveBudgetUseCase:
    """Save a record locally, then mirror it to the remote store."""

    def __init__(
        self,
        repository: BudgetRepositoryPort,
        remote_store: RemoteBudgetStorePort | None = None,
        logger=None,
    ) -> None:
        self._repository = repository
        self._remote_store = remote_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        record: BudgetRecord,
        user_id: str | None = None,
    ) -> SaveBudgetResult:
        """Persist the record.

        Remote failures are logged and reported, never raised.

        Args:
            record: Record to persist.
            user_id: Optional id of the signed-in user.

        Returns:
            SaveBudgetResult: Which destinations accepted the record.
        """
        local_saved = self._repository.save(record)
        if not local_saved:
            self._logger.error("Failed to save budget to local storage")

        remote_saved = False
        if user_id and self._remote_store is not None:
            try:
                remote_saved = self._remote_store.upsert(user_id, record)
            except Exception as exc:
                self._logger.error(
                    f"Failed to save budget remotely for {user_id}: {exc}"
                )
            else:
                if not remote_saved:
                    self._logger.error(
                        f"Remote store rejected budget for {user_id}"
                    )

        return SaveBudgetResult(
            local_saved=local_saved,
            remote_saved=remote_saved,
        )


__all__ = ["SaveBudgetUseCase", "SaveBudgetResult"]
