"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from src.application.ports.budget_repository import (
    BudgetRepositoryPort,
    RemoteBudgetStorePort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.edit_budget import EditBudgetUseCase
from src.application.use_cases.get_budget_summary import (
    GetBudgetSummaryUseCase,
)
from src.application.use_cases.load_budget import LoadBudgetUseCase
from src.application.use_cases.save_budget import SaveBudgetUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.json_budget_repository import JsonFileBudgetRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings
from src.infrastructure.sql_budget_store import SqlAlchemyBudgetStore


@dataclass(frozen=True)
class BudgetStores:
    """Local repository and optional remote store shared by one command."""

    repository: BudgetRepositoryPort
    remote_store: RemoteBudgetStorePort | None = None


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_budget_repository(
    settings: BudgetSettings | None = None,
) -> BudgetRepositoryPort:
    """Return the local JSON repository."""
    resolved = settings or BudgetSettings.from_env()
    return JsonFileBudgetRepository(
        resolved.storage_file,
        logger=get_app_logger(),
    )


def build_remote_store(
    settings: BudgetSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> RemoteBudgetStorePort | None:
    """Return the configured remote store, or None when disabled.

    The table is created on a best-effort basis; an unreachable database
    is logged by the store and does not prevent local use.
    """
    resolved = settings or BudgetSettings.from_env()
    if resolved.remote_backend != "sqlalchemy":
        return None
    store = SqlAlchemyBudgetStore(
        db_port or build_database_adapter(),
        logger=get_app_logger(),
    )
    store.prepare()
    return store


def build_budget_stores(settings: BudgetSettings | None = None) -> BudgetStores:
    """Build the stores once so several use cases can share them."""
    resolved = settings or BudgetSettings.from_env()
    return BudgetStores(
        repository=build_budget_repository(resolved),
        remote_store=build_remote_store(resolved),
    )


def build_load_budget_use_case(
    settings: BudgetSettings | None = None,
    stores: BudgetStores | None = None,
) -> LoadBudgetUseCase:
    resolved = settings or BudgetSettings.from_env()
    shared = stores or build_budget_stores(resolved)
    return LoadBudgetUseCase(
        shared.repository,
        remote_store=shared.remote_store,
        logger=get_app_logger(),
    )


def build_save_budget_use_case(
    settings: BudgetSettings | None = None,
    stores: BudgetStores | None = None,
) -> SaveBudgetUseCase:
    resolved = settings or BudgetSettings.from_env()
    shared = stores or build_budget_stores(resolved)
    return SaveBudgetUseCase(
        shared.repository,
        remote_store=shared.remote_store,
        logger=get_app_logger(),
    )


def build_summary_use_case(
    settings: BudgetSettings | None = None,
    stores: BudgetStores | None = None,
) -> GetBudgetSummaryUseCase:
    resolved = settings or BudgetSettings.from_env()
    repository = (
        stores.repository
        if stores is not None
        else build_budget_repository(resolved)
    )
    return GetBudgetSummaryUseCase(
        repository,
        logger=get_app_logger(),
        currency_code=resolved.currency_code,
    )


def build_edit_budget_use_case(
    settings: BudgetSettings | None = None,
    stores: BudgetStores | None = None,
) -> EditBudgetUseCase:
    """Return an edit use case reading and writing the same stores.

    Records are loaded remote first, like ``LoadBudgetUseCase``, so an
    edit never overwrites a newer remote copy with the local one.
    """
    resolved = settings or BudgetSettings.from_env()
    shared = stores or build_budget_stores(resolved)
    return EditBudgetUseCase(
        shared.repository,
        save_use_case=build_save_budget_use_case(resolved, shared),
        load_use_case=build_load_budget_use_case(resolved, shared),
        user_id=resolved.user_id,
    )


__all__ = [
    "BudgetStores",
    "build_database_adapter",
    "build_budget_repository",
    "build_remote_store",
    "build_budget_stores",
    "build_load_budget_use_case",
    "build_save_budget_use_case",
    "build_summary_use_case",
    "build_edit_budget_use_case",
]
