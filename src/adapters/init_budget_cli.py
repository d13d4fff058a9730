"""CLI adapter creating an empty budget record when none is stored."""

from src.application.use_cases.initialize_budget import InitializeBudgetUseCase
from src.infrastructure.container import (
    build_budget_stores,
    build_load_budget_use_case,
    build_save_budget_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def main() -> None:
    """Initialize and save a fresh budget record."""
    logger = get_app_logger()
    settings = BudgetSettings.from_env()
    stores = build_budget_stores(settings)
    existing = build_load_budget_use_case(settings, stores).execute(
        settings.user_id
    )
    if existing is not None:
        print(f"Budget already exists for {existing.user.id}.")
        return

    record = InitializeBudgetUseCase(logger=logger).execute()
    result = build_save_budget_use_case(settings, stores).execute(
        record,
        settings.user_id,
    )
    if not result.local_saved:
        print("Failed to save the new budget; see the logs for details.")
        return
    print(
        f"Initialized budget for {record.user.id} "
        f"in {settings.storage_file}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
