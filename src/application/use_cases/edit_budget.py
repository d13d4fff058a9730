"""Use case applying record edits and persisting the result."""

from collections.abc import Callable
from decimal import Decimal

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.application.use_cases.load_budget import LoadBudgetUseCase
from src.application.use_cases.save_budget import (
    SaveBudgetResult,
    SaveBudgetUseCase,
)
from src.domain.models import (
    BudgetRecord,
    CurrentBudget,
    CustomSubcategory,
    DailyExpense,
    FixedCost,
    InvestmentGoals,
)
from src.domain.services import editing, subcategories
from src.domain.services.aggregation import month_key
from src.domain.services.validation import validate_record
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class EditBudgetUseCase:
    """Load the record, apply one edit, validate and save it.

    Each public method returns the edited record so callers can recompute
    summaries from the new snapshot.
    """

    def __init__(
        self,
        repository: BudgetRepositoryPort,
        save_use_case: SaveBudgetUseCase | None = None,
        load_use_case: LoadBudgetUseCase | None = None,
        user_id: str | None = None,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Local repository backing the default use cases.
            save_use_case: Optional save use case; a local-only one is
                built from ``repository`` otherwise.
            load_use_case: Optional load use case providing the record
                to edit; a local-only one is built otherwise. Pass the one
                sharing the save use case's remote store so edits start
                from the copy they overwrite.
            user_id: Optional signed-in user for remote saves.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._save_use_case = save_use_case or SaveBudgetUseCase(
            repository,
            logger=self._logger,
        )
        self._load_use_case = load_use_case or LoadBudgetUseCase(
            repository,
            logger=self._logger,
        )
        self._user_id = user_id
        self.last_save: SaveBudgetResult | None = None

    def apply(
        self,
        action: str,
        edit: Callable[..., BudgetRecord],
        *args,
    ) -> BudgetRecord:
        """Apply ``edit(record, *args)`` to the stored record and save it.

        Args:
            action: Short name of the edit, used in the usage log.
            edit: Pure editing function taking the record first.
            *args: Remaining arguments of ``edit``.

        Returns:
            BudgetRecord: Edited record.

        Raises:
            LookupError: If no record is stored.
        """
        record = self._load_use_case.execute(self._user_id)
        if record is None:
            raise LookupError("No budget record stored; run onboarding first")
        updated = edit(record, *args)
        problems = validate_record(updated, self._logger)
        if problems:
            self._logger.warning(
                f"Saving budget after '{action}' with {problems} problem(s)"
            )
        self.last_save = self._save_use_case.execute(updated, self._user_id)
        self._usage_logger.info(f"Budget edit applied: {action}")
        return updated

    def add_fixed_cost(self, fixed_cost: FixedCost) -> BudgetRecord:
        return self.apply("add_fixed_cost", editing.add_fixed_cost, fixed_cost)

    def update_fixed_cost(self, fixed_cost: FixedCost) -> BudgetRecord:
        return self.apply(
            "update_fixed_cost",
            editing.update_fixed_cost,
            fixed_cost,
        )

    def remove_fixed_cost(self, fixed_cost_id: str) -> BudgetRecord:
        return self.apply(
            "remove_fixed_cost",
            editing.remove_fixed_cost,
            fixed_cost_id,
        )

    def add_daily_expense(
        self,
        expense: DailyExpense,
        month: str | None = None,
    ) -> BudgetRecord:
        """Record an expense under ``month``, by default its own month."""
        return self.apply(
            "add_daily_expense",
            editing.add_daily_expense,
            expense,
            month or month_key(expense.date),
        )

    def update_daily_expense(
        self,
        expense: DailyExpense,
        month: str,
    ) -> BudgetRecord:
        return self.apply(
            "update_daily_expense",
            editing.update_daily_expense,
            expense,
            month,
        )

    def delete_daily_expense(self, expense_id: str, month: str) -> BudgetRecord:
        return self.apply(
            "delete_daily_expense",
            editing.delete_daily_expense,
            expense_id,
            month,
        )

    def rename_subcategory(self, old_name: str, new_name: str) -> BudgetRecord:
        return self.apply(
            "rename_subcategory",
            editing.rename_subcategory,
            old_name,
            new_name,
        )

    def update_investment_goals(self, goals: InvestmentGoals) -> BudgetRecord:
        return self.apply(
            "update_investment_goals",
            editing.update_investment_goals,
            goals,
        )

    def update_current_budget(self, budget: CurrentBudget) -> BudgetRecord:
        return self.apply(
            "update_current_budget",
            editing.update_current_budget,
            budget,
        )

    def update_income(self, income: Decimal) -> BudgetRecord:
        return self.apply("update_income", editing.update_income, income)

    def add_custom_subcategory(
        self,
        subcategory: CustomSubcategory,
    ) -> BudgetRecord:
        return self.apply(
            "add_custom_subcategory",
            subcategories.add_custom_subcategory,
            subcategory,
        )

    def toggle_subcategory_visibility(self, subcategory_id: str) -> BudgetRecord:
        return self.apply(
            "toggle_subcategory_visibility",
            subcategories.toggle_subcategory_visibility,
            subcategory_id,
        )

    def delete_custom_subcategory(self, subcategory_id: str) -> BudgetRecord:
        return self.apply(
            "delete_custom_subcategory",
            subcategories.delete_custom_subcategory,
            subcategory_id,
        )

    def edit_custom_subcategory(
        self,
        subcategory_id: str,
        name: str,
        icon: str,
    ) -> BudgetRecord:
        return self.apply(
            "edit_custom_subcategory",
            subcategories.edit_custom_subcategory,
            subcategory_id,
            name,
            icon,
        )


__all__ = ["EditBudgetUseCase"]
