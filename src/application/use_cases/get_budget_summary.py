"""Use case to fold the stored budget record into a dashboard summary."""

from datetime import date

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.domain.constants import (
    DEFAULT_CURRENCY,
    INVESTMENTS_CATEGORY,
    LIABILITIES_CATEGORY,
    LIVING_EXPENSES_CATEGORY,
)
from src.domain.models import BudgetRecord, BudgetSummary
from src.domain.services.aggregation import (
    compute_allocation_status,
    compute_category_totals,
    compute_income_share,
    compute_investment_progress,
    compute_total_allocated,
    compute_total_fixed_living_costs,
    compute_total_variable_costs,
    compute_variable_spending_by_subcategory,
    month_key,
)
from src.infrastructure.logging.logger import get_app_logger


def build_budget_summary(
    record: BudgetRecord,
    reference_month: str,
    currency_code: str = DEFAULT_CURRENCY,
) -> BudgetSummary:
    """Compute every dashboard figure from a record snapshot.

    Args:
        record: Budget record to summarize.
        reference_month: Month treated as current, ``YYYY-MM``.
        currency_code: Currency used when displaying amounts.

    Returns:
        BudgetSummary: Totals, allocation and investment progress.
    """
    totals = compute_category_totals(
        record.fixed_costs,
        record.spending_history,
        reference_month,
    )
    variable_costs = compute_total_variable_costs(
        record.fixed_costs,
        record.spending_history,
        reference_month,
    )
    fixed_living = compute_total_fixed_living_costs(record.fixed_costs)
    allocation = compute_allocation_status(
        record.income,
        compute_total_allocated(record.fixed_costs, record.current_budget),
    )
    progress = compute_investment_progress(
        totals.investments,
        record.investment_goals,
    )
    income_shares = {
        "Fixed Living Costs": compute_income_share(fixed_living, record.income),
        "Variable Costs": compute_income_share(variable_costs, record.income),
        LIVING_EXPENSES_CATEGORY: compute_income_share(
            totals.living_expenses,
            record.income,
        ),
        LIABILITIES_CATEGORY: compute_income_share(
            totals.liabilities,
            record.income,
        ),
        INVESTMENTS_CATEGORY: compute_income_share(
            totals.investments,
            record.income,
        ),
    }
    return BudgetSummary(
        reference_month=reference_month,
        currency_code=currency_code,
        income=record.income,
        category_totals=totals,
        total_variable_costs=variable_costs,
        total_fixed_living_costs=fixed_living,
        allocation=allocation,
        investment_progress=progress,
        income_shares=income_shares,
        variable_spending=compute_variable_spending_by_subcategory(
            record.spending_history,
            reference_month,
        ),
    )


class GetBudgetSummaryUseCase:
    """Load the stored record and compute its dashboard summary."""

    def __init__(
        self,
        repository: BudgetRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Repository providing the budget record.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency used when displaying amounts.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        reference_month: str | None = None,
        record: BudgetRecord | None = None,
    ) -> BudgetSummary:
        """Return the summary for the reference month.

        Args:
            reference_month: Optional ``YYYY-MM``; defaults to this month.
            record: Optional already-loaded record, skipping the repository.

        Returns:
            BudgetSummary: Computed dashboard figures.

        Raises:
            LookupError: If no record is stored.
        """
        month = reference_month or month_key(date.today())
        resolved = record if record is not None else self._repository.load()
        if resolved is None:
            raise LookupError("No budget record stored; run onboarding first")

        summary = build_budget_summary(resolved, month, self._currency_code)
        self._logger.info(
            f"Budget summary computed for {month}: "
            f"allocated={summary.allocation.percent_allocated}%, "
            f"investments={summary.category_totals.investments} "
            f"({summary.investment_progress.status.value})"
        )
        if summary.allocation.is_over_allocated:
            self._logger.warning(
                f"Allocations {summary.allocation.total_allocated} exceed "
                f"income {summary.income} for {month}"
            )
        return summary


__all__ = ["GetBudgetSummaryUseCase", "build_budget_summary"]
