"""CLI adapter printing the budget summary for a month.

The month defaults to the current one; set BUDGET_MONTH=YYYY-MM to inspect
another month of the spending history.
"""

from decimal import Decimal
import os

from src.domain.models import BudgetSummary, InvestmentGoalStatus
from src.domain.services.validation import is_valid_month
from src.infrastructure.container import (
    build_budget_stores,
    build_load_budget_use_case,
    build_summary_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings

_STATUS_LABELS = {
    InvestmentGoalStatus.BELOW_TARGET: "Below Target",
    InvestmentGoalStatus.ON_TARGET: "On Target",
    InvestmentGoalStatus.ABOVE_TARGET: "Above Target",
}


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    if currency_code == "USD":
        return f"${value:,.2f}"
    return f"{value:,.2f} {currency_code}"


def _resolve_month(raw: str | None, logger) -> str | None:
    if not raw:
        return None
    if not is_valid_month(raw):
        logger.warning(f"Invalid month '{raw}'. Expected format YYYY-MM.")
        return None
    return raw


def render_summary(summary: BudgetSummary) -> list[str]:
    """Return the printable lines of a summary."""
    code = summary.currency_code
    totals = summary.category_totals
    allocation = summary.allocation
    progress = summary.investment_progress
    shares = summary.income_shares
    lines = [
        f"Budget summary for {summary.reference_month}",
        f"Monthly income: {_format_currency(summary.income, code)}",
    ]
    if allocation.is_fully_allocated:
        lines.append(f"{allocation.percent_allocated}% allocated")
    else:
        lines.append(
            f"{_format_currency(allocation.unallocated_amount, code)} "
            f"unallocated ({allocation.percent_allocated}% allocated)"
        )
    lines.extend(
        [
            "Fixed living costs: "
            f"{_format_currency(summary.total_fixed_living_costs, code)} "
            f"({shares['Fixed Living Costs']}% of income)",
            "Variable costs: "
            f"{_format_currency(summary.total_variable_costs, code)} "
            f"({shares['Variable Costs']}% of income)",
            "Living expenses: "
            f"{_format_currency(totals.living_expenses, code)}",
            f"Liabilities: {_format_currency(totals.liabilities, code)}",
            f"Investments: {_format_currency(totals.investments, code)} "
            f"({shares['Investments']}% of income)",
            "Investment target: "
            f"{_format_currency(progress.goals.min, code)} - "
            f"{_format_currency(progress.goals.max, code)} "
            f"[{_STATUS_LABELS[progress.status]}]",
        ]
    )
    if progress.shortfall > 0:
        lines.append(
            f"You need {_format_currency(progress.shortfall, code)} more "
            "to reach your minimum target."
        )
    if progress.surplus > 0:
        lines.append(
            f"You're {_format_currency(progress.surplus, code)} above your "
            "maximum target."
        )
    for item in summary.variable_spending:
        lines.append(
            f"  {item.sub_category}: {_format_currency(item.amount, code)}"
        )
    return lines


def main() -> None:
    """Load the budget record and print its summary."""
    logger = get_app_logger()
    settings = BudgetSettings.from_env()
    stores = build_budget_stores(settings)
    record = build_load_budget_use_case(settings, stores).execute(
        settings.user_id
    )
    if record is None:
        print("No budget found. Run the init command first.")
        return

    month = _resolve_month(os.getenv("BUDGET_MONTH"), logger)
    summary = build_summary_use_case(settings, stores).execute(
        reference_month=month,
        record=record,
    )
    for line in render_summary(summary):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
