"""Pure editing operations over a budget record.

Each operation returns a new ``BudgetRecord``; the input is left untouched
so callers can keep the previous snapshot and persist the new one.
"""

from dataclasses import replace
from decimal import Decimal

from src.domain.models import (
    BudgetRecord,
    CurrentBudget,
    DailyExpense,
    FixedCost,
    InvestmentGoals,
    MonthlySpending,
)
from src.domain.services.normalization import normalize_label


def add_fixed_cost(record: BudgetRecord, fixed_cost: FixedCost) -> BudgetRecord:
    """Append a fixed cost to the record."""
    return replace(record, fixed_costs=record.fixed_costs + (fixed_cost,))


def update_fixed_cost(
    record: BudgetRecord,
    fixed_cost: FixedCost,
) -> BudgetRecord:
    """Replace the fixed cost sharing ``fixed_cost.id``.

    Raises:
        KeyError: If no fixed cost has that id.
    """
    _require_fixed_cost(record, fixed_cost.id)
    return replace(
        record,
        fixed_costs=tuple(
            fixed_cost if cost.id == fixed_cost.id else cost
            for cost in record.fixed_costs
        ),
    )


def remove_fixed_cost(record: BudgetRecord, fixed_cost_id: str) -> BudgetRecord:
    """Remove a fixed cost by id.

    Raises:
        KeyError: If no fixed cost has that id.
    """
    _require_fixed_cost(record, fixed_cost_id)
    return replace(
        record,
        fixed_costs=tuple(
            cost for cost in record.fixed_costs if cost.id != fixed_cost_id
        ),
    )


def add_daily_expense(
    record: BudgetRecord,
    expense: DailyExpense,
    month: str,
) -> BudgetRecord:
    """Record a daily expense under ``month``.

    The month entry is created when this is the first expense of the month.

    Args:
        record: Current budget record.
        expense: Expense to append.
        month: Month key in ``YYYY-MM`` format.

    Returns:
        BudgetRecord: Record with the expense appended.
    """
    history = record.spending_history
    if not any(entry.month == month for entry in history):
        new_entry = MonthlySpending(month=month, daily_expenses=(expense,))
        return replace(record, spending_history=history + (new_entry,))
    return replace(
        record,
        spending_history=tuple(
            replace(entry, daily_expenses=entry.daily_expenses + (expense,))
            if entry.month == month
            else entry
            for entry in history
        ),
    )


def update_daily_expense(
    record: BudgetRecord,
    expense: DailyExpense,
    month: str,
) -> BudgetRecord:
    """Replace the expense sharing ``expense.id`` within ``month``.

    Unknown months or ids leave the record unchanged.
    """
    return _map_month(
        record,
        month,
        lambda expenses: tuple(
            expense if item.id == expense.id else item for item in expenses
        ),
    )


def delete_daily_expense(
    record: BudgetRecord,
    expense_id: str,
    month: str,
) -> BudgetRecord:
    """Drop the expense with ``expense_id`` from ``month``."""
    return _map_month(
        record,
        month,
        lambda expenses: tuple(
            item for item in expenses if item.id != expense_id
        ),
    )


def rename_subcategory(
    record: BudgetRecord,
    old_name: str,
    new_name: str,
) -> BudgetRecord:
    """Rename a subcategory in fixed costs and every month's expenses.

    Args:
        record: Current budget record.
        old_name: Subcategory label to replace.
        new_name: Replacement label, surrounding whitespace stripped.

    Returns:
        BudgetRecord: Record with every matching label renamed.

    Raises:
        ValueError: If ``new_name`` is blank.
    """
    cleaned = normalize_label(new_name)
    if cleaned is None:
        raise ValueError("Subcategory name cannot be blank")
    fixed_costs = tuple(
        replace(cost, sub_category=cleaned)
        if cost.sub_category == old_name
        else cost
        for cost in record.fixed_costs
    )
    history = tuple(
        replace(
            entry,
            daily_expenses=tuple(
                replace(expense, sub_category=cleaned)
                if expense.sub_category == old_name
                else expense
                for expense in entry.daily_expenses
            ),
        )
        for entry in record.spending_history
    )
    return replace(record, fixed_costs=fixed_costs, spending_history=history)


def update_investment_goals(
    record: BudgetRecord,
    goals: InvestmentGoals,
) -> BudgetRecord:
    return replace(record, investment_goals=goals)


def update_current_budget(
    record: BudgetRecord,
    budget: CurrentBudget,
) -> BudgetRecord:
    return replace(record, current_budget=budget)


def update_income(record: BudgetRecord, income: Decimal) -> BudgetRecord:
    return replace(record, income=income)


def _require_fixed_cost(record: BudgetRecord, fixed_cost_id: str) -> None:
    if not any(cost.id == fixed_cost_id for cost in record.fixed_costs):
        raise KeyError(f"Unknown fixed cost id: {fixed_cost_id}")


def _map_month(record: BudgetRecord, month: str, transform) -> BudgetRecord:
    return replace(
        record,
        spending_history=tuple(
            replace(entry, daily_expenses=transform(entry.daily_expenses))
            if entry.month == month
            else entry
            for entry in record.spending_history
        ),
    )


__all__ = [
    "add_fixed_cost",
    "update_fixed_cost",
    "remove_fixed_cost",
    "add_daily_expense",
    "update_daily_expense",
    "delete_daily_expense",
    "rename_subcategory",
    "update_investment_goals",
    "update_current_budget",
    "update_income",
]
