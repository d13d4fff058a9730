"""Domain services folding a budget record into summaries.

Every function here is a pure projection of its arguments: nothing is
mutated and callers recompute after editing the source record.
"""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import (
    INVESTMENTS_CATEGORY,
    LIVING_EXPENSES_CATEGORY,
)
from src.domain.models import (
    AllocationStatus,
    CategoryTotals,
    Classification,
    CurrentBudget,
    ExpenseType,
    FixedCost,
    InvestmentGoals,
    InvestmentGoalStatus,
    InvestmentProgress,
    MonthlySpending,
    SubcategorySpending,
)
from src.utils.decimal_utils import round_half_up

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` key of the month containing ``day``."""
    return f"{day.year:04d}-{day.month:02d}"


def find_month_entry(
    spending_history: Iterable[MonthlySpending],
    month: str,
) -> MonthlySpending | None:
    """Return the spending entry for ``month`` if one was recorded.

    Args:
        spending_history: Month entries of a budget record.
        month: Month key in ``YYYY-MM`` format.

    Returns:
        MonthlySpending | None: Matching entry, or None when nothing was
        spent that month yet.
    """
    for entry in spending_history:
        if entry.month == month:
            return entry
    return None


def compute_category_totals(
    fixed_costs: Iterable[FixedCost],
    spending_history: Iterable[MonthlySpending],
    reference_month: str,
) -> CategoryTotals:
    """Compute category totals and the subcategory breakdown.

    Fixed costs always count, whatever the month. Daily expenses count only
    for the reference month and are matched on their display category;
    a daily expense labelled "Liabilities" adds to the breakdown but not to
    the liabilities total.

    Args:
        fixed_costs: Recurring costs of the record.
        spending_history: Month entries of the record.
        reference_month: Month treated as current, ``YYYY-MM``.

    Returns:
        CategoryTotals: Living-expense, liability and investment totals.
    """
    living_expenses = _ZERO
    liabilities = _ZERO
    investments = _ZERO
    breakdown: dict[str, Decimal] = {}

    for cost in fixed_costs:
        if cost.expense_type == ExpenseType.LIVING_EXPENSE:
            living_expenses += cost.amount
        elif cost.expense_type == ExpenseType.LIABILITY:
            liabilities += cost.amount
        elif cost.expense_type == ExpenseType.INVESTMENT:
            investments += cost.amount
        if cost.sub_category:
            breakdown[cost.sub_category] = (
                breakdown.get(cost.sub_category, _ZERO) + cost.amount
            )

    entry = find_month_entry(spending_history, reference_month)
    if entry is not None:
        for expense in entry.daily_expenses:
            if expense.category == LIVING_EXPENSES_CATEGORY:
                living_expenses += expense.amount
            elif expense.category == INVESTMENTS_CATEGORY:
                investments += expense.amount
            breakdown[expense.sub_category] = (
                breakdown.get(expense.sub_category, _ZERO) + expense.amount
            )

    return CategoryTotals(
        living_expenses=living_expenses,
        liabilities=liabilities,
        investments=investments,
        subcategory_breakdown=breakdown,
    )


def compute_total_variable_costs(
    fixed_costs: Iterable[FixedCost],
    spending_history: Iterable[MonthlySpending],
    reference_month: str,
) -> Decimal:
    """Sum variable fixed costs and the month's variable daily expenses.

    Args:
        fixed_costs: Recurring costs of the record.
        spending_history: Month entries of the record.
        reference_month: Month treated as current, ``YYYY-MM``.

    Returns:
        Decimal: Total of every variable-classified amount.
    """
    total = sum(
        (
            cost.amount
            for cost in fixed_costs
            if cost.classification == Classification.VARIABLE
        ),
        _ZERO,
    )
    entry = find_month_entry(spending_history, reference_month)
    if entry is not None:
        total += sum(
            (
                expense.amount
                for expense in entry.daily_expenses
                if expense.classification == Classification.VARIABLE
            ),
            _ZERO,
        )
    return total


def compute_total_fixed_living_costs(
    fixed_costs: Iterable[FixedCost],
) -> Decimal:
    """Sum fixed-classified living-expense costs."""
    return sum(
        (
            cost.amount
            for cost in fixed_costs
            if cost.classification == Classification.FIXED
            and cost.expense_type == ExpenseType.LIVING_EXPENSE
        ),
        _ZERO,
    )


def compute_total_allocated(
    fixed_costs: Iterable[FixedCost],
    current_budget: CurrentBudget,
) -> Decimal:
    """Return every fixed cost plus the month's declared allocations.

    The variable and investment allocations come from the current budget,
    not from recorded expenses.
    """
    fixed_total = sum((cost.amount for cost in fixed_costs), _ZERO)
    return (
        fixed_total
        + current_budget.variable_allocated
        + current_budget.investment_allocated
    )


def compute_allocation_status(
    income: Decimal,
    total_allocated: Decimal,
) -> AllocationStatus:
    """Compute how much of the income is allocated.

    Over-allocation is reported as 100 percent with nothing left; the
    deficit itself is not surfaced in the numbers.

    Args:
        income: Monthly income.
        total_allocated: Result of ``compute_total_allocated``.

    Returns:
        AllocationStatus: Clamped percentage and unallocated amount.
    """
    if income > 0:
        ratio = total_allocated / income * _HUNDRED
        percent = min(100, round_half_up(ratio))
    else:
        percent = 100 if total_allocated > 0 else 0
    unallocated = max(_ZERO, income - total_allocated)
    return AllocationStatus(
        total_allocated=total_allocated,
        percent_allocated=percent,
        unallocated_amount=unallocated,
        income=income,
    )


def compute_investment_goal_status(
    current_investment_total: Decimal,
    goals: InvestmentGoals,
) -> InvestmentGoalStatus:
    """Classify the investment total against an inclusive goal range."""
    if current_investment_total < goals.min:
        return InvestmentGoalStatus.BELOW_TARGET
    if current_investment_total > goals.max:
        return InvestmentGoalStatus.ABOVE_TARGET
    return InvestmentGoalStatus.ON_TARGET


def compute_investment_progress(
    current_investment_total: Decimal,
    goals: InvestmentGoals,
) -> InvestmentProgress:
    """Return the goal status with the distance to the range bounds.

    Args:
        current_investment_total: Investment total for the period.
        goals: Target range.

    Returns:
        InvestmentProgress: Status, shortfall below ``min`` and surplus
        above ``max`` (both zero when on target).
    """
    return InvestmentProgress(
        total=current_investment_total,
        goals=goals,
        status=compute_investment_goal_status(current_investment_total, goals),
        shortfall=max(_ZERO, goals.min - current_investment_total),
        surplus=max(_ZERO, current_investment_total - goals.max),
    )


def compute_variable_spending_by_subcategory(
    spending_history: Iterable[MonthlySpending],
    reference_month: str,
) -> list[SubcategorySpending]:
    """Group the month's variable daily expenses by subcategory.

    Subcategories keep the order in which they were first recorded.
    """
    entry = find_month_entry(spending_history, reference_month)
    if entry is None:
        return []
    totals: dict[str, Decimal] = {}
    for expense in entry.daily_expenses:
        if expense.classification != Classification.VARIABLE:
            continue
        totals[expense.sub_category] = (
            totals.get(expense.sub_category, _ZERO) + expense.amount
        )
    return [
        SubcategorySpending(sub_category=name, amount=amount)
        for name, amount in totals.items()
    ]


def compute_income_share(amount: Decimal, income: Decimal) -> Decimal:
    """Return ``amount`` as a percentage of income, to one decimal."""
    if income <= 0:
        return Decimal("0.0")
    return (amount / income * _HUNDRED).quantize(
        Decimal("0.1"),
        rounding=ROUND_HALF_UP,
    )


__all__ = [
    "month_key",
    "find_month_entry",
    "compute_category_totals",
    "compute_total_variable_costs",
    "compute_total_fixed_living_costs",
    "compute_total_allocated",
    "compute_allocation_status",
    "compute_investment_goal_status",
    "compute_investment_progress",
    "compute_variable_spending_by_subcategory",
    "compute_income_share",
]
