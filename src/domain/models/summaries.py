"""Domain models for values derived from a budget record."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from .budget import InvestmentGoals


@dataclass(frozen=True)
class CategoryTotals:
    """Totals per budget category plus a subcategory breakdown.

    Attributes:
        living_expenses: Living-expense fixed costs and daily expenses.
        liabilities: Liability fixed costs.
        investments: Investment fixed costs and daily expenses.
        subcategory_breakdown: Amount per subcategory label.
    """

    living_expenses: Decimal
    liabilities: Decimal
    investments: Decimal
    subcategory_breakdown: dict[str, Decimal] = field(default_factory=dict)

    @property
    def grand_total(self) -> Decimal:
        """Return the sum of the three category totals."""
        return self.living_expenses + self.liabilities + self.investments


@dataclass(frozen=True)
class AllocationStatus:
    """How much of the income is allocated, clamped to [0, income]."""

    total_allocated: Decimal
    percent_allocated: int
    unallocated_amount: Decimal
    income: Decimal

    @property
    def is_fully_allocated(self) -> bool:
        return self.unallocated_amount == 0

    @property
    def is_over_allocated(self) -> bool:
        """Return True when allocations exceed the income."""
        return self.total_allocated > self.income


class InvestmentGoalStatus(str, Enum):
    """Position of the investment total relative to the goal range."""

    BELOW_TARGET = "below-target"
    ON_TARGET = "on-target"
    ABOVE_TARGET = "above-target"


@dataclass(frozen=True)
class InvestmentProgress:
    """Investment total compared with the goal range.

    Attributes:
        total: Current investment total.
        goals: Target range.
        status: Below, on, or above target.
        shortfall: Amount missing to reach ``goals.min``.
        surplus: Amount beyond ``goals.max``.
    """

    total: Decimal
    goals: InvestmentGoals
    status: InvestmentGoalStatus
    shortfall: Decimal
    surplus: Decimal


@dataclass(frozen=True)
class SubcategorySpending:
    """Variable spending aggregated for one subcategory."""

    sub_category: str
    amount: Decimal


@dataclass(frozen=True)
class BudgetSummary:
    """Dashboard view of a budget record for a reference month."""

    reference_month: str
    currency_code: str
    income: Decimal
    category_totals: CategoryTotals
    total_variable_costs: Decimal
    total_fixed_living_costs: Decimal
    allocation: AllocationStatus
    investment_progress: InvestmentProgress
    income_shares: dict[str, Decimal]
    variable_spending: list[SubcategorySpending]


__all__ = [
    "CategoryTotals",
    "AllocationStatus",
    "InvestmentGoalStatus",
    "InvestmentProgress",
    "SubcategorySpending",
    "BudgetSummary",
]
