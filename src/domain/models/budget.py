"""Domain models for the persisted budget record."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class ExpenseType(str, Enum):
    """Budget category a fixed cost belongs to."""

    LIVING_EXPENSE = "living-expense"
    LIABILITY = "liability"
    INVESTMENT = "investment"


class Classification(str, Enum):
    """Budget treatment of a cost, orthogonal to its type."""

    FIXED = "fixed"
    VARIABLE = "variable"


@dataclass(frozen=True)
class FixedCost:
    """Recurring budget line declared once, independent of the month.

    Attributes:
        id: Stable identifier used for in-place edits.
        name: Display name, e.g. "Rent".
        amount: Monthly amount.
        expense_type: Category the amount is totalled under.
        classification: Fixed or variable budget treatment.
        sub_category: Optional subcategory label for breakdowns.
    """

    id: str
    name: str
    amount: Decimal
    expense_type: ExpenseType
    classification: Classification
    sub_category: str | None = None


@dataclass(frozen=True)
class DailyExpense:
    """One-off transaction recorded against a month.

    ``category`` holds the display label ("Living Expenses", "Liabilities"
    or "Investments") rather than an ``ExpenseType`` value.
    """

    id: str
    date: date
    category: str
    sub_category: str
    amount: Decimal
    classification: Classification


@dataclass(frozen=True)
class MonthlySpending:
    """Daily expenses recorded for a single ``YYYY-MM`` month."""

    month: str
    daily_expenses: tuple[DailyExpense, ...] = ()


@dataclass(frozen=True)
class InvestmentGoals:
    """Target range for the period's total investment contribution."""

    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class CurrentBudget:
    """Self-declared allocations for the active month."""

    month: str
    variable_allocated: Decimal = Decimal("0")
    investment_allocated: Decimal = Decimal("0")


@dataclass(frozen=True)
class UserProfile:
    """Owner of a budget record."""

    id: str
    email: str
    name: str
    created_at: str


@dataclass(frozen=True)
class CustomSubcategory:
    """User-defined subcategory shown next to the built-in catalog."""

    id: str
    name: str
    icon: str
    expense_type: ExpenseType
    is_visible: bool = True


@dataclass(frozen=True)
class BudgetRecord:
    """Complete persisted budget of a single user."""

    user: UserProfile
    income: Decimal
    investment_goals: InvestmentGoals
    current_budget: CurrentBudget
    fixed_costs: tuple[FixedCost, ...] = ()
    spending_history: tuple[MonthlySpending, ...] = ()
    custom_subcategories: tuple[CustomSubcategory, ...] = ()


__all__ = [
    "ExpenseType",
    "Classification",
    "FixedCost",
    "DailyExpense",
    "MonthlySpending",
    "InvestmentGoals",
    "CurrentBudget",
    "UserProfile",
    "CustomSubcategory",
    "BudgetRecord",
]
