"""Domain models package."""

from .budget import (
    BudgetRecord,
    Classification,
    CurrentBudget,
    CustomSubcategory,
    DailyExpense,
    ExpenseType,
    FixedCost,
    InvestmentGoals,
    MonthlySpending,
    UserProfile,
)
from .summaries import (
    AllocationStatus,
    BudgetSummary,
    CategoryTotals,
    InvestmentGoalStatus,
    InvestmentProgress,
    SubcategorySpending,
)

__all__ = [
    "BudgetRecord",
    "Classification",
    "CurrentBudget",
    "CustomSubcategory",
    "DailyExpense",
    "ExpenseType",
    "FixedCost",
    "InvestmentGoals",
    "MonthlySpending",
    "UserProfile",
    "AllocationStatus",
    "BudgetSummary",
    "CategoryTotals",
    "InvestmentGoalStatus",
    "InvestmentProgress",
    "SubcategorySpending",
]
