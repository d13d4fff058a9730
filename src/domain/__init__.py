"""Domain package for budget rules and core models."""

from .constants import (
    INVESTMENTS_CATEGORY,
    LIABILITIES_CATEGORY,
    LIVING_EXPENSES_CATEGORY,
)
from .models import (
    AllocationStatus,
    BudgetRecord,
    BudgetSummary,
    CategoryTotals,
    Classification,
    CurrentBudget,
    CustomSubcategory,
    DailyExpense,
    ExpenseType,
    FixedCost,
    InvestmentGoals,
    InvestmentGoalStatus,
    InvestmentProgress,
    MonthlySpending,
    SubcategorySpending,
    UserProfile,
)
from .services import (
    compute_allocation_status,
    compute_category_totals,
    compute_investment_goal_status,
    compute_total_allocated,
    compute_total_variable_costs,
)

__all__ = [
    "INVESTMENTS_CATEGORY",
    "LIABILITIES_CATEGORY",
    "LIVING_EXPENSES_CATEGORY",
    "AllocationStatus",
    "BudgetRecord",
    "BudgetSummary",
    "CategoryTotals",
    "Classification",
    "CurrentBudget",
    "CustomSubcategory",
    "DailyExpense",
    "ExpenseType",
    "FixedCost",
    "InvestmentGoals",
    "InvestmentGoalStatus",
    "InvestmentProgress",
    "MonthlySpending",
    "SubcategorySpending",
    "UserProfile",
    "compute_allocation_status",
    "compute_category_totals",
    "compute_investment_goal_status",
    "compute_total_allocated",
    "compute_total_variable_costs",
]
