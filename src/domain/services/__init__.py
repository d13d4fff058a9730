"""Domain services package."""

from .aggregation import (
    compute_allocation_status,
    compute_category_totals,
    compute_income_share,
    compute_investment_goal_status,
    compute_investment_progress,
    compute_total_allocated,
    compute_total_fixed_living_costs,
    compute_total_variable_costs,
    compute_variable_spending_by_subcategory,
    find_month_entry,
    month_key,
)
from .normalization import (
    normalize_classification,
    normalize_expense_type,
    normalize_label,
)
from .validation import (
    is_valid_month,
    validate_amount,
    validate_investment_goals,
    validate_record,
)

__all__ = [
    "compute_allocation_status",
    "compute_category_totals",
    "compute_income_share",
    "compute_investment_goal_status",
    "compute_investment_progress",
    "compute_total_allocated",
    "compute_total_fixed_living_costs",
    "compute_total_variable_costs",
    "compute_variable_spending_by_subcategory",
    "find_month_entry",
    "month_key",
    "normalize_classification",
    "normalize_expense_type",
    "normalize_label",
    "is_valid_month",
    "validate_amount",
    "validate_investment_goals",
    "validate_record",
]
