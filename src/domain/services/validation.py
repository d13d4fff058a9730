"""Domain validation helpers.

Aggregation never raises on odd input; these checks only warn so callers
can surface suspicious records before folding them.
"""

from decimal import Decimal
from logging import Logger
import re

from src.domain.constants import DISPLAY_CATEGORIES
from src.domain.models import BudgetRecord, InvestmentGoals

_MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def is_valid_month(value: str) -> bool:
    """Return True when ``value`` is a ``YYYY-MM`` month key."""
    return bool(_MONTH_PATTERN.match(value or ""))


def validate_amount(label: str, amount: Decimal, logger: Logger) -> bool:
    """Warn when an amount is negative.

    Args:
        label: Description of the amount used in the warning.
        amount: Amount to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when the amount is valid.
    """
    if amount < 0:
        logger.warning(f"Negative amount for {label}: {amount}")
        return False
    return True


def validate_investment_goals(goals: InvestmentGoals, logger: Logger) -> bool:
    """Warn when the goal range is inverted."""
    if goals.min > goals.max:
        logger.warning(
            f"Investment goal min {goals.min} is above max {goals.max}"
        )
        return False
    return True


def validate_record(record: BudgetRecord, logger: Logger) -> int:
    """Run every check over a record.

    Args:
        record: Budget record to inspect.
        logger: Logger used for warnings.

    Returns:
        int: Number of problems found.
    """
    problems = 0
    if not validate_amount("income", record.income, logger):
        problems += 1
    if not validate_investment_goals(record.investment_goals, logger):
        problems += 1
    for cost in record.fixed_costs:
        if not validate_amount(f"fixed cost '{cost.name}'", cost.amount, logger):
            problems += 1
    for entry in record.spending_history:
        if not is_valid_month(entry.month):
            logger.warning(f"Invalid spending history month: {entry.month}")
            problems += 1
        for expense in entry.daily_expenses:
            if expense.category not in DISPLAY_CATEGORIES:
                logger.warning(
                    f"Unknown category for expense {expense.id}: "
                    f"{expense.category}"
                )
                problems += 1
            if not validate_amount(
                f"expense {expense.id}",
                expense.amount,
                logger,
            ):
                problems += 1
    if not is_valid_month(record.current_budget.month):
        logger.warning(
            f"Invalid current budget month: {record.current_budget.month}"
        )
        problems += 1
    return problems


__all__ = [
    "is_valid_month",
    "validate_amount",
    "validate_investment_goals",
    "validate_record",
]
