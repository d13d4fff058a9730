"""Shared fixtures for budget tests."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    BudgetRecord,
    Classification,
    CurrentBudget,
    DailyExpense,
    ExpenseType,
    FixedCost,
    InvestmentGoals,
    MonthlySpending,
    UserProfile,
)


def make_fixed_cost(
    cost_id: str,
    name: str,
    amount: str,
    expense_type: ExpenseType,
    classification: Classification = Classification.FIXED,
    sub_category: str | None = None,
) -> FixedCost:
    return FixedCost(
        id=cost_id,
        name=name,
        amount=Decimal(amount),
        expense_type=expense_type,
        classification=classification,
        sub_category=sub_category,
    )


def make_expense(
    expense_id: str,
    day: date,
    category: str,
    sub_category: str,
    amount: str,
    classification: Classification = Classification.VARIABLE,
) -> DailyExpense:
    return DailyExpense(
        id=expense_id,
        date=day,
        category=category,
        sub_category=sub_category,
        amount=Decimal(amount),
        classification=classification,
    )


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def sample_record() -> BudgetRecord:
    """Record mirroring the onboarding example: rent plus groceries."""
    return BudgetRecord(
        user=UserProfile(
            id="test-user",
            email="test@example.com",
            name="Test User",
            created_at="2024-01-01T00:00:00+00:00",
        ),
        income=Decimal("5000"),
        investment_goals=InvestmentGoals(
            min=Decimal("500"),
            max=Decimal("1000"),
        ),
        current_budget=CurrentBudget(
            month="2024-01",
            variable_allocated=Decimal("800"),
            investment_allocated=Decimal("600"),
        ),
        fixed_costs=(
            make_fixed_cost(
                "1",
                "Rent",
                "1500",
                ExpenseType.LIABILITY,
                Classification.FIXED,
                "Rent/Mortgage",
            ),
            make_fixed_cost(
                "2",
                "Groceries",
                "400",
                ExpenseType.LIVING_EXPENSE,
                Classification.VARIABLE,
                "Groceries",
            ),
        ),
        spending_history=(
            MonthlySpending(
                month="2024-01",
                daily_expenses=(
                    make_expense(
                        "e1",
                        date(2024, 1, 3),
                        "Living Expenses",
                        "Coffee",
                        "4.50",
                    ),
                    make_expense(
                        "e2",
                        date(2024, 1, 9),
                        "Investments",
                        "Stocks",
                        "250",
                        Classification.FIXED,
                    ),
                ),
            ),
        ),
    )
