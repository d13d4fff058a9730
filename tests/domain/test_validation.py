"""Tests for domain validation and normalization helpers."""

from dataclasses import replace
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import Classification, ExpenseType, InvestmentGoals
from src.domain.services.normalization import (
    normalize_classification,
    normalize_expense_type,
    normalize_label,
)
from src.domain.services.validation import (
    is_valid_month,
    validate_amount,
    validate_investment_goals,
    validate_record,
)


def test_is_valid_month_accepts_only_year_month() -> None:
    """Month keys must be YYYY-MM with a real month number."""
    assert is_valid_month("2024-01") is True
    assert is_valid_month("2024-12") is True
    assert is_valid_month("2024-13") is False
    assert is_valid_month("2024-1") is False
    assert is_valid_month("") is False


def test_validate_amount_warns_on_negative_values() -> None:
    """Negative amounts are reported through the logger."""
    logger = MagicMock()

    assert validate_amount("rent", Decimal("-1"), logger) is False
    assert validate_amount("rent", Decimal("0"), logger) is True
    logger.warning.assert_called_once()


def test_validate_investment_goals_warns_when_inverted() -> None:
    """A minimum above the maximum is flagged."""
    logger = MagicMock()
    goals = InvestmentGoals(min=Decimal("10"), max=Decimal("5"))

    assert validate_investment_goals(goals, logger) is False
    logger.warning.assert_called_once()


def test_validate_record_counts_problems(sample_record) -> None:
    """Every problem in the record is counted."""
    logger = MagicMock()
    broken = replace(
        sample_record,
        income=Decimal("-5"),
        fixed_costs=(
            replace(sample_record.fixed_costs[0], amount=Decimal("-1")),
        ),
    )

    assert validate_record(sample_record, logger) == 0
    assert validate_record(broken, logger) == 2


def test_validate_record_flags_unknown_expense_category(sample_record) -> None:
    logger = MagicMock()
    entry = sample_record.spending_history[0]
    odd = replace(entry.daily_expenses[0], category="Groceries")
    broken = replace(
        sample_record,
        spending_history=(replace(entry, daily_expenses=(odd,)),),
    )

    assert validate_record(broken, logger) == 1
    assert "Unknown category" in logger.warning.call_args.args[0]


def test_normalization_helpers() -> None:
    """Labels are stripped and enum values parsed case-insensitively."""
    assert normalize_label("  Coffee ") == "Coffee"
    assert normalize_label("   ") is None
    assert normalize_label(None) is None
    assert normalize_expense_type(" Liability ") is ExpenseType.LIABILITY
    assert normalize_classification("VARIABLE") is Classification.VARIABLE
    with pytest.raises(ValueError):
        normalize_expense_type("income")
