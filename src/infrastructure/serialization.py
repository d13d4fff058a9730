"""Conversion between budget records and their JSON documents.

Documents use the camelCase keys of the stored record (``fixedCosts``,
``subCategory``, ``spendingHistory``...) so local files and remote rows
share one format.
"""

from datetime import date
from typing import Any

from src.domain.models import (
    BudgetRecord,
    Classification,
    CurrentBudget,
    CustomSubcategory,
    DailyExpense,
    FixedCost,
    InvestmentGoals,
    MonthlySpending,
    UserProfile,
)
from src.domain.services.normalization import (
    normalize_classification,
    normalize_expense_type,
)
from src.utils.decimal_utils import coerce_decimal, to_json_number


def record_to_dict(record: BudgetRecord) -> dict[str, Any]:
    """Serialize a record to a JSON-compatible document.

    Args:
        record: Record to serialize.

    Returns:
        dict[str, Any]: Document with camelCase keys and numeric amounts.
    """
    return {
        "user": {
            "id": record.user.id,
            "email": record.user.email,
            "name": record.user.name,
            "createdAt": record.user.created_at,
        },
        "income": to_json_number(record.income),
        "investmentGoals": {
            "min": to_json_number(record.investment_goals.min),
            "max": to_json_number(record.investment_goals.max),
        },
        "fixedCosts": [_fixed_cost_to_dict(cost) for cost in record.fixed_costs],
        "currentBudget": {
            "month": record.current_budget.month,
            "variableAllocated": to_json_number(
                record.current_budget.variable_allocated
            ),
            "investmentAllocated": to_json_number(
                record.current_budget.investment_allocated
            ),
        },
        "spendingHistory": [
            {
                "month": entry.month,
                "dailyExpenses": [
                    _daily_expense_to_dict(expense)
                    for expense in entry.daily_expenses
                ],
            }
            for entry in record.spending_history
        ],
        "customSubcategories": [
            {
                "id": sub.id,
                "name": sub.name,
                "icon": sub.icon,
                "type": sub.expense_type.value,
                "isVisible": sub.is_visible,
            }
            for sub in record.custom_subcategories
        ],
    }


def record_from_dict(payload: dict[str, Any]) -> BudgetRecord:
    """Build a record from a stored document.

    Missing optional sections default to empty values.

    Args:
        payload: Document produced by ``record_to_dict`` or the web client.

    Returns:
        BudgetRecord: Parsed record.

    Raises:
        KeyError: If a required key such as ``user`` is missing.
        ValueError: If a type, classification or date is malformed.
    """
    user = payload["user"]
    goals = payload.get("investmentGoals") or {}
    budget = payload.get("currentBudget") or {}
    return BudgetRecord(
        user=UserProfile(
            id=str(user["id"]),
            email=user.get("email", ""),
            name=user.get("name", ""),
            created_at=user.get("createdAt", ""),
        ),
        income=coerce_decimal(payload.get("income")),
        investment_goals=InvestmentGoals(
            min=coerce_decimal(goals.get("min")),
            max=coerce_decimal(goals.get("max")),
        ),
        current_budget=CurrentBudget(
            month=budget.get("month", ""),
            variable_allocated=coerce_decimal(budget.get("variableAllocated")),
            investment_allocated=coerce_decimal(
                budget.get("investmentAllocated")
            ),
        ),
        fixed_costs=tuple(
            _fixed_cost_from_dict(item)
            for item in payload.get("fixedCosts") or []
        ),
        spending_history=tuple(
            MonthlySpending(
                month=entry["month"],
                daily_expenses=tuple(
                    _daily_expense_from_dict(item)
                    for item in entry.get("dailyExpenses") or []
                ),
            )
            for entry in payload.get("spendingHistory") or []
        ),
        custom_subcategories=tuple(
            CustomSubcategory(
                id=str(item["id"]),
                name=item["name"],
                icon=item.get("icon", ""),
                expense_type=normalize_expense_type(item["type"]),
                is_visible=bool(item.get("isVisible", True)),
            )
            for item in payload.get("customSubcategories") or []
        ),
    )


def _fixed_cost_to_dict(cost: FixedCost) -> dict[str, Any]:
    data = {
        "id": cost.id,
        "name": cost.name,
        "amount": to_json_number(cost.amount),
        "type": cost.expense_type.value,
        "classification": cost.classification.value,
    }
    if cost.sub_category is not None:
        data["subCategory"] = cost.sub_category
    return data


def _fixed_cost_from_dict(item: dict[str, Any]) -> FixedCost:
    return FixedCost(
        id=str(item["id"]),
        name=item.get("name", ""),
        amount=coerce_decimal(item.get("amount")),
        expense_type=normalize_expense_type(item["type"]),
        classification=normalize_classification(
            item.get("classification", Classification.FIXED.value)
        ),
        sub_category=item.get("subCategory") or None,
    )


def _daily_expense_to_dict(expense: DailyExpense) -> dict[str, Any]:
    return {
        "id": expense.id,
        "date": expense.date.isoformat(),
        "category": expense.category,
        "subCategory": expense.sub_category,
        "amount": to_json_number(expense.amount),
        "classification": expense.classification.value,
    }


def _daily_expense_from_dict(item: dict[str, Any]) -> DailyExpense:
    return DailyExpense(
        id=str(item["id"]),
        date=date.fromisoformat(str(item["date"])[:10]),
        category=item.get("category", ""),
        sub_category=item.get("subCategory", ""),
        amount=coerce_decimal(item.get("amount")),
        classification=normalize_classification(
            item.get("classification", Classification.VARIABLE.value)
        ),
    )


__all__ = ["record_to_dict", "record_from_dict"]
