"""Subcategory catalog: built-in entries plus user-defined ones."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from src.domain.constants import (
    CATEGORY_BY_EXPENSE_TYPE,
    DEFAULT_SUBCATEGORY_ICON,
    INVESTMENT_SUBCATEGORIES,
    LIABILITY_SUBCATEGORIES,
    LIVING_EXPENSE_SUBCATEGORIES,
)
from src.domain.models import BudgetRecord, CustomSubcategory, ExpenseType
from src.domain.services.normalization import normalize_label

_BUILT_IN = {
    ExpenseType.LIVING_EXPENSE: LIVING_EXPENSE_SUBCATEGORIES,
    ExpenseType.LIABILITY: LIABILITY_SUBCATEGORIES,
    ExpenseType.INVESTMENT: INVESTMENT_SUBCATEGORIES,
}


@dataclass(frozen=True)
class SubcategoryOption:
    """Subcategory offered when recording a cost or an expense."""

    name: str
    icon: str
    is_custom: bool = False


def display_category(expense_type: ExpenseType) -> str:
    """Return the label daily expenses use for a fixed-cost type."""
    return CATEGORY_BY_EXPENSE_TYPE[expense_type.value]


def subcategories_by_type(
    expense_type: ExpenseType,
    custom: Iterable[CustomSubcategory],
) -> list[SubcategoryOption]:
    """Return built-in subcategories followed by custom ones of the type."""
    options = [
        SubcategoryOption(name=name, icon=icon)
        for name, icon in _BUILT_IN[expense_type]
    ]
    options.extend(
        SubcategoryOption(name=sub.name, icon=sub.icon, is_custom=True)
        for sub in custom
        if sub.expense_type == expense_type
    )
    return options


def visible_subcategories(
    expense_type: ExpenseType,
    custom: Iterable[CustomSubcategory],
) -> list[SubcategoryOption]:
    """Return the subcategories of a type, minus hidden custom entries.

    A custom entry sharing its name with a built-in one hides that built-in
    entry as well when it is not visible.
    """
    custom = [sub for sub in custom if sub.expense_type == expense_type]
    hidden = {sub.name for sub in custom if not sub.is_visible}
    return [
        option
        for option in subcategories_by_type(expense_type, custom)
        if option.name not in hidden
    ]


def add_custom_subcategory(
    record: BudgetRecord,
    subcategory: CustomSubcategory,
) -> BudgetRecord:
    """Append a custom subcategory.

    A blank icon falls back to the generic package icon.

    Raises:
        ValueError: If the subcategory name is blank.
    """
    name = normalize_label(subcategory.name)
    if name is None:
        raise ValueError("Subcategory name cannot be blank")
    added = replace(
        subcategory,
        name=name,
        icon=subcategory.icon or DEFAULT_SUBCATEGORY_ICON,
    )
    return replace(
        record,
        custom_subcategories=record.custom_subcategories + (added,),
    )


def toggle_subcategory_visibility(
    record: BudgetRecord,
    subcategory_id: str,
) -> BudgetRecord:
    return replace(
        record,
        custom_subcategories=tuple(
            replace(sub, is_visible=not sub.is_visible)
            if sub.id == subcategory_id
            else sub
            for sub in record.custom_subcategories
        ),
    )


def delete_custom_subcategory(
    record: BudgetRecord,
    subcategory_id: str,
) -> BudgetRecord:
    return replace(
        record,
        custom_subcategories=tuple(
            sub
            for sub in record.custom_subcategories
            if sub.id != subcategory_id
        ),
    )


def edit_custom_subcategory(
    record: BudgetRecord,
    subcategory_id: str,
    name: str,
    icon: str,
) -> BudgetRecord:
    """Change the name and icon of a custom subcategory.

    Costs and expenses already using the old name are not renamed; use
    ``rename_subcategory`` for that.

    Raises:
        ValueError: If ``name`` is blank.
    """
    cleaned = normalize_label(name)
    if cleaned is None:
        raise ValueError("Subcategory name cannot be blank")
    return replace(
        record,
        custom_subcategories=tuple(
            replace(sub, name=cleaned, icon=icon)
            if sub.id == subcategory_id
            else sub
            for sub in record.custom_subcategories
        ),
    )


__all__ = [
    "SubcategoryOption",
    "display_category",
    "subcategories_by_type",
    "visible_subcategories",
    "add_custom_subcategory",
    "toggle_subcategory_visibility",
    "delete_custom_subcategory",
    "edit_custom_subcategory",
]
