"""Domain normalization helpers."""

from src.domain.models import Classification, ExpenseType


def normalize_label(label: str | None) -> str | None:
    """Normalize a free-text label such as a subcategory name.

    Args:
        label: Raw label typed by the user or read from storage.

    Returns:
        str | None: Stripped label, or None when it is empty.
    """
    if not label:
        return None
    cleaned = label.strip()
    return cleaned or None


def normalize_expense_type(value: str) -> ExpenseType:
    """Parse an expense type value such as ``"living-expense"``.

    Args:
        value: Raw type value, case and surrounding spaces ignored.

    Returns:
        ExpenseType: Matching enum member.

    Raises:
        ValueError: If the value is not a known expense type.
    """
    return ExpenseType(value.strip().lower())


def normalize_classification(value: str) -> Classification:
    """Parse a classification value such as ``"variable"``.

    Raises:
        ValueError: If the value is neither fixed nor variable.
    """
    return Classification(value.strip().lower())


__all__ = [
    "normalize_label",
    "normalize_expense_type",
    "normalize_classification",
]
