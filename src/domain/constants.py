"""Domain constants for budget categorization."""

from types import MappingProxyType

LIVING_EXPENSES_CATEGORY = "Living Expenses"
LIABILITIES_CATEGORY = "Liabilities"
INVESTMENTS_CATEGORY = "Investments"

DISPLAY_CATEGORIES = (
    LIVING_EXPENSES_CATEGORY,
    LIABILITIES_CATEGORY,
    INVESTMENTS_CATEGORY,
)

# Display label used by daily expenses for each fixed-cost type value.
CATEGORY_BY_EXPENSE_TYPE = MappingProxyType(
    {
        "living-expense": LIVING_EXPENSES_CATEGORY,
        "liability": LIABILITIES_CATEGORY,
        "investment": INVESTMENTS_CATEGORY,
    }
)

LIVING_EXPENSE_SUBCATEGORIES = (
    ("Groceries", "🍎"),
    ("Transportation", "🚗"),
    ("Utilities", "⚡"),
    ("Entertainment", "🎬"),
    ("Healthcare", "🏥"),
    ("Pet Supplies", "🐕"),
    ("Coffee", "☕"),
    ("Dining Out", "🍽️"),
    ("Shopping", "🛍️"),
    ("Other", "📦"),
)

LIABILITY_SUBCATEGORIES = (
    ("Rent/Mortgage", "🏠"),
    ("Car Payment", "🚙"),
    ("Student Loans", "🎓"),
    ("Credit Cards", "💳"),
    ("Insurance", "🛡️"),
    ("Other Loans", "💰"),
)

INVESTMENT_SUBCATEGORIES = (
    ("401(k)", "📈"),
    ("IRA", "🏦"),
    ("Stocks", "📊"),
    ("Bonds", "📋"),
    ("Real Estate", "🏘️"),
    ("Crypto", "₿"),
    ("Emergency Fund", "🛟"),
    ("Other Investments", "💎"),
)

DEFAULT_SUBCATEGORY_ICON = "📦"
DEFAULT_CURRENCY = "USD"


__all__ = [
    "LIVING_EXPENSES_CATEGORY",
    "LIABILITIES_CATEGORY",
    "INVESTMENTS_CATEGORY",
    "DISPLAY_CATEGORIES",
    "CATEGORY_BY_EXPENSE_TYPE",
    "LIVING_EXPENSE_SUBCATEGORIES",
    "LIABILITY_SUBCATEGORIES",
    "INVESTMENT_SUBCATEGORIES",
    "DEFAULT_SUBCATEGORY_ICON",
    "DEFAULT_CURRENCY",
]
