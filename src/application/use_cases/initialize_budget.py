"""Use case to create an empty budget record for a new user."""

from datetime import date, datetime, timezone
from decimal import Decimal
import secrets
import string

from src.domain.models import (
    BudgetRecord,
    CurrentBudget,
    InvestmentGoals,
    UserProfile,
)
from src.domain.services.aggregation import month_key
from src.infrastructure.logging.logger import get_app_logger

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_user_id() -> str:
    """Return a ``user_`` id with nine random base-36 characters."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"user_{suffix}"


class InitializeBudgetUseCase:
    """Build the empty record a user starts from before onboarding."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        today: date | None = None,
        user: UserProfile | None = None,
    ) -> BudgetRecord:
        """Return a record with zero income, goals and allocations.

        Args:
            today: Day used for the current budget month; defaults to today.
            user: Optional owner; a demo profile is generated otherwise.

        Returns:
            BudgetRecord: Fresh record with no costs or history.
        """
        current_day = today or date.today()
        owner = user or UserProfile(
            id=generate_user_id(),
            email="demo@example.com",
            name="Demo User",
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        record = BudgetRecord(
            user=owner,
            income=Decimal("0"),
            investment_goals=InvestmentGoals(
                min=Decimal("0"),
                max=Decimal("0"),
            ),
            current_budget=CurrentBudget(month=month_key(current_day)),
        )
        self._logger.info(
            f"Initialized budget for {owner.id} "
            f"({record.current_budget.month})"
        )
        return record


__all__ = ["InitializeBudgetUseCase", "generate_user_id"]
