"""Application use cases package."""

from .edit_budget import EditBudgetUseCase
from .get_budget_summary import GetBudgetSummaryUseCase, build_budget_summary
from .initialize_budget import InitializeBudgetUseCase, generate_user_id
from .load_budget import LoadBudgetUseCase
from .save_budget import SaveBudgetResult, SaveBudgetUseCase

__all__ = [
    "EditBudgetUseCase",
    "GetBudgetSummaryUseCase",
    "build_budget_summary",
    "InitializeBudgetUseCase",
    "generate_user_id",
    "LoadBudgetUseCase",
    "SaveBudgetResult",
    "SaveBudgetUseCase",
]
