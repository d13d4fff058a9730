"""Application ports package."""

from .budget_repository import BudgetRepositoryPort, RemoteBudgetStorePort
from .database import DatabaseEnginePort

__all__ = [
    "BudgetRepositoryPort",
    "RemoteBudgetStorePort",
    "DatabaseEnginePort",
]
