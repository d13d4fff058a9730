"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import DEFAULT_CURRENCY
from src.utils.utils import get_project_root

REMOTE_BACKENDS = ("none", "sqlalchemy")


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for locating and syncing the budget record.

    Attributes:
        storage_file: JSON file holding the local record.
        remote_backend: Remote store identifier (none or sqlalchemy).
        user_id: Optional signed-in user id used for remote sync.
        currency_code: Currency used when displaying amounts.
    """

    storage_file: Path
    remote_backend: str = "none"
    user_id: Optional[str] = None
    currency_code: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If BUDGET_REMOTE_BACKEND names an unknown backend.
        """
        dotenv.load_dotenv()
        raw_file = os.getenv("BUDGET_STORAGE_FILE")
        storage_file = (
            cls._normalize_path(raw_file)
            if raw_file
            else get_project_root() / "data" / "budget.json"
        )
        backend = os.getenv("BUDGET_REMOTE_BACKEND", "none").strip().lower()
        if backend not in REMOTE_BACKENDS:
            raise ValueError(
                f"Unsupported remote backend: {backend}. "
                f"Expected one of {', '.join(REMOTE_BACKENDS)}."
            )
        user_id = (os.getenv("BUDGET_USER_ID") or "").strip() or None
        currency = (
            os.getenv("BUDGET_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        return cls(
            storage_file=storage_file,
            remote_backend=backend,
            user_id=user_id,
            currency_code=currency,
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Normalize a file path or ``file://`` URI.

        Args:
            raw_path: Raw path string.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        return Path(raw_path).expanduser().resolve()


__all__ = ["BudgetSettings", "REMOTE_BACKENDS"]
