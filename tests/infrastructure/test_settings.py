"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import BudgetSettings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "BUDGET_STORAGE_FILE",
        "BUDGET_REMOTE_BACKEND",
        "BUDGET_USER_ID",
        "BUDGET_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(monkeypatch, tmp_path: Path) -> None:
    """Defaults store the record under the project data folder."""
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = BudgetSettings.from_env()

    assert settings.storage_file == tmp_path / "data" / "budget.json"
    assert settings.remote_backend == "none"
    assert settings.user_id is None
    assert settings.currency_code == "USD"


def test_from_env_reads_variables(monkeypatch, tmp_path: Path) -> None:
    """Environment variables override every default."""
    target = tmp_path / "custom.json"
    monkeypatch.setenv("BUDGET_STORAGE_FILE", f"file://{target}")
    monkeypatch.setenv("BUDGET_REMOTE_BACKEND", " SQLAlchemy ")
    monkeypatch.setenv("BUDGET_USER_ID", "user_abc")
    monkeypatch.setenv("BUDGET_CURRENCY", "eur")

    settings = BudgetSettings.from_env()

    assert settings.storage_file == target.resolve()
    assert settings.remote_backend == "sqlalchemy"
    assert settings.user_id == "user_abc"
    assert settings.currency_code == "EUR"


def test_from_env_rejects_unknown_backend(monkeypatch) -> None:
    """Unknown remote backends fail fast."""
    monkeypatch.setenv("BUDGET_REMOTE_BACKEND", "firebase")

    with pytest.raises(ValueError):
        BudgetSettings.from_env()
