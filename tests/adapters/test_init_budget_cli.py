"""Tests for the init_budget_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.adapters import init_budget_cli
from src.infrastructure.settings import BudgetSettings


@pytest.fixture
def settings(monkeypatch, tmp_path):
    resolved = BudgetSettings(
        storage_file=tmp_path / "budget.json",
        user_id="user_1",
    )
    monkeypatch.setattr(
        init_budget_cli.BudgetSettings,
        "from_env",
        classmethod(lambda cls: resolved),
    )
    monkeypatch.setattr(init_budget_cli, "get_app_logger", lambda: MagicMock())
    return resolved


@pytest.fixture
def stores(monkeypatch):
    """Stores built once per run and shared by the load and save steps."""
    shared = SimpleNamespace(repository=MagicMock(), remote_store=MagicMock())
    build_stores = MagicMock(return_value=shared)
    monkeypatch.setattr(init_budget_cli, "build_budget_stores", build_stores)
    shared.builder = build_stores
    return shared


def _patch_load(monkeypatch, record, expected_stores) -> None:
    load_use_case = MagicMock()
    load_use_case.execute.return_value = record

    def _fake_load_builder(resolved, stores):
        assert stores is expected_stores
        return load_use_case

    monkeypatch.setattr(
        init_budget_cli,
        "build_load_budget_use_case",
        _fake_load_builder,
    )


def _patch_save(monkeypatch, local_saved, expected_stores) -> MagicMock:
    save_use_case = MagicMock()
    save_use_case.execute.return_value = SimpleNamespace(
        local_saved=local_saved,
        remote_saved=False,
    )

    def _fake_save_builder(resolved, stores):
        assert stores is expected_stores
        return save_use_case

    monkeypatch.setattr(
        init_budget_cli,
        "build_save_budget_use_case",
        _fake_save_builder,
    )
    return save_use_case


def test_main_keeps_existing_budget(
    monkeypatch, settings, stores, capsys, sample_record
):
    _patch_load(monkeypatch, sample_record, stores)
    save_builder = MagicMock()
    monkeypatch.setattr(init_budget_cli, "build_save_budget_use_case", save_builder)

    init_budget_cli.main()

    save_builder.assert_not_called()
    assert "Budget already exists for test-user." in capsys.readouterr().out


def test_main_saves_new_budget(monkeypatch, settings, stores, capsys):
    """A fresh record is saved for the configured user."""
    _patch_load(monkeypatch, None, stores)
    save_use_case = _patch_save(monkeypatch, True, stores)

    init_budget_cli.main()

    stores.builder.assert_called_once_with(settings)
    record, user_id = save_use_case.execute.call_args.args
    assert user_id == "user_1"
    assert record.fixed_costs == ()
    out = capsys.readouterr().out
    assert f"Initialized budget for {record.user.id}" in out
    assert str(settings.storage_file) in out


def test_main_reports_failed_save(monkeypatch, settings, stores, capsys):
    _patch_load(monkeypatch, None, stores)
    _patch_save(monkeypatch, False, stores)

    init_budget_cli.main()

    assert "Failed to save the new budget" in capsys.readouterr().out
