"""Tests for the budget_summary_cli adapter."""

from dataclasses import replace
from decimal import Decimal
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import budget_summary_cli
from src.application.use_cases.get_budget_summary import build_budget_summary
from src.infrastructure.settings import BudgetSettings

shared_stores = SimpleNamespace(repository=MagicMock(), remote_store=None)


def test_render_summary_lists_totals(sample_record):
    """Rendered lines show allocation, totals and the investment target."""
    summary = build_budget_summary(sample_record, "2024-01")

    lines = budget_summary_cli.render_summary(summary)

    assert lines[0] == "Budget summary for 2024-01"
    assert "Monthly income: $5,000.00" in lines
    assert "$1,700.00 unallocated (66% allocated)" in lines
    assert "Variable costs: $404.50 (8.1% of income)" in lines
    assert "Living expenses: $404.50" in lines
    assert "Liabilities: $1,500.00" in lines
    assert "Investments: $250.00 (5.0% of income)" in lines
    assert "Investment target: $500.00 - $1,000.00 [Below Target]" in lines
    assert "You need $250.00 more to reach your minimum target." in lines
    assert lines[-1] == "  Coffee: $4.50"


def test_render_summary_fully_allocated_in_other_currency(sample_record):
    record = replace(sample_record, income=Decimal("3300"))
    summary = build_budget_summary(record, "2024-02", "EUR")

    lines = budget_summary_cli.render_summary(summary)

    assert "100% allocated" in lines
    assert "Monthly income: 3,300.00 EUR" in lines
    assert not any(line.startswith("  ") for line in lines)


def test_resolve_month_rejects_invalid_value():
    logger = MagicMock()

    assert budget_summary_cli._resolve_month("2024-13", logger) is None
    logger.warning.assert_called_once()
    assert budget_summary_cli._resolve_month("2024-03", logger) == "2024-03"
    assert budget_summary_cli._resolve_month(None, logger) is None


def _patch_settings(monkeypatch, tmp_path: Path) -> BudgetSettings:
    settings = BudgetSettings(storage_file=tmp_path / "budget.json")
    monkeypatch.setattr(
        budget_summary_cli.BudgetSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(
        budget_summary_cli,
        "get_app_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setattr(
        budget_summary_cli,
        "build_budget_stores",
        lambda resolved: shared_stores,
    )
    return settings


def test_main_prints_hint_without_record(monkeypatch, tmp_path, capsys):
    _patch_settings(monkeypatch, tmp_path)
    load_use_case = MagicMock()
    load_use_case.execute.return_value = None
    monkeypatch.setattr(
        budget_summary_cli,
        "build_load_budget_use_case",
        lambda settings, stores: load_use_case,
    )

    budget_summary_cli.main()

    assert "No budget found" in capsys.readouterr().out


def test_main_prints_summary_for_requested_month(
    monkeypatch, tmp_path, capsys, sample_record
):
    """BUDGET_MONTH selects the month passed to the summary use case."""
    settings = _patch_settings(monkeypatch, tmp_path)
    monkeypatch.setenv("BUDGET_MONTH", "2024-01")
    load_use_case = MagicMock()
    load_use_case.execute.return_value = sample_record
    summary_use_case = MagicMock()
    summary_use_case.execute.return_value = build_budget_summary(
        sample_record,
        "2024-01",
    )
    monkeypatch.setattr(
        budget_summary_cli,
        "build_load_budget_use_case",
        lambda resolved, stores: load_use_case,
    )

    def _fake_summary_builder(resolved, stores):
        assert resolved is settings
        assert stores is shared_stores
        return summary_use_case

    monkeypatch.setattr(
        budget_summary_cli,
        "build_summary_use_case",
        _fake_summary_builder,
    )

    budget_summary_cli.main()

    load_use_case.execute.assert_called_once_with(None)
    summary_use_case.execute.assert_called_once_with(
        reference_month="2024-01",
        record=sample_record,
    )
    assert "Budget summary for 2024-01" in capsys.readouterr().out
