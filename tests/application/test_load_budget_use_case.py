"""Tests for the LoadBudgetUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.load_budget import LoadBudgetUseCase


def test_execute_prefers_remote_record(sample_record) -> None:
    """A remote record wins over local storage."""
    repository = MagicMock()
    remote = MagicMock()
    remote.fetch_by_user_id.return_value = sample_record

    use_case = LoadBudgetUseCase(repository, remote, logger=MagicMock())

    assert use_case.execute("test-user") is sample_record
    remote.fetch_by_user_id.assert_called_once_with("test-user")
    repository.load.assert_not_called()


def test_execute_falls_back_to_local_on_remote_miss(sample_record) -> None:
    """A missing remote record falls back to local storage."""
    repository = MagicMock()
    repository.load.return_value = sample_record
    remote = MagicMock()
    remote.fetch_by_user_id.return_value = None

    use_case = LoadBudgetUseCase(repository, remote, logger=MagicMock())

    assert use_case.execute("test-user") is sample_record


def test_execute_falls_back_to_local_on_remote_error(sample_record) -> None:
    """Remote failures are logged and local storage is used."""
    repository = MagicMock()
    repository.load.return_value = sample_record
    remote = MagicMock()
    remote.fetch_by_user_id.side_effect = RuntimeError("offline")
    logger = MagicMock()

    use_case = LoadBudgetUseCase(repository, remote, logger=logger)

    assert use_case.execute("test-user") is sample_record
    logger.warning.assert_called_once()


def test_execute_skips_remote_without_user(sample_record) -> None:
    """Anonymous sessions only read local storage."""
    repository = MagicMock()
    repository.load.return_value = None
    remote = MagicMock()

    use_case = LoadBudgetUseCase(repository, remote, logger=MagicMock())

    assert use_case.execute() is None
    remote.fetch_by_user_id.assert_not_called()
