"""Budget repository storing the record as a local JSON file."""

import json
from pathlib import Path

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.domain.models import BudgetRecord
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.serialization import record_from_dict, record_to_dict


class JsonFileBudgetRepository(BudgetRepositoryPort):
    """Repository keeping the single budget record in a JSON file."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: File holding the record; parent folders are created on save.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> BudgetRecord | None:
        """Return the stored record.

        Unreadable or malformed files are logged and treated as absent.

        Returns:
            BudgetRecord | None: Stored record, None when missing or invalid.
        """
        if not self._path.exists():
            self._logger.info(f"No budget file at {self._path}")
            return None
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            record = record_from_dict(payload)
        except OSError as exc:
            self._logger.error(f"Error reading budget file {self._path}: {exc}")
            return None
        except (KeyError, TypeError, ValueError) as exc:
            self._logger.error(
                f"Invalid budget data in {self._path}: {exc!r}"
            )
            return None
        self._logger.info(f"Loaded budget for {record.user.id} from {self._path}")
        return record

    def save(self, record: BudgetRecord) -> bool:
        """Write the record, replacing any previous content.

        Args:
            record: Record to persist.

        Returns:
            bool: True when the file was written.
        """
        payload = json.dumps(record_to_dict(record), indent=2, ensure_ascii=False)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            self._logger.error(f"Error saving budget file {self._path}: {exc}")
            return False
        return True

    def clear(self) -> None:
        """Delete the budget file if it exists."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            self._logger.error(f"Error clearing budget file {self._path}: {exc}")


__all__ = ["JsonFileBudgetRepository"]
