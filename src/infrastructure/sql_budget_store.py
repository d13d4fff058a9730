"""Remote budget store backed by a SQL table keyed by user id."""

from datetime import datetime, timezone
import json

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.budget_repository import RemoteBudgetStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import BudgetRecord
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.serialization import record_from_dict, record_to_dict


CREATE_USER_BUDGETS_SQL = """
CREATE TABLE IF NOT EXISTS user_budgets (
    user_id TEXT PRIMARY KEY,
    budget_data TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_USER_BUDGET_SQL = text(
    """
    SELECT budget_data
    FROM user_budgets
    WHERE user_id = :user_id
    """
)

UPSERT_USER_BUDGET_SQL = text(
    """
    INSERT INTO user_budgets (user_id, budget_data, updated_at)
    VALUES (:user_id, :budget_data, :updated_at)
    ON CONFLICT (user_id) DO UPDATE
    SET budget_data = excluded.budget_data,
        updated_at = excluded.updated_at
    """
)


class SqlAlchemyBudgetStore(RemoteBudgetStorePort):
    """Remote record store reading and writing the user_budgets table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the budget engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare(self) -> bool:
        """Create the user_budgets table if it does not exist.

        An unreachable database is logged; later fetches and upserts then
        fail the same way and callers fall back to local storage.

        Returns:
            bool: True when the table is available.
        """
        engine = self._db_port.get_budget_engine()
        try:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_USER_BUDGETS_SQL)
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to prepare user_budgets table: {exc}")
            return False
        return True

    def fetch_by_user_id(self, user_id: str) -> BudgetRecord | None:
        """Return the stored record of a user.

        Args:
            user_id: Id of the record owner.

        Returns:
            BudgetRecord | None: Stored record, None when absent, unreadable
            or when the database is unavailable.
        """
        engine = self._db_port.get_budget_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_USER_BUDGET_SQL,
                    {"user_id": user_id},
                ).first()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to fetch budget for {user_id}: {exc}")
            return None
        if row is None:
            return None

        payload = row.budget_data
        try:
            if isinstance(payload, (str, bytes)):
                payload = json.loads(payload)
            return record_from_dict(payload)
        except (KeyError, TypeError, ValueError) as exc:
            self._logger.error(
                f"Invalid remote budget data for {user_id}: {exc!r}"
            )
            return None

    def upsert(self, user_id: str, record: BudgetRecord) -> bool:
        """Insert or replace the record of a user.

        Args:
            user_id: Id of the record owner.
            record: Record to store.

        Returns:
            bool: True when the row was written.
        """
        params = {
            "user_id": user_id,
            "budget_data": json.dumps(record_to_dict(record), ensure_ascii=False),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        engine = self._db_port.get_budget_engine()
        try:
            with engine.begin() as conn:
                conn.execute(UPSERT_USER_BUDGET_SQL, params)
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to save budget for {user_id}: {exc}")
            return False
        self._logger.info(f"Saved remote budget for {user_id}")
        return True


__all__ = [
    "SqlAlchemyBudgetStore",
    "CREATE_USER_BUDGETS_SQL",
    "SELECT_USER_BUDGET_SQL",
    "UPSERT_USER_BUDGET_SQL",
]
