"""Store adapter for the offline trip/expense database."""

from sqlalchemy.exc import OperationalError, SQLAlchemyError

from src.core.constants import OFFLINE_DATABASE_STORE, STORE_CLEAR_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.domain.errors import ClearError
from src.infrastructure.persistence.database import OfflineDatabase
from src.infrastructure.stores.base import BaseStoreAdapter


class OfflineDatabaseStoreAdapter(BaseStoreAdapter):
    """Empties every offline cache table in one transaction.

    A database that was never initialized has nothing to clear and counts
    as cleared. No database configured counts as unavailable.
    """

    def __init__(
        self,
        database: OfflineDatabase | None,
        *,
        name: str = OFFLINE_DATABASE_STORE,
        timeout: float = STORE_CLEAR_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(name=name, timeout=timeout)
        self._database = database

    def _is_available(self) -> bool:
        return self._database is not None

    def _unavailable_error(self) -> ClearError:
        return self._error(
            ErrorCode.STORE_UNAVAILABLE,
            "Offline database is not configured",
        )

    async def _clear_store(self) -> None:
        assert self._database is not None
        tables = await self._database.clear_all()
        self._logger.debug("offline_database_cleared", tables=tables)

    def _map_exception(self, error: Exception) -> ClearError:
        if isinstance(error, OperationalError):
            return self._error(
                ErrorCode.STORE_CLEAR_FAILED,
                "Offline database could not be opened or written",
                details={"error_type": type(error).__name__, "error": str(error)},
            )
        if isinstance(error, SQLAlchemyError):
            return self._error(
                ErrorCode.STORE_CLEAR_FAILED,
                f"Offline database clear failed: {error}",
                details={"error_type": type(error).__name__, "error": str(error)},
            )
        return super()._map_exception(error)
