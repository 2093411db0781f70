"""
Сервис для проверки состояния приложения и его зависимостей.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.core.integrations.storages import AbstractStorageBackend
from shelter.repository.v1.health import HealthRepository
from shelter.services.base import BaseService

STATUS_UP = "UP"
STATUS_DEGRADED = "DEGRADED"
STATUS_NOT_CONFIGURED = "NOT CONFIGURED"


class HealthService(BaseService):
    """
    Сервис для проверки состояния приложения и его зависимостей.

    Attributes:
        repository (HealthRepository): Репозиторий для проверки состояния БД
        storage (Optional[AbstractStorageBackend]): Хранилище (None, если не инициализировано)

    Methods:
        check: Проверяет БД и хранилище
    """

    def __init__(
        self,
        session: AsyncSession,
        storage: Optional[AbstractStorageBackend] = None,
    ):
        super().__init__(session)
        self.repository = HealthRepository(session)
        self.storage = storage

    async def check(self) -> Dict[str, Any]:
        """
        Проверяет состояние зависимостей.

        Returns:
            Dict[str, Any]: status (UP/DEGRADED), timestamp, database, storage.
            Недоступная зависимость помечается как ``DOWN: <ошибка>``.
        """
        self.logger.debug("Checking application health")

        database = await self._check_database()
        storage = await self._check_storage()

        status = STATUS_UP
        if database != STATUS_UP or storage != STATUS_UP:
            status = STATUS_DEGRADED

        report = {
            "status": status,
            "timestamp": datetime.now(timezone.utc),
            "database": database,
            "storage": storage,
        }
        if status != STATUS_UP:
            self.logger.warning("Health check: %s", report)
        return report

    async def _check_database(self) -> str:
        try:
            if await self.repository.check_database_connection():
                return STATUS_UP
            return "DOWN: no rows returned"
        except Exception as exc:  # pylint: disable=broad-except
            self.logger.error("Database connection check failed: %s", exc)
            return f"DOWN: {exc}"

    async def _check_storage(self) -> str:
        if self.storage is None:
            return STATUS_NOT_CONFIGURED
        try:
            await self.storage.check_connection()
            return STATUS_UP
        except Exception as exc:  # pylint: disable=broad-except
            detail = getattr(exc, "detail", exc)
            self.logger.error("Storage connection check failed: %s", detail)
            return f"DOWN: {detail}"
