"""
Проверка доступности базы данных.
"""

import logging

from sqlalchemy import text

from shelter.repository.base import SessionMixin

logger = logging.getLogger(__name__)


class HealthRepository(SessionMixin):
    """Запросы для health check."""

    async def check_database_connection(self) -> bool:
        """
        Выполняет ``SELECT 1``.

        Raises:
            SQLAlchemyError: БД недоступна; обрабатывает HealthService.
        """
        row = (await self.session.execute(text("SELECT 1"))).fetchone()
        if row is None:
            logger.warning("SELECT 1 не вернул строк")
            return False
        return True
