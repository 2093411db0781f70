"""
Подключение к реляционной базе данных.

Engine и фабрика сессий создаются один раз в lifespan приложения и хранятся
в app.state (см. shelter.core.lifespan). Для CLI используется
DatabaseContextManager, который создаёт и закрывает engine самостоятельно.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from shelter.core.settings import Settings, settings
from shelter.models import BaseModel

from .base import BaseClient, BaseContextManager


class DatabaseClient(BaseClient):
    """
    Клиент базы данных: создаёт AsyncEngine и фабрику сессий.

    Attributes:
        settings (Settings): Настройки приложения.
        engine (Optional[AsyncEngine]): Асинхронный engine SQLAlchemy.
        session_factory (Optional[async_sessionmaker]): Фабрика сессий.
    """

    def __init__(self, settings: Settings = settings) -> None:
        super().__init__()
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def connect(self) -> async_sessionmaker[AsyncSession]:
        """
        Создаёт engine и фабрику сессий.

        Returns:
            async_sessionmaker: Фабрика асинхронных сессий.
        """
        self.logger.debug("Создание engine базы данных...")
        self.engine = create_async_engine(
            self.settings.database_url, **self.settings.engine_params
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine, **self.settings.session_params
        )
        self.logger.info("Подключение к базе данных создано")
        return self.session_factory

    async def create_tables(self) -> None:
        """Создаёт все таблицы моделей (идемпотентно)."""
        if self.engine is None:
            await self.connect()
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)
        self.logger.info("Схема базы данных актуализирована")

    async def close(self) -> None:
        if self.engine is not None:
            self.logger.debug("Закрытие подключения к базе данных...")
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            self.logger.info("Подключение к базе данных закрыто")


class DatabaseContextManager(BaseContextManager):
    """
    Контекстный менеджер сессии БД для использования вне HTTP запросов.

    Example:
        async with DatabaseContextManager() as session:
            await UserRepository(session).get_item_by_id(1)
    """

    def __init__(self, settings: Settings = settings) -> None:
        super().__init__()
        self.db_client = DatabaseClient(settings)
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> AsyncSession:
        session_factory = await self.db_client.connect()
        self.session = session_factory()
        return self.session

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.session is not None:
            if exc_type is not None:
                await self.session.rollback()
            await self.session.close()
        await self.db_client.close()
