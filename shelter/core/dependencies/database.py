"""
Зависимости для работы с базой данных в FastAPI.

Фабрика сессий создаётся в lifespan и хранится в app.state.session_factory.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shelter.core.exceptions.dependencies import ServiceUnavailableException

logger = logging.getLogger("shelter.dependencies.database")


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Зависимость для получения асинхронной сессии базы данных (одна на запрос).

    Yields:
        AsyncSession: Асинхронная сессия SQLAlchemy

    Raises:
        ServiceUnavailableException: Если подключение к БД не инициализировано.
    """
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        logger.error("Фабрика сессий БД не инициализирована")
        raise ServiceUnavailableException("Database")

    logger.debug("Создание сессии базы данных")
    async with session_factory() as session:
        yield session


# Типизированная зависимость
AsyncSessionDep = Annotated[AsyncSession, Depends(get_async_session)]
