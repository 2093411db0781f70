"""
Управление жизненным циклом приложения.

Обработчики старта и остановки регистрируются декораторами и выполняются
в lifespan FastAPI в порядке регистрации (остановка в обратном порядке).
"""

import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, List

from fastapi import FastAPI

logger = logging.getLogger("shelter.lifespan")

Handler = Callable[[FastAPI], Awaitable[None]]

startup_handlers: List[Handler] = []
shutdown_handlers: List[Handler] = []


def register_startup_handler(handler: Handler) -> Handler:
    startup_handlers.append(handler)
    return handler


def register_shutdown_handler(handler: Handler) -> Handler:
    shutdown_handlers.append(handler)
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan приложения: запускает обработчики старта и остановки.

    Args:
        app (FastAPI): Экземпляр приложения.
    """
    logger.info("Запуск приложения...")
    for handler in startup_handlers:
        logger.debug("Startup: %s", handler.__name__)
        await handler(app)
    logger.info("Приложение запущено")

    yield

    logger.info("Остановка приложения...")
    for handler in reversed(shutdown_handlers):
        logger.debug("Shutdown: %s", handler.__name__)
        await handler(app)
    logger.info("Приложение остановлено")
