"""
Инициализация подключения к базе данных при старте приложения.
"""

from fastapi import FastAPI

from shelter.core.connections.database import DatabaseClient
from shelter.core.lifespan.base import (register_shutdown_handler,
                                        register_startup_handler)
from shelter.core.settings import settings


@register_startup_handler
async def initialize_database(app: FastAPI):
    """
    Создаёт engine и фабрику сессий и сохраняет их в app.state.

    При AUTO_MIGRATE создаёт отсутствующие таблицы.
    """
    db_client = DatabaseClient(settings)
    app.state.session_factory = await db_client.connect()
    app.state.db_client = db_client

    if settings.AUTO_MIGRATE:
        await db_client.create_tables()


@register_shutdown_handler
async def close_database(app: FastAPI):
    db_client = getattr(app.state, "db_client", None)
    if db_client is not None:
        await db_client.close()
    app.state.session_factory = None
