"""
Инициализация объектного хранилища при старте приложения.

Ошибка инициализации не останавливает приложение: app.state.storage
остаётся None, health check показывает NOT CONFIGURED, загрузка файлов
возвращает 503.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI

from shelter.core.connections.storage import S3ContextManager
from shelter.core.exceptions import StorageError
from shelter.core.integrations.storages import create_storage_backend
from shelter.core.lifespan.base import (register_shutdown_handler,
                                        register_startup_handler)
from shelter.core.settings import settings

logger = logging.getLogger("shelter.lifespan.storage")


@register_startup_handler
async def initialize_storage(app: FastAPI):
    app.state.storage = None
    app.state.storage_context = None

    context = S3ContextManager(settings)
    try:
        client = await context.__aenter__()
    except (ClientError, BotoCoreError, ValueError) as e:
        logger.error("Не удалось создать клиент хранилища: %s", e)
        return

    try:
        storage = create_storage_backend(settings, client)
        await storage.startup()
    except (StorageError, ValueError) as e:
        logger.error(
            "Хранилище %s не инициализировано: %s",
            settings.storage_type,
            getattr(e, "detail", e),
        )
        await context.__aexit__(None, None, None)
        return

    app.state.storage = storage
    app.state.storage_context = context
    logger.info("Хранилище %s готово", settings.storage_type)


@register_shutdown_handler
async def close_storage(app: FastAPI):
    storage = getattr(app.state, "storage", None)
    if storage is not None:
        await storage.close()
    context = getattr(app.state, "storage_context", None)
    if context is not None:
        await context.__aexit__(None, None, None)
    app.state.storage = None
    app.state.storage_context = None
