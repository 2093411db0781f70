"""
Зависимости объектного хранилища.

Storage backend создаётся один раз в lifespan (app.state.storage). Если
инициализация не удалась, там хранится None: операции без файлов продолжают
работать, а загрузка возвращает 503.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from shelter.core.exceptions.dependencies import ServiceUnavailableException
from shelter.core.integrations.storages import AbstractStorageBackend

logger = logging.getLogger("shelter.dependencies.storage")


async def get_optional_storage(request: Request) -> Optional[AbstractStorageBackend]:
    """Storage backend приложения или None."""
    return getattr(request.app.state, "storage", None)


async def get_storage(
    storage: Optional[AbstractStorageBackend] = Depends(get_optional_storage),
) -> AbstractStorageBackend:
    """
    Storage backend приложения.

    Raises:
        ServiceUnavailableException: Если хранилище не инициализировано.
    """
    if storage is None:
        logger.error("Хранилище не инициализировано")
        raise ServiceUnavailableException("Storage")
    return storage


# Типизированные зависимости (для использования в роутерах и провайдерах)
OptionalStorageDep = Annotated[
    Optional[AbstractStorageBackend], Depends(get_optional_storage)
]
StorageDep = Annotated[AbstractStorageBackend, Depends(get_storage)]
