"""
Зависимости для служебных сервисов: аутентификация, health check, загрузка изображений.
"""

from typing import Annotated

from fastapi import Depends

from shelter.core.dependencies.database import AsyncSessionDep
from shelter.core.dependencies.storage import OptionalStorageDep
from shelter.services.v1 import AuthService, HealthService, UploadService


async def get_auth_service(session: AsyncSessionDep) -> AuthService:
    return AuthService(session)


async def get_health_service(
    session: AsyncSessionDep, storage: OptionalStorageDep
) -> HealthService:
    """
    Провайдер HealthService.

    Хранилище передаётся как есть (None, если не инициализировано), чтобы
    health check сообщал NOT CONFIGURED вместо ошибки 503.
    """
    return HealthService(session, storage)


async def get_upload_service(storage: OptionalStorageDep) -> UploadService:
    return UploadService(storage)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]
UploadServiceDep = Annotated[UploadService, Depends(get_upload_service)]
