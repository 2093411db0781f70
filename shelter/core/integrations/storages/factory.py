"""
Фабрика storage backend'ов.

Единственное место, где выбирается реализация хранилища по настройкам.
"""

import logging
from typing import Any

from shelter.core.settings import Settings

from .base import AbstractStorageBackend
from .minio import MinioStorage
from .s3 import S3Storage

logger = logging.getLogger(__name__)


def create_storage_backend(settings: Settings, s3_client: Any) -> AbstractStorageBackend:
    """
    Создаёт storage backend по STORAGE_TYPE.

    Args:
        settings: Настройки приложения.
        s3_client: Активный клиент aioboto3 (см. S3ContextManager).

    Returns:
        AbstractStorageBackend: S3Storage или MinioStorage.

    Raises:
        ValueError: При неизвестном типе хранилища.
    """
    storage_type = settings.storage_type
    logger.info(
        "Инициализация хранилища %s (бакет %s)", storage_type, settings.storage_bucket
    )

    if storage_type == "minio":
        return MinioStorage(
            s3_client,
            bucket_name=settings.storage_bucket,
            endpoint=settings.minio_endpoint,
            public_url=settings.STORAGE_PUBLIC_URL,
            use_ssl=settings.storage_use_ssl,
        )
    if storage_type == "s3":
        return S3Storage(
            s3_client,
            bucket_name=settings.storage_bucket,
            region=settings.AWS_REGION,
            endpoint=settings.s3_endpoint,
            public_url=settings.STORAGE_PUBLIC_URL,
            use_ssl=settings.storage_use_ssl,
        )
    raise ValueError(f"Неизвестный тип хранилища: {storage_type}")
