"""
Модуль интеграции с хранилищами (S3/MinIO).

Предоставляет классы для работы с файловым хранилищем:
- AbstractStorageBackend: Абстрактный интерфейс storage backend
- BaseS3Storage: Базовая реализация для S3-совместимых хранилищ
- S3Storage, MinioStorage: Реализации для AWS S3 и MinIO
- create_storage_backend: Выбор реализации по настройкам
"""

from .base import (AbstractStorageBackend, BaseS3Storage, ObjectInfo,
                   extension_from_content_type, generate_object_key,
                   parse_data_url)
from .factory import create_storage_backend
from .minio import MinioStorage
from .s3 import S3Storage

__all__ = [
    "AbstractStorageBackend",
    "BaseS3Storage",
    "ObjectInfo",
    "S3Storage",
    "MinioStorage",
    "create_storage_backend",
    "parse_data_url",
    "generate_object_key",
    "extension_from_content_type",
]
