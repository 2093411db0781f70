"""
Сервис загрузки произвольных изображений (POST /upload-image).
"""

import logging
from typing import Optional

from fastapi import UploadFile

from shelter.core.exceptions import ServiceUnavailableException
from shelter.core.integrations.storages import AbstractStorageBackend
from shelter.core.settings import settings
from shelter.services.base import validate_upload_file


class UploadService:
    """
    Загрузка изображений в папку uploads.

    Attributes:
        storage: Storage backend (None, если хранилище не инициализировано).
    """

    folder = "uploads"

    def __init__(self, storage: Optional[AbstractStorageBackend]):
        self.storage = storage
        self.settings = settings
        self.logger = logging.getLogger(self.__class__.__name__)

    async def upload_image(self, file: UploadFile) -> str:
        """
        Проверяет тип и размер изображения и загружает его.

        Args:
            file: Изображение JPEG/PNG/GIF/WebP.

        Returns:
            str: Публичный URL изображения.

        Raises:
            FileTypeValidationError: Недопустимый тип или расширение имени.
            FileSizeExceededError: Превышен UPLOAD_MAX_FILE_SIZE.
            ServiceUnavailableException: Хранилище не инициализировано.
            StorageError: Ошибка загрузки.
        """
        size = await validate_upload_file(
            file,
            self.settings.UPLOAD_ALLOWED_IMAGE_TYPES,
            self.settings.UPLOAD_MAX_FILE_SIZE,
            allowed_extensions=self.settings.UPLOAD_ALLOWED_IMAGE_EXTENSIONS,
        )
        if self.storage is None:
            raise ServiceUnavailableException("storage")

        url = await self.storage.upload_file(file, self.folder)
        self.logger.info("Изображение %s загружено (%d байт): %s", file.filename, size, url)
        return url
