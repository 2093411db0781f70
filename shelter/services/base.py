"""
Базовые классы сервисов.

- BaseService: сессия, логгер и настройки
- ContentService: CRUD контента с загрузкой файлов в хранилище
"""

import logging
import math
import os
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shelter.core.exceptions import (ContentNotFoundError, DatabaseError,
                                     FileSizeExceededError,
                                     FileTypeValidationError,
                                     ServiceUnavailableException, StorageError)
from shelter.core.integrations.storages import (AbstractStorageBackend,
                                                parse_data_url)
from shelter.core.settings import settings
from shelter.models import BaseModel
from shelter.repository.base import BaseRepository

M = TypeVar("M", bound=BaseModel)

UploadValue = Union[str, UploadFile]


class SessionMixin:
    """
    Миксин для предоставления экземпляра сессии базы данных.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Инициализирует SessionMixin.

        Args:
            session (AsyncSession): Асинхронная сессия базы данных.
        """
        self.session = session


class BaseService(SessionMixin):
    """
    Базовый класс для сервисов приложения.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings


async def validate_upload_file(
    file: UploadFile,
    allowed_types: List[str],
    max_size: int,
    allowed_extensions: Optional[List[str]] = None,
) -> int:
    """
    Проверяет MIME тип, расширение имени и размер multipart файла.

    Args:
        file: Загружаемый файл.
        allowed_types: Разрешённые MIME типы.
        max_size: Максимальный размер в байтах.
        allowed_extensions: Разрешённые расширения имени файла (None - любые).

    Returns:
        int: Размер файла в байтах.

    Raises:
        FileTypeValidationError: Недопустимый тип или расширение.
        FileSizeExceededError: Превышен размер.
    """
    if file.content_type not in allowed_types:
        raise FileTypeValidationError(file.content_type, allowed_types)

    if allowed_extensions is not None:
        extension = os.path.splitext(file.filename or "")[1].lower()
        if extension not in allowed_extensions:
            raise FileTypeValidationError(extension or file.filename, allowed_extensions)

    size = file.size
    if size is None:
        size = len(await file.read())
        await file.seek(0)
    if size > max_size:
        raise FileSizeExceededError(size, max_size)
    return size


class ContentService(BaseService, Generic[M]):
    """
    Сервис CRUD операций над контентом сайта.

    Наследник задаёт repository_class и, если у ресурса есть файл,
    поля загрузки:
        upload_field: поле запроса с файлом (base64 data URL или UploadFile)
        url_field: колонка модели с URL файла
        folder: папка в бакете

    Порядок работы с файлами:
        - создание: файл загружается первым; если запись в БД не удалась,
          загруженный файл удаляется
        - обновление: новый файл загружается первым; при ошибке БД он удаляется,
          после успешного сохранения удаляется старый файл
        - удаление: сначала удаляется файл, затем запись

    Удаление файлов после ошибок выполняется по возможности и только логируется.
    """

    repository_class: ClassVar[type]
    resource_name: ClassVar[str] = "Запись"

    upload_field: ClassVar[Optional[str]] = None
    url_field: ClassVar[Optional[str]] = None
    folder: ClassVar[str] = ""

    def __init__(
        self,
        session: AsyncSession,
        storage: Optional[AbstractStorageBackend] = None,
    ):
        super().__init__(session)
        self.repository: BaseRepository[M] = self.repository_class(session)
        self._storage = storage

    @property
    def storage(self) -> AbstractStorageBackend:
        """
        Storage backend.

        Raises:
            ServiceUnavailableException: Если хранилище не инициализировано.
        """
        if self._storage is None:
            raise ServiceUnavailableException("storage")
        return self._storage

    # Чтение

    async def list_items(self) -> List[M]:
        return await self.repository.get_items()

    async def get_page(self, page: int, limit: int) -> Dict[str, Any]:
        """
        Страница записей.

        Args:
            page: Номер страницы (с 1).
            limit: Размер страницы.

        Returns:
            Dict: data, total, page, limit, total_pages. Страница за пределами
            списка возвращает пустой data.
        """
        offset = (page - 1) * limit
        total = await self.repository.count_items()
        items = await self.repository.get_items(limit=limit, offset=offset)
        return {
            "data": items,
            "total": total,
            "page": page,
            "limit": limit,
            "total_pages": math.ceil(total / limit) if limit else 0,
        }

    async def get_item(self, item_id: int) -> M:
        """
        Запись по ID.

        Raises:
            ContentNotFoundError: Запись не найдена или удалена.
        """
        item = await self.repository.get_item_by_id(item_id)
        if item is None:
            raise ContentNotFoundError(self.resource_name, item_id)
        return item

    # Проверки наследников

    async def before_create(self, values: Dict[str, Any]) -> None:
        """Проверки перед созданием записи (до загрузки файла)."""

    async def before_update(self, item: M, changes: Dict[str, Any]) -> None:
        """Проверки перед обновлением записи (до загрузки файла)."""

    # Запись

    async def create_item(self, values: Dict[str, Any]) -> M:
        """
        Создаёт запись, загружая файл из upload_field.

        Args:
            values: Поля запроса (включая upload_field, если он есть).

        Returns:
            M: Созданная запись.

        Raises:
            InvalidDataURLError, FileTypeValidationError, FileSizeExceededError:
                Некорректный файл (до обращения к хранилищу).
            StorageError: Ошибка загрузки.
            DatabaseError: Ошибка сохранения (загруженный файл удаляется).
        """
        values = dict(values)
        upload_value = values.pop(self.upload_field, None) if self.upload_field else None
        await self.before_create(values)

        new_url = None
        if upload_value:
            new_url = await self.store_upload(upload_value)
            values[self.url_field] = new_url

        try:
            item = await self.repository.create_item(values)
        except SQLAlchemyError as error:
            if new_url:
                await self.discard_file(new_url)
            raise DatabaseError(
                f"Не удалось сохранить запись: {error}",
                extra={"resource": self.resource_name},
            ) from error

        self.logger.info("%s создан(а): id=%s", self.resource_name, item.id)
        return item

    async def update_item(self, item_id: int, changes: Dict[str, Any]) -> M:
        """
        Частично обновляет запись.

        Args:
            item_id: ID записи.
            changes: Только переданные поля. Значение None в upload_field
                очищает файл, пустая строка оставляет его без изменений.

        Returns:
            M: Обновлённая запись.
        """
        item = await self.get_item(item_id)
        changes = dict(changes)

        replace_file = bool(self.upload_field) and self.upload_field in changes
        upload_value = changes.pop(self.upload_field, None) if self.upload_field else None
        # Пустая строка равна отсутствию поля: файл остаётся прежним
        if upload_value == "":
            replace_file = False
        old_url = getattr(item, self.url_field) if replace_file else None

        await self.before_update(item, changes)

        new_url = None
        if replace_file:
            if upload_value:
                new_url = await self.store_upload(upload_value)
            changes[self.url_field] = new_url

        try:
            updated = await self.repository.update_item(item_id, changes)
        except SQLAlchemyError as error:
            if new_url:
                await self.discard_file(new_url)
            raise DatabaseError(
                f"Не удалось обновить запись: {error}",
                extra={"resource": self.resource_name, "id": item_id},
            ) from error

        if updated is None:
            if new_url:
                await self.discard_file(new_url)
            raise ContentNotFoundError(self.resource_name, item_id)

        if replace_file and old_url and old_url != new_url:
            await self.discard_file(old_url)

        self.logger.info("%s обновлен(а): id=%s", self.resource_name, item_id)
        return updated

    async def delete_item(self, item_id: int) -> None:
        """
        Удаляет файл записи (если есть), затем саму запись.

        Raises:
            ContentNotFoundError: Запись не найдена.
        """
        item = await self.get_item(item_id)

        if self.url_field:
            url = getattr(item, self.url_field)
            if url:
                await self.discard_file(url)

        if not await self.repository.delete_item(item_id):
            raise ContentNotFoundError(self.resource_name, item_id)
        self.logger.info("%s удален(а): id=%s", self.resource_name, item_id)

    # Файлы

    async def store_upload(self, value: UploadValue) -> str:
        """
        Проверяет и загружает файл в хранилище.

        Args:
            value: base64 data URL или multipart файл.

        Returns:
            str: Публичный URL файла.
        """
        if isinstance(value, str):
            content_type, data = parse_data_url(value)
            if not content_type.startswith("image/"):
                raise FileTypeValidationError(content_type, ["image/*"])
            if len(data) > self.settings.UPLOAD_MAX_FILE_SIZE:
                raise FileSizeExceededError(len(data), self.settings.UPLOAD_MAX_FILE_SIZE)
            return await self.storage.upload_base64(value, self.folder)

        allowed_types, max_size = self.file_constraints()
        await validate_upload_file(value, allowed_types, max_size)
        return await self.storage.upload_file(value, self.folder)

    def file_constraints(self) -> Tuple[List[str], int]:
        """Разрешённые MIME типы и максимальный размер multipart файлов."""
        return (
            self.settings.UPLOAD_ALLOWED_IMAGE_TYPES,
            self.settings.UPLOAD_MAX_FILE_SIZE,
        )

    async def discard_file(self, url: str) -> None:
        """Удаляет файл из хранилища; ошибки только логируются."""
        if self._storage is None:
            self.logger.warning("Хранилище недоступно, файл %s не удалён", url)
            return
        try:
            await self._storage.delete_file(url)
        except StorageError as error:
            self.logger.warning("Не удалось удалить файл %s: %s", url, error.detail)
