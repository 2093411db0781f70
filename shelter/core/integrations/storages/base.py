"""
Базовый модуль для работы с объектным хранилищем.

Предоставляет абстрактный класс AbstractStorageBackend и базовую реализацию
BaseS3Storage для S3-совместимых хранилищ (AWS S3, MinIO), а также
вспомогательные функции разбора base64 data URL и генерации ключей объектов.
"""

import base64
import binascii
import logging
import os
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from shelter.core.exceptions import InvalidDataURLError, StorageError

MAX_LIST_KEYS = 1000


@dataclass
class ObjectInfo:
    """
    Информация об объекте в хранилище.

    Attributes:
        key: Ключ объекта в бакете.
        size: Размер в байтах.
        last_modified: Время последнего изменения.
        content_type: MIME тип (list_objects_v2 его не возвращает, поэтому может быть None).
    """

    key: str
    size: int
    last_modified: Optional[datetime] = None
    content_type: Optional[str] = None


def parse_data_url(data_url: str) -> Tuple[str, bytes]:
    """
    Разбирает base64 data URL вида ``data:<mime>;base64,<payload>``.

    Args:
        data_url: Строка data URL.

    Returns:
        Tuple[str, bytes]: (content_type, декодированные данные)

    Raises:
        InvalidDataURLError: Если строка не является корректным base64 data URL.
    """
    header, separator, payload = (data_url or "").partition(",")
    if not separator:
        raise InvalidDataURLError("Некорректный data URL: отсутствует разделитель ','")
    if not header.startswith("data:") or ";base64" not in header:
        raise InvalidDataURLError(
            "Некорректный data URL: ожидается формат data:<mime>;base64,<data>"
        )

    content_type = header.removeprefix("data:").split(";", 1)[0].strip()
    if not content_type or "/" not in content_type:
        raise InvalidDataURLError("Некорректный data URL: не указан MIME тип")

    try:
        data = base64.b64decode(payload.strip(), validate=True)
    except (binascii.Error, ValueError) as error:
        raise InvalidDataURLError(
            f"Некорректный data URL: не удалось декодировать base64 ({error})"
        ) from error

    if not data:
        raise InvalidDataURLError("Некорректный data URL: пустые данные")

    return content_type, data


def extension_from_content_type(content_type: str) -> str:
    """
    Расширение файла по MIME типу: ``image/png`` -> ``.png``, ``image/svg+xml`` -> ``.svg``.
    """
    subtype = content_type.split("/", 1)[-1]
    subtype = subtype.split("+", 1)[0].split(";", 1)[0].strip().lower()
    return f".{subtype}" if subtype else ""


def generate_object_key(folder: str, extension: str) -> str:
    """
    Генерирует уникальный ключ объекта ``<folder>/<uuid4><ext>``.

    Args:
        folder: Папка в бакете (может быть пустой).
        extension: Расширение с точкой.

    Returns:
        str: Ключ объекта.
    """
    filename = f"{uuid.uuid4()}{extension}"
    folder = (folder or "").strip("/")
    return f"{folder}/{filename}" if folder else filename


class AbstractStorageBackend(ABC):
    """
    Абстрактный интерфейс для работы с хранилищем файлов.

    Определяет контракт для реализаций storage backend'ов (S3, MinIO).
    """

    @abstractmethod
    async def upload_file(self, file: UploadFile, folder: str) -> str:
        """
        Загружает multipart файл в хранилище.

        Args:
            file: Загружаемый файл
            folder: Папка в бакете

        Returns:
            str: Публичный URL загруженного файла
        """

    @abstractmethod
    async def upload_base64(self, data_url: str, folder: str) -> str:
        """
        Загружает файл из base64 data URL.

        Args:
            data_url: Строка вида ``data:<mime>;base64,<data>``
            folder: Папка в бакете

        Returns:
            str: Публичный URL загруженного файла
        """

    @abstractmethod
    async def delete_file(self, key_or_url: str) -> None:
        """
        Удаляет объект по ключу или по полному URL.
        """

    @abstractmethod
    def get_object_url(self, key: str) -> str:
        """Публичный URL объекта."""

    @abstractmethod
    def extract_object_key(self, url: str) -> str:
        """Ключ объекта из публичного URL (обратная операция к get_object_url)."""

    @abstractmethod
    async def list_objects(
        self, prefix: str = "", max_keys: int = MAX_LIST_KEYS
    ) -> List[ObjectInfo]:
        """Список объектов с указанным префиксом."""

    @abstractmethod
    async def check_connection(self) -> None:
        """
        Проверяет доступность хранилища.

        Raises:
            StorageError: Если хранилище недоступно.
        """

    async def startup(self) -> None:
        """Подготовка хранилища при старте приложения."""

    async def close(self) -> None:
        """Освобождение ресурсов при остановке приложения."""


class BaseS3Storage(AbstractStorageBackend):
    """
    Базовая реализация работы с S3-совместимым хранилищем поверх aioboto3.

    Наследники определяют только построение URL (_build_object_url) и
    подготовку бакета (startup).

    Attributes:
        _client: Клиент S3 (aioboto3)
        bucket_name: Название бакета
        public_url: Публичный базовый URL (CDN), имеет приоритет при построении ссылок
        use_ssl: Использовать https в ссылках
        endpoint: Endpoint без схемы для path стиля (задают наследники)
        logger: Логгер для класса
    """

    def __init__(
        self,
        s3_client: Any,
        bucket_name: str,
        public_url: Optional[str] = None,
        use_ssl: bool = True,
    ):
        self._client = s3_client
        self.bucket_name = bucket_name
        self.public_url = public_url.rstrip("/") if public_url else None
        self.use_ssl = use_ssl
        self.endpoint: Optional[str] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def scheme(self) -> str:
        return "https://" if self.use_ssl else "http://"

    async def _put_object(self, key: str, body: bytes, content_type: Optional[str]) -> str:
        """
        Записывает объект в бакет и возвращает его публичный URL.

        Raises:
            StorageError: При ошибке хранилища.
        """
        params = {
            "Bucket": self.bucket_name,
            "Key": key,
            "Body": body,
            "CacheControl": "max-age=31536000",
        }
        if content_type:
            params["ContentType"] = content_type

        try:
            await self._client.put_object(**params)
        except (ClientError, BotoCoreError) as error:
            self.logger.error(
                "Ошибка при загрузке объекта %s в бакет %s: %s",
                key,
                self.bucket_name,
                error,
            )
            raise StorageError(
                f"Ошибка при загрузке файла: {error}",
                extra={"key": key, "bucket": self.bucket_name},
            ) from error

        url = self.get_object_url(key)
        self.logger.info("Объект %s загружен (%d байт)", key, len(body))
        return url

    async def upload_file(self, file: UploadFile, folder: str) -> str:
        _, extension = os.path.splitext(file.filename or "")
        key = generate_object_key(folder, extension.lower())
        content = await file.read()
        self.logger.debug(
            "Загрузка файла %s (%s) как %s", file.filename, file.content_type, key
        )
        return await self._put_object(key, content, file.content_type)

    async def upload_base64(self, data_url: str, folder: str) -> str:
        content_type, data = parse_data_url(data_url)
        key = generate_object_key(folder, extension_from_content_type(content_type))
        return await self._put_object(key, data, content_type)

    async def delete_file(self, key_or_url: str) -> None:
        """
        Удаляет объект из бакета.

        Args:
            key_or_url: Ключ объекта или его публичный URL

        Raises:
            StorageError: При ошибке хранилища.
        """
        key = self.extract_object_key(key_or_url)
        try:
            await self._client.delete_object(Bucket=self.bucket_name, Key=key)
        except (ClientError, BotoCoreError) as error:
            self.logger.error("Ошибка при удалении объекта %s: %s", key, error)
            raise StorageError(
                f"Ошибка при удалении файла: {error}",
                extra={"key": key, "bucket": self.bucket_name},
            ) from error
        self.logger.info("Объект %s удален из бакета %s", key, self.bucket_name)

    def get_object_url(self, key: str) -> str:
        if key.startswith("http"):
            return key
        key = key.lstrip("/")
        if self.public_url:
            return f"{self.public_url}/{key}"
        return self._build_object_url(key)

    @abstractmethod
    def _build_object_url(self, key: str) -> str:
        """URL объекта без учёта публичного базового URL."""

    def extract_object_key(self, url: str) -> str:
        """
        Извлекает ключ объекта из URL.

        Поддерживаются публичный базовый URL, virtual-hosted стиль
        (``<bucket>.s3.<region>.amazonaws.com/<key>``) и path стиль
        (``<endpoint>/<bucket>/<key>``, только для настроенного endpoint).
        Строка без ``://`` уже является ключом. URL, не подходящий ни под
        один шаблон, возвращается без изменений.
        """
        if "://" not in url:
            return url

        if self.public_url and url.startswith(f"{self.public_url}/"):
            return url[len(self.public_url) + 1 :]

        host, _, path = url.split("://", 1)[1].partition("/")
        if host.startswith(f"{self.bucket_name}.s3.") and path:
            return path

        bucket_prefix = f"{self.bucket_name}/"
        if self.endpoint and host == self.endpoint and path.startswith(bucket_prefix):
            return path[len(bucket_prefix) :]

        return url

    async def list_objects(
        self, prefix: str = "", max_keys: int = MAX_LIST_KEYS
    ) -> List[ObjectInfo]:
        max_keys = min(max(max_keys, 1), MAX_LIST_KEYS)
        try:
            response = await self._client.list_objects_v2(
                Bucket=self.bucket_name, Prefix=prefix, MaxKeys=max_keys
            )
        except (ClientError, BotoCoreError) as error:
            self.logger.error("Ошибка при получении списка объектов: %s", error)
            raise StorageError(f"Ошибка при получении списка файлов: {error}") from error

        return [
            ObjectInfo(
                key=item["Key"],
                size=item.get("Size", 0),
                last_modified=item.get("LastModified"),
            )
            for item in response.get("Contents", [])
        ]

    async def bucket_exists(self) -> bool:
        """
        Проверяет существование бакета.

        Raises:
            StorageError: При ошибке, отличной от отсутствия бакета.
        """
        try:
            await self._client.head_bucket(Bucket=self.bucket_name)
            return True
        except ClientError as error:
            if error.response.get("Error", {}).get("Code") in ("404", "NoSuchBucket"):
                return False
            self.logger.error("Ошибка при проверке наличия бакета: %s", error)
            raise StorageError(f"Ошибка при проверке бакета: {error}") from error
        except BotoCoreError as error:
            self.logger.error("Хранилище недоступно: %s", error)
            raise StorageError(f"Хранилище недоступно: {error}") from error

    async def check_connection(self) -> None:
        if not await self.bucket_exists():
            raise StorageError(f"Бакет {self.bucket_name} не найден")
