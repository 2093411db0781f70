"""
Исключения для работы с объектным хранилищем (S3/MinIO) и загрузкой файлов.
"""

from typing import Any, Dict, List, Optional

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from .base import BaseAPIException
from .common import BadRequestError


class StorageError(BaseAPIException):
    """
    Ошибка backend'а хранилища (недоступен, отказ в доступе, сбой запроса).

    Сообщение исходной ошибки передаётся клиенту в detail.
    """

    def __init__(
        self,
        detail: str = "Ошибка объектного хранилища",
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_type="storage_error",
            extra=extra,
        )


class InvalidDataURLError(BadRequestError):
    """
    Некорректный data URL (ожидается data:<mime>;base64,<payload>).

    Выбрасывается до любого обращения к хранилищу.
    """

    def __init__(self, detail: str = "Некорректный формат base64 data URL"):
        super().__init__(detail=detail, error_type="invalid_data_url")


class FileTypeValidationError(BadRequestError):
    """Недопустимый MIME тип загружаемого файла."""

    def __init__(self, content_type: Optional[str], allowed: List[str]):
        super().__init__(
            detail=(
                f"Недопустимый тип файла '{content_type}'. "
                f"Разрешены: {', '.join(allowed)}"
            ),
            error_type="file_type_validation_error",
            extra={"content_type": content_type, "allowed": allowed},
        )


class FileSizeExceededError(BadRequestError):
    """Размер загружаемого файла превышает лимит."""

    def __init__(self, file_size: int, max_size: int):
        super().__init__(
            detail=f"Размер файла {file_size} байт превышает лимит {max_size} байт",
            error_type="file_size_exceeded",
            extra={"file_size": file_size, "max_size": max_size},
        )
