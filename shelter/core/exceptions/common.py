"""
Общие исключения API по HTTP статусам.

Доменные исключения (контент, пользователи, файлы) наследуются от них и
задают свой error_type, поэтому клиент может обрабатывать как статус,
так и конкретный тип ошибки.
"""

from typing import Any, Dict, Optional

from starlette.status import (HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND,
                              HTTP_409_CONFLICT,
                              HTTP_500_INTERNAL_SERVER_ERROR)

from shelter.core.exceptions.base import BaseAPIException


class BadRequestError(BaseAPIException):
    """
    Некорректные данные запроса (400).

    Attributes:
        error_type (str): По умолчанию "bad_request".
    """

    def __init__(
        self,
        detail: str = "Некорректный запрос",
        error_type: str = "bad_request",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_400_BAD_REQUEST,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class NotFoundError(BaseAPIException):
    """Запись не найдена (404)."""

    def __init__(
        self,
        detail: str = "Ресурс не найден",
        error_type: str = "not_found",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_404_NOT_FOUND,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class ConflictError(BaseAPIException):
    """
    Конфликт с существующими данными (409), например занятый уникальный email.
    """

    def __init__(
        self,
        detail: str = "Конфликт данных",
        error_type: str = "conflict",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_409_CONFLICT,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class DatabaseError(BaseAPIException):
    """
    Запись в БД не удалась (500). Текст исходной ошибки передаётся в detail.
    """

    def __init__(
        self,
        detail: str = "Ошибка базы данных",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_type="database_error",
            extra=extra,
        )
