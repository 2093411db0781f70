"""
Базовое исключение API.

Все доменные исключения приложения наследуются от BaseAPIException и
преобразуются в единый JSON-ответ глобальным обработчиком (см. handlers.py).
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class BaseAPIException(HTTPException):
    """
    Базовое исключение для всех ошибок API.

    Attributes:
        status_code (int): HTTP статус ответа.
        detail (str): Человекочитаемое сообщение об ошибке.
        error_type (str): Машиночитаемый тип ошибки.
        extra (Dict): Дополнительные данные для клиента.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_type: str,
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_type = error_type
        self.extra = extra or {}
