"""
Глобальные обработчики исключений.

Преобразуют исключения приложения в единый формат ответа:

    {
        "success": false,
        "message": "<detail>",
        "data": null,
        "error": {"type": "<error_type>", "detail": "<detail>", "extra": {...}, "timestamp": "..."}
    }
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import (HTTP_400_BAD_REQUEST,
                              HTTP_500_INTERNAL_SERVER_ERROR)

from .base import BaseAPIException

logger = logging.getLogger("shelter.exceptions")


def build_error_response(
    status_code: int,
    detail: str,
    error_type: str,
    extra: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Формирует JSONResponse с ошибкой в едином формате.

    Args:
        status_code: HTTP статус.
        detail: Сообщение об ошибке.
        error_type: Тип ошибки.
        extra: Дополнительные данные.
        headers: Дополнительные заголовки ответа.

    Returns:
        JSONResponse: Ответ с ошибкой.
    """
    content = {
        "success": False,
        "message": detail,
        "data": None,
        "error": {
            "type": error_type,
            "detail": detail,
            "extra": extra or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content),
        headers=headers,
    )


async def api_exception_handler(request: Request, exc: BaseAPIException) -> JSONResponse:
    """Обработчик доменных исключений BaseAPIException."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "%s %s -> %d %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.error_type,
        exc.detail,
    )
    return build_error_response(
        status_code=exc.status_code,
        detail=str(exc.detail),
        error_type=exc.error_type,
        extra=exc.extra,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Ошибки валидации запроса возвращаются как 400."""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    detail = "; ".join(
        f"{'.'.join(error['loc'])}: {error['msg']}" for error in errors
    ) or "Некорректные данные запроса"
    logger.warning("%s %s -> 400 validation: %s", request.method, request.url.path, detail)
    return build_error_response(
        status_code=HTTP_400_BAD_REQUEST,
        detail=f"Некорректные данные запроса: {detail}",
        error_type="validation_error",
        extra={"errors": errors},
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Необработанные ошибки БД возвращаются как 500 с текстом исходной ошибки."""
    logger.error("%s %s -> 500 database: %s", request.method, request.url.path, exc)
    return build_error_response(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Ошибка базы данных: {exc}",
        error_type="database_error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Регистрирует обработчики исключений в приложении FastAPI.

    Args:
        app (FastAPI): Экземпляр приложения.
    """
    app.add_exception_handler(BaseAPIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
