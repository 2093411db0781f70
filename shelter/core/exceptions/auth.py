"""
Исключения аутентификации и работы с пользователями.
"""

from typing import Any, Dict, Optional

from starlette.status import HTTP_401_UNAUTHORIZED

from .base import BaseAPIException
from .common import ConflictError, NotFoundError


class AuthenticationError(BaseAPIException):
    """Базовая ошибка аутентификации (401)."""

    def __init__(
        self,
        detail: str = "Ошибка аутентификации",
        error_type: str = "authentication_error",
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )
        self.headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentialsError(AuthenticationError):
    """Неверный email или пароль."""

    def __init__(self):
        super().__init__(
            detail="Неверный email или пароль",
            error_type="invalid_credentials",
        )


class TokenError(AuthenticationError):
    """Базовая ошибка токена."""


class TokenMissingError(TokenError):
    """Токен не передан."""

    def __init__(self):
        super().__init__(detail="Токен отсутствует", error_type="token_missing")


class TokenExpiredError(TokenError):
    """Срок действия токена истёк."""

    def __init__(self):
        super().__init__(detail="Срок действия токена истек", error_type="token_expired")


class TokenInvalidError(TokenError):
    """Токен невалиден."""

    def __init__(self):
        super().__init__(detail="Невалидный токен", error_type="token_invalid")


class UserNotFoundError(NotFoundError):
    """Пользователь не найден."""

    def __init__(self, field: str = "id", value: Any = None):
        super().__init__(
            detail="Пользователь не найден",
            error_type="user_not_found",
            extra={"field": field, "value": value},
        )


class UserExistsError(ConflictError):
    """Пользователь с таким email уже существует."""

    def __init__(self, email: str):
        super().__init__(
            detail=f"Пользователь с email {email} уже существует",
            error_type="user_exists",
            extra={"email": email},
        )
