"""
Схемы запросов аутентификации.
"""

from pydantic import EmailStr, Field

from shelter.core.settings import settings
from shelter.schemas.base import BaseRequestSchema


class RegistrationRequestSchema(BaseRequestSchema):
    """
    Регистрация пользователя.

    Example:
        POST /api/v1/user
        {"email": "admin@cows-shelter.org", "password": "secret123"}
    """

    email: EmailStr
    password: str = Field(..., min_length=settings.PASSWORD_MIN_LENGTH, max_length=128)


class LoginRequestSchema(BaseRequestSchema):
    """Вход по email и паролю."""

    email: EmailStr
    password: str = Field(..., min_length=1)
