"""
Модели пользователей и токенов сброса пароля.
"""

import enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class UserRole(str, enum.Enum):
    """Роль пользователя."""

    ADMIN = "admin"
    USER = "user"


class UserModel(SoftDeleteMixin, BaseModel):
    """
    Модель пользователя административной панели.

    Attributes:
        email (str): Email для входа (уникальный).
        password_hash (str): Argon2 хеш пароля.
        role (str): Роль пользователя ("admin" или "user").
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.USER.value
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


class PasswordResetModel(SoftDeleteMixin, BaseModel):
    """
    Токен сброса пароля.

    Attributes:
        email (str): Email пользователя, запросившего сброс.
        token (str): Уникальный одноразовый токен.
    """

    __tablename__ = "password_resets"

    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
