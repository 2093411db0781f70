"""
Модель контактов приюта.

В отличие от остального контента контакты удаляются физически (без deleted_at).
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel


class ContactModel(BaseModel):
    """
    Модель контакта.

    Attributes:
        name: Имя / название контакта.
        email: Email (уникальный).
        phone: Телефон.
        image_url: URL изображения (необязательно).
    """

    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
