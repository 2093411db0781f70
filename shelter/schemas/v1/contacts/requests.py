"""
Схемы запросов для работы с контактами.
"""

from typing import Optional

from pydantic import EmailStr, Field

from shelter.schemas.base import BaseRequestSchema, BaseUpdateRequestSchema


class ContactCreateRequestSchema(BaseRequestSchema):
    """
    Создание контакта. Email должен быть уникальным.

    Example:
        POST /api/v1/contacts
        {
            "name": "Shelter office",
            "email": "office@cows-shelter.org",
            "phone": "+380501234567"
        }
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    image_url: Optional[str] = None


class ContactUpdateRequestSchema(BaseUpdateRequestSchema):
    """Частичное обновление контакта."""

    required_fields = ("name", "email", "phone")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=1, max_length=50)
    image_url: Optional[str] = None
