"""
Схемы запросов для работы с партнёрами.

Логотип передаётся в поле logo_data как base64 data URL.
"""

from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseRequestSchema, BaseUpdateRequestSchema


class PartnerCreateRequestSchema(BaseRequestSchema):
    """
    Создание партнёра.

    Example:
        POST /api/v1/partners
        {
            "name": "Green Farm",
            "link": "https://greenfarm.example",
            "logo_data": "data:image/svg+xml;base64,PHN2Zy..."
        }
    """

    name: str = Field(..., min_length=1, max_length=255)
    link: Optional[str] = None
    logo_data: str = Field(..., min_length=1, description="Логотип как base64 data URL")


class PartnerUpdateRequestSchema(BaseUpdateRequestSchema):
    """Частичное обновление партнёра."""

    required_fields = ("name", "logo_data")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    link: Optional[str] = None
    logo_data: Optional[str] = Field(default=None, min_length=1)
