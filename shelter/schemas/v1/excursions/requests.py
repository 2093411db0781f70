"""
Схемы запросов для работы с экскурсиями.
"""

from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseRequestSchema, BaseUpdateRequestSchema


class ExcursionCreateRequestSchema(BaseRequestSchema):
    """
    Создание экскурсии.

    Example:
        POST /api/v1/excursions
        {
            "title_en": "Farm tour",
            "description_en": "Walk around the shelter",
            "time_from": "10:00",
            "time_to": "12:00",
            "amount_of_persons": "10",
            "image_data": "data:image/jpeg;base64,/9j/4AAQ..."
        }
    """

    title_en: str = Field(..., min_length=1, max_length=255)
    title_ua: Optional[str] = Field(default=None, max_length=255)
    description_en: str = Field(..., min_length=1)
    description_ua: Optional[str] = None
    time_from: str = Field(..., min_length=1, max_length=50)
    time_to: str = Field(..., min_length=1, max_length=50)
    amount_of_persons: str = Field(..., min_length=1, max_length=50)
    image_data: Optional[str] = Field(
        default=None, description="Изображение как base64 data URL"
    )


class ExcursionUpdateRequestSchema(BaseUpdateRequestSchema):
    """Частичное обновление экскурсии."""

    required_fields = (
        "title_en",
        "description_en",
        "time_from",
        "time_to",
        "amount_of_persons",
    )

    title_en: Optional[str] = Field(default=None, min_length=1, max_length=255)
    title_ua: Optional[str] = Field(default=None, max_length=255)
    description_en: Optional[str] = Field(default=None, min_length=1)
    description_ua: Optional[str] = None
    time_from: Optional[str] = Field(default=None, min_length=1, max_length=50)
    time_to: Optional[str] = Field(default=None, min_length=1, max_length=50)
    amount_of_persons: Optional[str] = Field(default=None, min_length=1, max_length=50)
    image_data: Optional[str] = None
