"""
Схемы запросов для работы с новостями.

Изображение передаётся в поле image_data как base64 data URL
(``data:image/png;base64,...``) и загружается в хранилище сервисом.
"""

from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseRequestSchema, BaseUpdateRequestSchema


class NewsCreateRequestSchema(BaseRequestSchema):
    """
    Создание новости.

    Example:
        POST /api/v1/news
        {
            "title_en": "Open day",
            "content_en": "Come and meet our cows",
            "image_data": "data:image/png;base64,iVBORw0KGgo..."
        }
    """

    title_en: str = Field(..., min_length=1, max_length=255)
    title_ua: Optional[str] = Field(default=None, max_length=255)
    subtitle_en: Optional[str] = Field(default=None, max_length=255)
    subtitle_ua: Optional[str] = Field(default=None, max_length=255)
    content_en: str = Field(..., min_length=1)
    content_ua: Optional[str] = None
    image_data: Optional[str] = Field(
        default=None, description="Изображение как base64 data URL"
    )


class NewsUpdateRequestSchema(BaseUpdateRequestSchema):
    """
    Частичное обновление новости.

    image_data со значением заменяет изображение, null удаляет его,
    пустая строка оставляет прежнее.
    """

    required_fields = ("title_en", "content_en")

    title_en: Optional[str] = Field(default=None, min_length=1, max_length=255)
    title_ua: Optional[str] = Field(default=None, max_length=255)
    subtitle_en: Optional[str] = Field(default=None, max_length=255)
    subtitle_ua: Optional[str] = Field(default=None, max_length=255)
    content_en: Optional[str] = Field(default=None, min_length=1)
    content_ua: Optional[str] = None
    image_data: Optional[str] = Field(
        default=None, description="Новое изображение как base64 data URL"
    )
