"""
Базовые схемы новостей.

Схемы:
    - NewsSchema: Новость в ответах API
"""

from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseSchema


class NewsSchema(BaseSchema):
    """
    Новость в ответах API.

    Attributes:
        title_en / title_ua: Заголовок.
        subtitle_en / subtitle_ua: Подзаголовок.
        content_en / content_ua: Текст новости.
        image_url: Публичный URL изображения.

    Example:
        {
            "id": 1,
            "title_en": "Open day",
            "title_ua": "День відкритих дверей",
            "content_en": "...",
            "image_url": "https://cows-shelter.s3.us-east-1.amazonaws.com/news/5f1c...png",
            "created_at": "2024-05-01T10:00:00Z",
            "updated_at": "2024-05-01T10:00:00Z"
        }
    """

    title_en: str = Field(description="Заголовок (en)")
    title_ua: Optional[str] = Field(default=None, description="Заголовок (ua)")
    subtitle_en: Optional[str] = Field(default=None, description="Подзаголовок (en)")
    subtitle_ua: Optional[str] = Field(default=None, description="Подзаголовок (ua)")
    content_en: str = Field(description="Текст (en)")
    content_ua: Optional[str] = Field(default=None, description="Текст (ua)")
    image_url: Optional[str] = Field(default=None, description="URL изображения")
