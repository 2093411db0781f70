"""
Схемы ответов для работы с новостями.
"""

from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import NewsSchema


class NewsResponseSchema(BaseResponseSchema):
    """Одна новость."""

    data: NewsSchema


class NewsListResponseSchema(BaseResponseSchema):
    """Список новостей."""

    data: List[NewsSchema]


class NewsPaginatedResponseSchema(PaginatedResponseSchema):
    """Страница новостей."""

    data: List[NewsSchema]
