"""
Схемы для работы с новостями.
"""

from .base import NewsSchema
from .requests import NewsCreateRequestSchema, NewsUpdateRequestSchema
from .responses import (NewsListResponseSchema, NewsPaginatedResponseSchema,
                        NewsResponseSchema)

__all__ = [
    "NewsSchema",
    "NewsCreateRequestSchema",
    "NewsUpdateRequestSchema",
    "NewsResponseSchema",
    "NewsListResponseSchema",
    "NewsPaginatedResponseSchema",
]
