"""
Схемы ответов для PDF документов.

Запросы на создание и обновление приходят как multipart/form-data
(поля title и document), поэтому схем запросов здесь нет.
"""

from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import PdfSchema


class PdfResponseSchema(BaseResponseSchema):
    data: PdfSchema


class PdfListResponseSchema(BaseResponseSchema):
    data: List[PdfSchema]


class PdfPaginatedResponseSchema(PaginatedResponseSchema):
    data: List[PdfSchema]
