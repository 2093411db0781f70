"""
Схемы запросов для галереи.

Галерея состоит только из изображения, поэтому image_data обязателен
при создании и не может быть очищен при обновлении.
"""

from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseRequestSchema, BaseUpdateRequestSchema


class GalleryCreateRequestSchema(BaseRequestSchema):
    """
    Добавление изображения в галерею.

    Example:
        POST /api/v1/gallery
        {"image_data": "data:image/webp;base64,UklGR..."}
    """

    image_data: str = Field(
        ..., min_length=1, description="Изображение как base64 data URL"
    )


class GalleryUpdateRequestSchema(BaseUpdateRequestSchema):
    """Замена изображения галереи."""

    required_fields = ("image_data",)

    image_data: Optional[str] = Field(default=None, min_length=1)
