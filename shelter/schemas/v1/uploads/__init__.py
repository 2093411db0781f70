"""
Схемы загрузки изображений.
"""

from pydantic import Field

from shelter.schemas.base import BaseResponseSchema, CommonBaseSchema


class UploadImageDataSchema(CommonBaseSchema):
    """
    Результат загрузки изображения.

    Attributes:
        image_url: Публичный URL загруженного файла.
    """

    image_url: str = Field(description="URL загруженного изображения")


class UploadImageResponseSchema(BaseResponseSchema):
    data: UploadImageDataSchema


__all__ = ["UploadImageDataSchema", "UploadImageResponseSchema"]
