from pydantic import Field

from shelter.schemas.base import BaseSchema


class GallerySchema(BaseSchema):
    """
    Изображение галереи.

    Attributes:
        image_url: Публичный URL изображения.
    """

    image_url: str = Field(description="URL изображения")
