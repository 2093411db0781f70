from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class GalleryModel(SoftDeleteMixin, BaseModel):
    """
    Изображение галереи.

    Attributes:
        image_url: Публичный URL изображения в хранилище.
    """

    __tablename__ = "gallery"

    image_url: Mapped[str] = mapped_column(Text, nullable=False)
