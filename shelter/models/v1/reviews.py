from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class ReviewModel(SoftDeleteMixin, BaseModel):
    """
    Отзыв посетителя (двуязычный).

    Attributes:
        name_en / name_ua: Имя автора отзыва.
        review_en / review_ua: Текст отзыва.
    """

    __tablename__ = "reviews"

    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ua: Mapped[str] = mapped_column(String(255), nullable=False)
    review_en: Mapped[str] = mapped_column(Text, nullable=False)
    review_ua: Mapped[str] = mapped_column(Text, nullable=False)
