"""
Модель экскурсий в приют.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class ExcursionModel(SoftDeleteMixin, BaseModel):
    """
    Модель экскурсии.

    Attributes:
        title_en / title_ua: Название экскурсии.
        description_en / description_ua: Описание.
        time_from / time_to: Временное окно экскурсии (строкой, как вводит администратор).
        amount_of_persons: Количество участников (строкой, например "до 10").
        image_url: Публичный URL изображения.
    """

    __tablename__ = "excursions"

    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    title_ua: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description_en: Mapped[str] = mapped_column(Text, nullable=False)
    description_ua: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    time_from: Mapped[str] = mapped_column(String(50), nullable=False)
    time_to: Mapped[str] = mapped_column(String(50), nullable=False)
    amount_of_persons: Mapped[str] = mapped_column(String(50), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
