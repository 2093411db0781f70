"""
Модель новостей сайта.

Новость хранит двуязычные (en/ua) заголовок, подзаголовок и текст,
а также URL изображения в объектном хранилище.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class NewsModel(SoftDeleteMixin, BaseModel):
    """
    Модель новости.

    Attributes:
        title_en / title_ua: Заголовок на английском / украинском.
        subtitle_en / subtitle_ua: Подзаголовок.
        content_en / content_ua: Текст новости.
        image_url: Публичный URL изображения (S3/MinIO), может отсутствовать.
    """

    __tablename__ = "news"

    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    title_ua: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    subtitle_en: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    subtitle_ua: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content_en: Mapped[str] = mapped_column(Text, nullable=False)
    content_ua: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="URL изображения в хранилище"
    )
