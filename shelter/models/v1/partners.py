"""
Модель партнёров приюта.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class PartnerModel(SoftDeleteMixin, BaseModel):
    """
    Модель партнёра.

    Attributes:
        name: Название партнёра.
        link: Ссылка на сайт партнёра.
        logo: Публичный URL логотипа в хранилище.
    """

    __tablename__ = "partners"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    link: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    logo: Mapped[str] = mapped_column(Text, nullable=False, comment="URL логотипа")
