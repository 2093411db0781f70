from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelter.models.base import BaseModel, SoftDeleteMixin


class PdfModel(SoftDeleteMixin, BaseModel):
    """
    PDF документ (отчёты, уставные документы).

    Attributes:
        title: Название документа.
        document_url: Публичный URL файла в хранилище.
    """

    __tablename__ = "pdfs"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    document_url: Mapped[str] = mapped_column(Text, nullable=False)
