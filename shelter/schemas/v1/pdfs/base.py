from pydantic import Field

from shelter.schemas.base import BaseSchema


class PdfSchema(BaseSchema):
    """
    PDF документ.

    Attributes:
        title: Название документа.
        document_url: Публичный URL файла.
    """

    title: str
    document_url: str = Field(description="URL PDF файла")
