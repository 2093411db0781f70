"""
Сервис PDF документов.

Документы приходят как multipart файлы (поле document) и хранятся в папке pdfs.
"""

from typing import List, Tuple

from shelter.models.v1.pdfs import PdfModel
from shelter.repository.v1.pdfs import PdfRepository
from shelter.services.base import ContentService


class PdfService(ContentService[PdfModel]):
    """
    CRUD PDF документов.
    """

    repository_class = PdfRepository
    resource_name = "Документ"

    upload_field = "document"
    url_field = "document_url"
    folder = "pdfs"

    def file_constraints(self) -> Tuple[List[str], int]:
        return (
            self.settings.DOCUMENT_ALLOWED_MIME_TYPES,
            self.settings.DOCUMENT_MAX_FILE_SIZE,
        )
