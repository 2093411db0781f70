"""
Репозиторий PDF документов.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.pdfs import PdfModel
from shelter.repository.base import BaseRepository


class PdfRepository(BaseRepository[PdfModel]):
    """
    Репозиторий PDF документов.

    Наследует CRUD и пагинацию BaseRepository; удаление мягкое.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=PdfModel)
