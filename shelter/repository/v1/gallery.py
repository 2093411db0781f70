"""
Репозиторий изображений галереи.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.gallery import GalleryModel
from shelter.repository.base import BaseRepository


class GalleryRepository(BaseRepository[GalleryModel]):
    """
    Репозиторий изображений галереи.

    Наследует CRUD и пагинацию BaseRepository; удаление мягкое.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=GalleryModel)
