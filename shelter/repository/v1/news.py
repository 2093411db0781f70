"""
Репозиторий новостей.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.news import NewsModel
from shelter.repository.base import BaseRepository


class NewsRepository(BaseRepository[NewsModel]):
    """
    Репозиторий новостей.

    Наследует CRUD и пагинацию BaseRepository; удаление мягкое.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=NewsModel)
