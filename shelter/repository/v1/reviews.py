"""
Репозиторий отзывов.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.reviews import ReviewModel
from shelter.repository.base import BaseRepository


class ReviewRepository(BaseRepository[ReviewModel]):
    """
    Репозиторий отзывов.

    Наследует CRUD и пагинацию BaseRepository; удаление мягкое.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=ReviewModel)
