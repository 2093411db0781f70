"""
Репозиторий экскурсий.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.excursions import ExcursionModel
from shelter.repository.base import BaseRepository


class ExcursionRepository(BaseRepository[ExcursionModel]):
    """
    Репозиторий экскурсий.

    Наследует CRUD и пагинацию BaseRepository; удаление мягкое.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=ExcursionModel)
