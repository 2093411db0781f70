"""
Репозиторий партнёров.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.partners import PartnerModel
from shelter.repository.base import BaseRepository


class PartnerRepository(BaseRepository[PartnerModel]):
    """
    Репозиторий партнёров.

    Наследует CRUD и пагинацию BaseRepository; удаление мягкое.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=PartnerModel)
