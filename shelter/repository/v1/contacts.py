"""
Репозиторий контактов.

Контакты удаляются физически, email уникален.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.contacts import ContactModel
from shelter.repository.base import BaseRepository


class ContactRepository(BaseRepository[ContactModel]):
    """
    Репозиторий контактов.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=ContactModel)

    async def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Проверяет, занят ли email другим контактом.

        Args:
            email: Проверяемый email.
            exclude_id: ID контакта, который не учитывается (при обновлении).

        Returns:
            bool: True, если email уже используется.
        """
        return await self.exists_by_field("email", email, exclude_id=exclude_id)
