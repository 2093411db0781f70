"""
Репозиторий для работы с пользователями.

Обеспечивает доступ к данным пользователей для регистрации, входа и
создания администратора из CLI.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shelter.models.v1.users import UserModel
from shelter.repository.base import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    """
    Репозиторий для работы с пользователями.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=UserModel)

    async def get_user_by_email(self, email: str) -> Optional[UserModel]:
        """
        Получение пользователя по email (без учёта регистра).

        Args:
            email: Email пользователя.

        Returns:
            UserModel или None, если пользователь не найден.
        """
        return await self.get_item_by_field("email", email.strip().lower())
