"""
Сервис регистрации и входа пользователей.
"""

from sqlalchemy.exc import IntegrityError

from shelter.core.exceptions import (InvalidCredentialsError, UserExistsError,
                                     UserNotFoundError)
from shelter.core.security.password_manager import PasswordManager
from shelter.core.security.token_manager import TokenManager
from shelter.models.v1.users import UserModel, UserRole
from shelter.repository.v1.users import UserRepository
from shelter.services.base import BaseService


class AuthService(BaseService):
    """
    Регистрация, вход и получение пользователей.

    Methods:
        register: Создаёт пользователя
        authenticate: Проверяет пароль и выдаёт токен
        get_user: Пользователь по ID
        create_admin: Создаёт администратора или повышает роль существующего
    """

    def __init__(self, session):
        super().__init__(session)
        self.repository = UserRepository(session)

    async def register(self, email: str, password: str) -> UserModel:
        """
        Регистрирует пользователя с ролью user.

        Raises:
            UserExistsError: Email уже занят.
        """
        email = email.strip().lower()
        if await self.repository.get_user_by_email(email):
            raise UserExistsError(email)

        try:
            user = await self.repository.create_item(
                {
                    "email": email,
                    "password_hash": PasswordManager.hash_password(password),
                    "role": UserRole.USER.value,
                }
            )
        except IntegrityError as e:
            raise UserExistsError(email) from e

        self.logger.info("Зарегистрирован пользователь %s", email)
        return user

    async def authenticate(self, email: str, password: str) -> dict:
        """
        Проверяет учётные данные и выдаёт access токен.

        Returns:
            dict: access_token, token_type, expires_in, user.

        Raises:
            InvalidCredentialsError: Неверный email или пароль.
        """
        user = await self.repository.get_user_by_email(email)
        if not user or not PasswordManager.verify(password, user.password_hash):
            self.logger.warning("Неудачная попытка входа: %s", email)
            raise InvalidCredentialsError()

        token = TokenManager.create_access_token(user.id, user.email, user.role)
        self.logger.info("Пользователь %s вошёл в систему", user.email)
        return {
            "access_token": token,
            "token_type": self.settings.TOKEN_TYPE,
            "expires_in": self.settings.ACCESS_TOKEN_MAX_AGE,
            "user": user,
        }

    async def get_user(self, user_id: int) -> UserModel:
        user = await self.repository.get_item_by_id(user_id)
        if not user:
            raise UserNotFoundError(field="id", value=user_id)
        return user

    async def create_admin(self, email: str, password: str) -> UserModel:
        """
        Создаёт администратора. Существующий пользователь получает роль admin
        и новый пароль.
        """
        email = email.strip().lower()
        password_hash = PasswordManager.hash_password(password)
        user = await self.repository.get_user_by_email(email)
        if user:
            user = await self.repository.update_item(
                user.id,
                {"role": UserRole.ADMIN.value, "password_hash": password_hash},
            )
            self.logger.info("Пользователь %s повышен до администратора", email)
            return user

        user = await self.repository.create_item(
            {
                "email": email,
                "password_hash": password_hash,
                "role": UserRole.ADMIN.value,
            }
        )
        self.logger.info("Создан администратор %s", email)
        return user
