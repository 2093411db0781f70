"""
Хеширование и проверка паролей (passlib, Argon2).
"""

import logging

from passlib.context import CryptContext

from shelter.core.settings import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(**settings.crypt_context_params)


class PasswordManager:
    """
    Менеджер паролей.

    Methods:
        hash_password: Хеширует пароль
        verify: Проверяет пароль по хешу
    """

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify(plain_password: str, hashed_password: str) -> bool:
        """
        Проверяет пароль.

        Args:
            plain_password: Пароль из запроса.
            hashed_password: Хеш из БД.

        Returns:
            bool: True, если пароль совпадает. Некорректный хеш считается несовпадением.
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning("Не удалось проверить хеш пароля: %s", e)
            return False
