"""
Создание и проверка JWT токенов (python-jose).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import ExpiredSignatureError, JWTError, jwt

from shelter.core.exceptions import TokenExpiredError, TokenInvalidError
from shelter.core.settings import settings

logger = logging.getLogger(__name__)


class TokenManager:
    """
    Менеджер JWT токенов доступа.

    Payload токена:
        sub: ID пользователя (строкой)
        email: Email пользователя
        role: Роль пользователя
        iat / exp: Время выпуска и истечения
    """

    @staticmethod
    def create_access_token(user_id: int, email: str, role: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": now,
            "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        }
        return jwt.encode(
            payload,
            settings.TOKEN_SECRET_KEY.get_secret_value(),
            algorithm=settings.TOKEN_ALGORITHM,
        )

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """
        Декодирует и проверяет токен.

        Args:
            token: JWT токен.

        Returns:
            Dict[str, Any]: Payload токена.

        Raises:
            TokenExpiredError: Срок действия истёк.
            TokenInvalidError: Подпись или формат некорректны.
        """
        try:
            return jwt.decode(
                token,
                settings.TOKEN_SECRET_KEY.get_secret_value(),
                algorithms=[settings.TOKEN_ALGORITHM],
            )
        except ExpiredSignatureError as e:
            logger.debug("Токен истёк")
            raise TokenExpiredError() from e
        except JWTError as e:
            logger.debug("Невалидный токен: %s", e)
            raise TokenInvalidError() from e
