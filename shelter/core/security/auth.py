"""
Модуль аутентификации пользователей.

Основные компоненты:
- HTTPBearer: схема безопасности для документации OpenAPI
- get_current_user: функция-зависимость для получения текущего пользователя
- CurrentUserDep: типизированная зависимость

Пример использования:
    ```
    @router.post("/news")
    async def create_news(current_user: CurrentUserDep = None):
        ...
    ```
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shelter.core.dependencies.database import AsyncSessionDep
from shelter.core.exceptions import TokenInvalidError, TokenMissingError
from shelter.core.security.token_manager import TokenManager
from shelter.repository.v1.users import UserRepository
from shelter.schemas.v1.auth import CurrentUserSchema

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    scheme_name="Bearer",
    description="JWT токен из POST /api/v1/login",
    auto_error=False,
)


async def get_current_user(
    session: AsyncSessionDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUserSchema:
    """
    Получает данные текущего пользователя по Bearer токену.

    Args:
        session: Сессия БД.
        credentials: Заголовок Authorization.

    Returns:
        CurrentUserSchema: Текущий пользователь.

    Raises:
        TokenMissingError: Токен не передан.
        TokenExpiredError: Срок действия токена истёк.
        TokenInvalidError: Токен невалиден или пользователь не найден.
    """
    if credentials is None or not credentials.credentials:
        raise TokenMissingError()

    payload = TokenManager.decode_token(credentials.credentials)

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError) as e:
        logger.warning("Некорректный sub в payload токена")
        raise TokenInvalidError() from e

    user = await UserRepository(session).get_item_by_id(user_id)
    if user is None:
        logger.warning("Пользователь из токена не найден: id=%s", user_id)
        raise TokenInvalidError()

    return CurrentUserSchema(id=user.id, email=user.email, role=user.role)


CurrentUserDep = Annotated[CurrentUserSchema, Depends(get_current_user)]
