"""
Схемы ответов аутентификации.
"""

from pydantic import Field

from shelter.schemas.base import (BaseResponseSchema, BaseSchema,
                                  CommonBaseSchema)


class UserSchema(BaseSchema):
    """
    Пользователь без хеша пароля.

    Attributes:
        email: Email пользователя.
        role: Роль ("admin" или "user").
    """

    email: str
    role: str = Field(examples=["admin", "user"])


class TokenDataSchema(CommonBaseSchema):
    """
    Выданный токен доступа.

    Attributes:
        access_token: JWT токен.
        token_type: Тип токена (Bearer).
        expires_in: Время жизни в секундах.
        user: Данные пользователя.
    """

    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    user: UserSchema


class UserResponseSchema(BaseResponseSchema):
    data: UserSchema


class TokenResponseSchema(BaseResponseSchema):
    data: TokenDataSchema
