"""
Роутеры аутентификации.

Routes:
    POST /user            - Регистрация
    POST /login           - Вход, выдача Bearer токена
    GET  /user/{user_id}  - Пользователь по ID (Bearer)
"""

from fastapi import status

from shelter.core.dependencies import AuthServiceDep
from shelter.core.security.auth import CurrentUserDep
from shelter.routers.base import BaseRouter, ProtectedRouter
from shelter.schemas.v1.auth import (LoginRequestSchema,
                                     RegistrationRequestSchema,
                                     TokenDataSchema, TokenResponseSchema,
                                     UserResponseSchema, UserSchema)


class AuthRouter(BaseRouter):
    """
    Публичные маршруты регистрации и входа.
    """

    def __init__(self):
        super().__init__(tags=["Authentication"])

    def configure(self):

        @self.router.post(
            path="/user",
            response_model=UserResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Регистрация пользователя

            ### Body:
            * **email**: Email (уникальный)
            * **password**: Пароль

            ### Errors:
            * **400**: Некорректный email или короткий пароль
            * **409**: Пользователь уже существует
            """,
            responses={
                201: {"description": "Пользователь создан"},
                409: {"description": "Пользователь уже существует"},
            },
        )
        async def register(
            data: RegistrationRequestSchema,
            auth_service: AuthServiceDep = None,
        ) -> UserResponseSchema:
            user = await auth_service.register(data.email, data.password)
            return UserResponseSchema(
                message="Пользователь зарегистрирован",
                data=UserSchema.model_validate(user),
            )

        @self.router.post(
            path="/login",
            response_model=TokenResponseSchema,
            status_code=status.HTTP_200_OK,
            description="""
            ## Вход в систему

            ### Returns:
            * **access_token**: JWT для заголовка `Authorization: Bearer <token>`

            ### Errors:
            * **401**: Неверный email или пароль
            """,
            responses={
                200: {"description": "Успешный вход"},
                401: {"description": "Неверные учётные данные"},
            },
        )
        async def login(
            data: LoginRequestSchema,
            auth_service: AuthServiceDep = None,
        ) -> TokenResponseSchema:
            token = await auth_service.authenticate(data.email, data.password)
            token["user"] = UserSchema.model_validate(token["user"])
            return TokenResponseSchema(
                message="Вход выполнен", data=TokenDataSchema(**token)
            )


class UserProtectedRouter(ProtectedRouter):
    """
    Защищённые маршруты пользователей.
    """

    def __init__(self):
        super().__init__(prefix="user", tags=["Authentication"])

    def configure(self):

        @self.router.get(
            path="/{user_id}",
            response_model=UserResponseSchema,
            status_code=status.HTTP_200_OK,
            description="""
            ## Получить пользователя по ID

            ### Требуется Bearer токен
            """,
            responses={
                200: {"description": "Пользователь найден"},
                401: {"description": "Не авторизован"},
                404: {"description": "Пользователь не найден"},
            },
        )
        async def get_user(
            user_id: int,
            current_user: CurrentUserDep = None,
            auth_service: AuthServiceDep = None,
        ) -> UserResponseSchema:
            user = await auth_service.get_user(user_id)
            return UserResponseSchema(data=UserSchema.model_validate(user))
