"""
Обобщённые роутеры контента.

Ресурсы с JSON телом (новости, экскурсии, галерея, партнёры, отзывы, контакты)
устроены одинаково, поэтому их маршруты описаны один раз:

Public (без авторизации):
    GET    /<prefix>             - Список всех записей
    GET    /<prefix>/pagination  - Страница записей (?page=1&limit=10)
    GET    /<prefix>/{item_id}   - Запись по ID

Protected (Bearer токен):
    POST   /<prefix>             - Создать запись
    PUT    /<prefix>/{item_id}   - Частично обновить запись
    PATCH  /<prefix>/{item_id}   - Частично обновить запись
    DELETE /<prefix>/{item_id}   - Удалить запись

Наследник задаёт prefix, tags, зависимость сервиса и схемы. Ошибки
обрабатываются глобальными exception handler'ами.
"""

from typing import Any, ClassVar

from fastapi import Query, status

from shelter.core.security.auth import CurrentUserDep
from shelter.core.settings import settings
from shelter.routers.base import BaseRouter, ProtectedRouter
from shelter.schemas.base import DeleteResponseSchema


class ContentPublicRouter(BaseRouter):
    """
    Публичные маршруты чтения контента.

    Attributes:
        resource_title: Название ресурса во множественном числе для документации
        service_dep: Типизированная зависимость сервиса (например, NewsServiceDep)
        item_schema: Схема одной записи
        response_schema / list_response_schema / paginated_response_schema: Схемы ответов
    """

    resource_title: ClassVar[str]
    service_dep: ClassVar[Any]
    item_schema: ClassVar[Any]
    response_schema: ClassVar[Any]
    list_response_schema: ClassVar[Any]
    paginated_response_schema: ClassVar[Any]

    def configure(self):
        service_dep = self.service_dep
        item_schema = self.item_schema
        response_schema = self.response_schema
        list_response_schema = self.list_response_schema
        paginated_response_schema = self.paginated_response_schema
        title = self.resource_title

        @self.router.get(
            path="",
            response_model=list_response_schema,
            status_code=status.HTTP_200_OK,
            description=f"""
            ## Получить все {title}

            Возвращает все записи (без удалённых), отсортированные по ID.

            ### Returns:
            * **data**: Список записей
            """,
            responses={200: {"description": "Список получен"}},
        )
        async def list_items(service: service_dep = None):
            items = await service.list_items()
            return list_response_schema(
                message="Список получен",
                data=[item_schema.model_validate(item) for item in items],
            )

        @self.router.get(
            path="/pagination",
            response_model=paginated_response_schema,
            status_code=status.HTTP_200_OK,
            description=f"""
            ## Получить {title} постранично

            ### Query параметры:
            * **page**: Номер страницы (с 1, по умолчанию 1)
            * **limit**: Размер страницы (по умолчанию 10)

            ### Returns:
            * **data**: Записи страницы (пустой список за пределами последней страницы)
            * **total**, **page**, **limit**, **total_pages**
            """,
            responses={
                200: {"description": "Страница получена"},
                400: {"description": "Некорректные параметры пагинации"},
            },
        )
        async def paginate_items(
            service: service_dep = None,
            page: int = Query(1, ge=1, description="Номер страницы"),
            limit: int = Query(
                settings.PAGINATION_DEFAULT_LIMIT,
                ge=1,
                description="Размер страницы",
            ),
        ):
            result = await service.get_page(page, limit)
            result["data"] = [item_schema.model_validate(item) for item in result["data"]]
            return paginated_response_schema(message="Страница получена", **result)

        @self.router.get(
            path="/{item_id}",
            response_model=response_schema,
            status_code=status.HTTP_200_OK,
            description="""
            ## Получить запись по ID

            ### Errors:
            * **404**: Запись не найдена или удалена
            """,
            responses={
                200: {"description": "Запись найдена"},
                404: {"description": "Запись не найдена"},
            },
        )
        async def get_item(item_id: int, service: service_dep = None):
            item = await service.get_item(item_id)
            return response_schema(data=item_schema.model_validate(item))


class ContentProtectedRouter(ProtectedRouter):
    """
    Защищённые маршруты изменения контента.

    Attributes:
        create_schema: Схема запроса создания
        update_schema: Схема запроса частичного обновления
    """

    resource_title: ClassVar[str]
    service_dep: ClassVar[Any]
    item_schema: ClassVar[Any]
    response_schema: ClassVar[Any]
    create_schema: ClassVar[Any]
    update_schema: ClassVar[Any]

    def configure(self):
        service_dep = self.service_dep
        item_schema = self.item_schema
        response_schema = self.response_schema
        create_schema = self.create_schema
        update_schema = self.update_schema

        @self.router.post(
            path="",
            response_model=response_schema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Создать запись

            Изображение (если есть) передаётся как base64 data URL и
            загружается в хранилище до сохранения записи.

            ### Требуется Bearer токен

            ### Errors:
            * **400**: Не заполнены обязательные поля или некорректный data URL
            * **500**: Ошибка хранилища или базы данных
            """,
            responses={
                201: {"description": "Запись создана"},
                400: {"description": "Ошибка валидации"},
                401: {"description": "Не авторизован"},
            },
        )
        async def create_item(
            data: create_schema,
            current_user: CurrentUserDep = None,
            service: service_dep = None,
        ):
            item = await service.create_item(data.model_dump())
            return response_schema(
                message="Запись создана", data=item_schema.model_validate(item)
            )

        async def update_item(
            item_id: int,
            data: update_schema,
            current_user: CurrentUserDep = None,
            service: service_dep = None,
        ):
            item = await service.update_item(item_id, data.get_changes())
            return response_schema(
                message="Запись обновлена", data=item_schema.model_validate(item)
            )

        update_description = """
            ## Частично обновить запись

            Непереданные поля не меняются, null очищает необязательное поле.
            Новое изображение загружается до сохранения, старое удаляется после.

            ### Требуется Bearer токен

            ### Errors:
            * **400**: Обязательное поле передано пустым
            * **404**: Запись не найдена
            """
        update_responses = {
            200: {"description": "Запись обновлена"},
            400: {"description": "Ошибка валидации"},
            401: {"description": "Не авторизован"},
            404: {"description": "Запись не найдена"},
        }
        for method in ("put", "patch"):
            getattr(self.router, method)(
                path="/{item_id}",
                response_model=response_schema,
                status_code=status.HTTP_200_OK,
                description=update_description,
                responses=update_responses,
                name=f"{method}_item",
            )(update_item)

        @self.router.delete(
            path="/{item_id}",
            response_model=DeleteResponseSchema,
            status_code=status.HTTP_200_OK,
            description="""
            ## Удалить запись

            Файл записи удаляется из хранилища, затем удаляется запись.

            ### Требуется Bearer токен
            """,
            responses={
                200: {"description": "Запись удалена"},
                401: {"description": "Не авторизован"},
                404: {"description": "Запись не найдена"},
            },
        )
        async def delete_item(
            item_id: int,
            current_user: CurrentUserDep = None,
            service: service_dep = None,
        ):
            await service.delete_item(item_id)
            return DeleteResponseSchema(message="Запись удалена")
