"""
Роутеры новостей.

Routes:
    GET    /news                - Список
    GET    /news/pagination     - Страница
    GET    /news/{item_id}      - Запись по ID
    POST   /news                - Создать (Bearer)
    PUT    /news/{item_id}      - Обновить (Bearer)
    PATCH  /news/{item_id}      - Обновить (Bearer)
    DELETE /news/{item_id}      - Удалить (Bearer)
"""

from shelter.core.dependencies import NewsServiceDep
from shelter.routers.v1.content import (ContentProtectedRouter,
                                        ContentPublicRouter)
from shelter.schemas.v1.news import (NewsCreateRequestSchema,
                                   NewsListResponseSchema,
                                   NewsPaginatedResponseSchema,
                                   NewsResponseSchema, NewsSchema,
                                   NewsUpdateRequestSchema)


class NewsPublicRouter(ContentPublicRouter):
    """Публичное чтение новостей."""

    resource_title = "новости"
    service_dep = NewsServiceDep
    item_schema = NewsSchema
    response_schema = NewsResponseSchema
    list_response_schema = NewsListResponseSchema
    paginated_response_schema = NewsPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="news", tags=["News"])


class NewsProtectedRouter(ContentProtectedRouter):
    """Изменение новостей (требуется Bearer токен)."""

    resource_title = "новости"
    service_dep = NewsServiceDep
    item_schema = NewsSchema
    response_schema = NewsResponseSchema
    create_schema = NewsCreateRequestSchema
    update_schema = NewsUpdateRequestSchema

    def __init__(self):
        super().__init__(prefix="news", tags=["News"])
