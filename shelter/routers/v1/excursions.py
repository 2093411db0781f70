"""
Роутеры экскурсий.

Routes:
    GET    /excursions                - Список
    GET    /excursions/pagination     - Страница
    GET    /excursions/{item_id}      - Запись по ID
    POST   /excursions                - Создать (Bearer)
    PUT    /excursions/{item_id}      - Обновить (Bearer)
    PATCH  /excursions/{item_id}      - Обновить (Bearer)
    DELETE /excursions/{item_id}      - Удалить (Bearer)
"""

from shelter.core.dependencies import ExcursionServiceDep
from shelter.routers.v1.content import (ContentProtectedRouter,
                                        ContentPublicRouter)
from shelter.schemas.v1.excursions import (ExcursionCreateRequestSchema,
                                   ExcursionListResponseSchema,
                                   ExcursionPaginatedResponseSchema,
                                   ExcursionResponseSchema, ExcursionSchema,
                                   ExcursionUpdateRequestSchema)


class ExcursionPublicRouter(ContentPublicRouter):
    """Публичное чтение экскурсий."""

    resource_title = "экскурсии"
    service_dep = ExcursionServiceDep
    item_schema = ExcursionSchema
    response_schema = ExcursionResponseSchema
    list_response_schema = ExcursionListResponseSchema
    paginated_response_schema = ExcursionPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="excursions", tags=["Excursions"])


class ExcursionProtectedRouter(ContentProtectedRouter):
    """Изменение экскурсий (требуется Bearer токен)."""

    resource_title = "экскурсии"
    service_dep = ExcursionServiceDep
    item_schema = ExcursionSchema
    response_schema = ExcursionResponseSchema
    create_schema = ExcursionCreateRequestSchema
    update_schema = ExcursionUpdateRequestSchema

    def __init__(self):
        super().__init__(prefix="excursions", tags=["Excursions"])
