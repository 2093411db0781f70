"""
Роутеры партнёров.

Routes:
    GET    /partners                - Список
    GET    /partners/pagination     - Страница
    GET    /partners/{item_id}      - Запись по ID
    POST   /partners                - Создать (Bearer)
    PUT    /partners/{item_id}      - Обновить (Bearer)
    PATCH  /partners/{item_id}      - Обновить (Bearer)
    DELETE /partners/{item_id}      - Удалить (Bearer)
"""

from shelter.core.dependencies import PartnerServiceDep
from shelter.routers.v1.content import (ContentProtectedRouter,
                                        ContentPublicRouter)
from shelter.schemas.v1.partners import (PartnerCreateRequestSchema,
                                   PartnerListResponseSchema,
                                   PartnerPaginatedResponseSchema,
                                   PartnerResponseSchema, PartnerSchema,
                                   PartnerUpdateRequestSchema)


class PartnerPublicRouter(ContentPublicRouter):
    """Публичное чтение партнёров."""

    resource_title = "партнёры"
    service_dep = PartnerServiceDep
    item_schema = PartnerSchema
    response_schema = PartnerResponseSchema
    list_response_schema = PartnerListResponseSchema
    paginated_response_schema = PartnerPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="partners", tags=["Partners"])


class PartnerProtectedRouter(ContentProtectedRouter):
    """Изменение партнёров (требуется Bearer токен)."""

    resource_title = "партнёры"
    service_dep = PartnerServiceDep
    item_schema = PartnerSchema
    response_schema = PartnerResponseSchema
    create_schema = PartnerCreateRequestSchema
    update_schema = PartnerUpdateRequestSchema

    def __init__(self):
        super().__init__(prefix="partners", tags=["Partners"])
