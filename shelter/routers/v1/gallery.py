"""
Роутеры галереи.

Routes:
    GET    /gallery                - Список
    GET    /gallery/pagination     - Страница
    GET    /gallery/{item_id}      - Запись по ID
    POST   /gallery                - Создать (Bearer)
    PUT    /gallery/{item_id}      - Обновить (Bearer)
    PATCH  /gallery/{item_id}      - Обновить (Bearer)
    DELETE /gallery/{item_id}      - Удалить (Bearer)
"""

from shelter.core.dependencies import GalleryServiceDep
from shelter.routers.v1.content import (ContentProtectedRouter,
                                        ContentPublicRouter)
from shelter.schemas.v1.gallery import (GalleryCreateRequestSchema,
                                   GalleryListResponseSchema,
                                   GalleryPaginatedResponseSchema,
                                   GalleryResponseSchema, GallerySchema,
                                   GalleryUpdateRequestSchema)


class GalleryPublicRouter(ContentPublicRouter):
    """Публичное чтение галереи."""

    resource_title = "изображения галереи"
    service_dep = GalleryServiceDep
    item_schema = GallerySchema
    response_schema = GalleryResponseSchema
    list_response_schema = GalleryListResponseSchema
    paginated_response_schema = GalleryPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="gallery", tags=["Gallery"])


class GalleryProtectedRouter(ContentProtectedRouter):
    """Изменение галереи (требуется Bearer токен)."""

    resource_title = "изображения галереи"
    service_dep = GalleryServiceDep
    item_schema = GallerySchema
    response_schema = GalleryResponseSchema
    create_schema = GalleryCreateRequestSchema
    update_schema = GalleryUpdateRequestSchema

    def __init__(self):
        super().__init__(prefix="gallery", tags=["Gallery"])
