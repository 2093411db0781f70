"""
Роутеры отзывов.

Routes:
    GET    /reviews                - Список
    GET    /reviews/pagination     - Страница
    GET    /reviews/{item_id}      - Запись по ID
    POST   /reviews                - Создать (Bearer)
    PUT    /reviews/{item_id}      - Обновить (Bearer)
    PATCH  /reviews/{item_id}      - Обновить (Bearer)
    DELETE /reviews/{item_id}      - Удалить (Bearer)
"""

from shelter.core.dependencies import ReviewServiceDep
from shelter.routers.v1.content import (ContentProtectedRouter,
                                        ContentPublicRouter)
from shelter.schemas.v1.reviews import (ReviewCreateRequestSchema,
                                   ReviewListResponseSchema,
                                   ReviewPaginatedResponseSchema,
                                   ReviewResponseSchema, ReviewSchema,
                                   ReviewUpdateRequestSchema)


class ReviewPublicRouter(ContentPublicRouter):
    """Публичное чтение отзывов."""

    resource_title = "отзывы"
    service_dep = ReviewServiceDep
    item_schema = ReviewSchema
    response_schema = ReviewResponseSchema
    list_response_schema = ReviewListResponseSchema
    paginated_response_schema = ReviewPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="reviews", tags=["Reviews"])


class ReviewProtectedRouter(ContentProtectedRouter):
    """Изменение отзывов (требуется Bearer токен)."""

    resource_title = "отзывы"
    service_dep = ReviewServiceDep
    item_schema = ReviewSchema
    response_schema = ReviewResponseSchema
    create_schema = ReviewCreateRequestSchema
    update_schema = ReviewUpdateRequestSchema

    def __init__(self):
        super().__init__(prefix="reviews", tags=["Reviews"])
