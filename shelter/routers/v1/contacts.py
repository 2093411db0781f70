"""
Роутеры контактов.

Routes:
    GET    /contacts                - Список
    GET    /contacts/pagination     - Страница
    GET    /contacts/{item_id}      - Запись по ID
    POST   /contacts                - Создать (Bearer)
    PUT    /contacts/{item_id}      - Обновить (Bearer)
    PATCH  /contacts/{item_id}      - Обновить (Bearer)
    DELETE /contacts/{item_id}      - Удалить (Bearer)
"""

from shelter.core.dependencies import ContactServiceDep
from shelter.routers.v1.content import (ContentProtectedRouter,
                                        ContentPublicRouter)
from shelter.schemas.v1.contacts import (ContactCreateRequestSchema,
                                   ContactListResponseSchema,
                                   ContactPaginatedResponseSchema,
                                   ContactResponseSchema, ContactSchema,
                                   ContactUpdateRequestSchema)


class ContactPublicRouter(ContentPublicRouter):
    """Публичное чтение контактов."""

    resource_title = "контакты"
    service_dep = ContactServiceDep
    item_schema = ContactSchema
    response_schema = ContactResponseSchema
    list_response_schema = ContactListResponseSchema
    paginated_response_schema = ContactPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="contacts", tags=["Contacts"])


class ContactProtectedRouter(ContentProtectedRouter):
    """Изменение контактов (требуется Bearer токен)."""

    resource_title = "контакты"
    service_dep = ContactServiceDep
    item_schema = ContactSchema
    response_schema = ContactResponseSchema
    create_schema = ContactCreateRequestSchema
    update_schema = ContactUpdateRequestSchema

    def __init__(self):
        super().__init__(prefix="contacts", tags=["Contacts"])
