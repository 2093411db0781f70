from .base import ContactSchema
from .requests import ContactCreateRequestSchema, ContactUpdateRequestSchema
from .responses import (ContactListResponseSchema,
                        ContactPaginatedResponseSchema, ContactResponseSchema)

__all__ = [
    "ContactSchema",
    "ContactCreateRequestSchema",
    "ContactUpdateRequestSchema",
    "ContactResponseSchema",
    "ContactListResponseSchema",
    "ContactPaginatedResponseSchema",
]
