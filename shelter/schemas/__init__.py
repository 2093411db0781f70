"""
Схемы API.

Экспортирует базовые схемы; схемы ресурсов импортируются из shelter.schemas.v1.<ресурс>.
"""

from .base import (BaseRequestSchema, BaseResponseSchema, BaseSchema,
                   BaseUpdateRequestSchema, CommonBaseSchema,
                   DeleteResponseSchema, ErrorResponseSchema, ErrorSchema,
                   PaginatedResponseSchema)

__all__ = [
    "CommonBaseSchema",
    "BaseSchema",
    "BaseRequestSchema",
    "BaseUpdateRequestSchema",
    "BaseResponseSchema",
    "PaginatedResponseSchema",
    "DeleteResponseSchema",
    "ErrorSchema",
    "ErrorResponseSchema",
]
