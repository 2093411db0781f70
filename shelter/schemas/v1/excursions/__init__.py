from .base import ExcursionSchema
from .requests import (ExcursionCreateRequestSchema,
                       ExcursionUpdateRequestSchema)
from .responses import (ExcursionListResponseSchema,
                        ExcursionPaginatedResponseSchema,
                        ExcursionResponseSchema)

__all__ = [
    "ExcursionSchema",
    "ExcursionCreateRequestSchema",
    "ExcursionUpdateRequestSchema",
    "ExcursionResponseSchema",
    "ExcursionListResponseSchema",
    "ExcursionPaginatedResponseSchema",
]
