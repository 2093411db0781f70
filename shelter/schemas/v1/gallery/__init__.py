from .base import GallerySchema
from .requests import GalleryCreateRequestSchema, GalleryUpdateRequestSchema
from .responses import (GalleryListResponseSchema,
                        GalleryPaginatedResponseSchema, GalleryResponseSchema)

__all__ = [
    "GallerySchema",
    "GalleryCreateRequestSchema",
    "GalleryUpdateRequestSchema",
    "GalleryResponseSchema",
    "GalleryListResponseSchema",
    "GalleryPaginatedResponseSchema",
]
