from .base import PdfSchema
from .responses import (PdfListResponseSchema, PdfPaginatedResponseSchema,
                        PdfResponseSchema)

__all__ = [
    "PdfSchema",
    "PdfResponseSchema",
    "PdfListResponseSchema",
    "PdfPaginatedResponseSchema",
]
