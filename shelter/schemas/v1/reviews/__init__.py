from .base import ReviewSchema
from .requests import ReviewCreateRequestSchema, ReviewUpdateRequestSchema
from .responses import (ReviewListResponseSchema,
                        ReviewPaginatedResponseSchema, ReviewResponseSchema)

__all__ = [
    "ReviewSchema",
    "ReviewCreateRequestSchema",
    "ReviewUpdateRequestSchema",
    "ReviewResponseSchema",
    "ReviewListResponseSchema",
    "ReviewPaginatedResponseSchema",
]
