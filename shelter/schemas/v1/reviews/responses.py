from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import ReviewSchema


class ReviewResponseSchema(BaseResponseSchema):
    data: ReviewSchema


class ReviewListResponseSchema(BaseResponseSchema):
    data: List[ReviewSchema]


class ReviewPaginatedResponseSchema(PaginatedResponseSchema):
    data: List[ReviewSchema]
