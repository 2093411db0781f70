from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import ExcursionSchema


class ExcursionResponseSchema(BaseResponseSchema):
    data: ExcursionSchema


class ExcursionListResponseSchema(BaseResponseSchema):
    data: List[ExcursionSchema]


class ExcursionPaginatedResponseSchema(PaginatedResponseSchema):
    data: List[ExcursionSchema]
