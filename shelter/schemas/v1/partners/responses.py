from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import PartnerSchema


class PartnerResponseSchema(BaseResponseSchema):
    data: PartnerSchema


class PartnerListResponseSchema(BaseResponseSchema):
    data: List[PartnerSchema]


class PartnerPaginatedResponseSchema(PaginatedResponseSchema):
    data: List[PartnerSchema]
