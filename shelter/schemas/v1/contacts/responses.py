from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import ContactSchema


class ContactResponseSchema(BaseResponseSchema):
    data: ContactSchema


class ContactListResponseSchema(BaseResponseSchema):
    data: List[ContactSchema]


class ContactPaginatedResponseSchema(PaginatedResponseSchema):
    data: List[ContactSchema]
