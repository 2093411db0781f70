from typing import List

from shelter.schemas.base import BaseResponseSchema, PaginatedResponseSchema

from .base import GallerySchema


class GalleryResponseSchema(BaseResponseSchema):
    data: GallerySchema


class GalleryListResponseSchema(BaseResponseSchema):
    data: List[GallerySchema]


class GalleryPaginatedResponseSchema(PaginatedResponseSchema):
    data: List[GallerySchema]
