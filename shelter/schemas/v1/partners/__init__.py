from .base import PartnerSchema
from .requests import PartnerCreateRequestSchema, PartnerUpdateRequestSchema
from .responses import (PartnerListResponseSchema,
                        PartnerPaginatedResponseSchema, PartnerResponseSchema)

__all__ = [
    "PartnerSchema",
    "PartnerCreateRequestSchema",
    "PartnerUpdateRequestSchema",
    "PartnerResponseSchema",
    "PartnerListResponseSchema",
    "PartnerPaginatedResponseSchema",
]
