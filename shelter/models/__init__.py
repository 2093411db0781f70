from .base import BaseModel, SoftDeleteMixin
from .v1 import (ContactModel, ExcursionModel, GalleryModel, NewsModel,
                 PartnerModel, PasswordResetModel, PdfModel, ReviewModel,
                 UserModel, UserRole)

__all__ = [
    "BaseModel",
    "SoftDeleteMixin",
    "NewsModel",
    "ExcursionModel",
    "GalleryModel",
    "PartnerModel",
    "ReviewModel",
    "ContactModel",
    "PdfModel",
    "UserModel",
    "UserRole",
    "PasswordResetModel",
]
