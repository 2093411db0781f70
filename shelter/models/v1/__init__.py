"""
Модуль v1 содержит все модели данных версии 1 API.

Экспортируемые модели:
    - NewsModel (новости)
    - ExcursionModel (экскурсии)
    - GalleryModel (галерея)
    - PartnerModel (партнёры)
    - ReviewModel (отзывы)
    - ContactModel (контакты)
    - PdfModel (PDF документы)
    - UserModel, UserRole, PasswordResetModel (пользователи)
"""

from .contacts import ContactModel
from .excursions import ExcursionModel
from .gallery import GalleryModel
from .news import NewsModel
from .partners import PartnerModel
from .pdfs import PdfModel
from .reviews import ReviewModel
from .users import PasswordResetModel, UserModel, UserRole

__all__ = [
    # Content
    "NewsModel",
    "ExcursionModel",
    "GalleryModel",
    "PartnerModel",
    "ReviewModel",
    "ContactModel",
    "PdfModel",
    # Users
    "UserModel",
    "UserRole",
    "PasswordResetModel",
]
