"""
Сервисы API версии 1.
"""

from .auth import AuthService
from .contacts import ContactService
from .excursions import ExcursionService
from .gallery import GalleryService
from .health import HealthService
from .news import NewsService
from .partners import PartnerService
from .pdfs import PdfService
from .reviews import ReviewService
from .uploads import UploadService

__all__ = [
    "AuthService",
    "HealthService",
    "NewsService",
    "ExcursionService",
    "GalleryService",
    "PartnerService",
    "ReviewService",
    "ContactService",
    "PdfService",
    "UploadService",
]
