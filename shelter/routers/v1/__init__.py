"""
Модуль APIv1 - роутер версии 1 API.

Агрегирует все роутеры версии 1 и предоставляет единую точку входа.
"""

from shelter.routers.base import BaseRouter

from .auth import AuthRouter, UserProtectedRouter
from .contacts import ContactProtectedRouter, ContactPublicRouter
from .excursions import ExcursionProtectedRouter, ExcursionPublicRouter
from .gallery import GalleryProtectedRouter, GalleryPublicRouter
from .news import NewsProtectedRouter, NewsPublicRouter
from .partners import PartnerProtectedRouter, PartnerPublicRouter
from .pdfs import PdfProtectedRouter, PdfPublicRouter
from .reviews import ReviewProtectedRouter, ReviewPublicRouter
from .uploads import UploadRouter


class APIv1(BaseRouter):
    """
    Главный роутер для API версии 1.

    Агрегирует все роутеры v1 и предоставляет методы для их настройки.
    """

    def configure(self):
        """Настраивает все роутеры версии 1."""
        self.router.include_router(AuthRouter().get_router())
        self.router.include_router(UserProtectedRouter().get_router())
        self.router.include_router(UploadRouter().get_router())
        for public_router, protected_router in (
            (NewsPublicRouter, NewsProtectedRouter),
            (ExcursionPublicRouter, ExcursionProtectedRouter),
            (GalleryPublicRouter, GalleryProtectedRouter),
            (PartnerPublicRouter, PartnerProtectedRouter),
            (ReviewPublicRouter, ReviewProtectedRouter),
            (ContactPublicRouter, ContactProtectedRouter),
            (PdfPublicRouter, PdfProtectedRouter),
        ):
            self.router.include_router(public_router().get_router())
            self.router.include_router(protected_router().get_router())
