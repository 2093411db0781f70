"""
Модуль v1 репозиториев для работы с базой данных.

Экспортируемые репозитории:
    - NewsRepository: Новости
    - ExcursionRepository: Экскурсии
    - GalleryRepository: Галерея
    - PartnerRepository: Партнёры
    - ReviewRepository: Отзывы
    - ContactRepository: Контакты
    - PdfRepository: PDF документы
    - UserRepository: Пользователи
    - HealthRepository: Проверка состояния БД
"""

from .contacts import ContactRepository
from .excursions import ExcursionRepository
from .gallery import GalleryRepository
from .health import HealthRepository
from .news import NewsRepository
from .partners import PartnerRepository
from .pdfs import PdfRepository
from .reviews import ReviewRepository
from .users import UserRepository

__all__ = [
    "NewsRepository",
    "ExcursionRepository",
    "GalleryRepository",
    "PartnerRepository",
    "ReviewRepository",
    "ContactRepository",
    "PdfRepository",
    "UserRepository",
    "HealthRepository",
]
