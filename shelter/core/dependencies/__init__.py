"""
Зависимости FastAPI.
"""

from .content import (ContactServiceDep, ExcursionServiceDep,
                      GalleryServiceDep, NewsServiceDep, PartnerServiceDep,
                      PdfServiceDep, ReviewServiceDep)
from .database import AsyncSessionDep, get_async_session
from .services import AuthServiceDep, HealthServiceDep, UploadServiceDep
from .storage import (OptionalStorageDep, StorageDep, get_optional_storage,
                      get_storage)

__all__ = [
    "AsyncSessionDep",
    "get_async_session",
    "StorageDep",
    "OptionalStorageDep",
    "get_storage",
    "get_optional_storage",
    "NewsServiceDep",
    "ExcursionServiceDep",
    "GalleryServiceDep",
    "PartnerServiceDep",
    "ReviewServiceDep",
    "ContactServiceDep",
    "PdfServiceDep",
    "AuthServiceDep",
    "HealthServiceDep",
    "UploadServiceDep",
]
