"""
Зависимости для сервисов контента (новости, экскурсии, галерея и т.д.).

Providers:
    - get_news_service, get_excursion_service, get_gallery_service,
      get_partner_service, get_review_service, get_contact_service,
      get_pdf_service

Typed Dependencies:
    - NewsServiceDep, ExcursionServiceDep, GalleryServiceDep, PartnerServiceDep,
      ReviewServiceDep, ContactServiceDep, PdfServiceDep

Usage:
    ```python
    @router.get("/news/{item_id}")
    async def get_news(item_id: int, service: NewsServiceDep = None):
        return NewsResponseSchema(data=await service.get_item(item_id))
    ```
"""

from typing import Annotated

from fastapi import Depends

from shelter.core.dependencies.database import AsyncSessionDep
from shelter.core.dependencies.storage import OptionalStorageDep
from shelter.services.v1 import (ContactService, ExcursionService,
                                 GalleryService, NewsService, PartnerService,
                                 PdfService, ReviewService)


async def get_news_service(
    session: AsyncSessionDep, storage: OptionalStorageDep
) -> NewsService:
    return NewsService(session, storage)


async def get_excursion_service(
    session: AsyncSessionDep, storage: OptionalStorageDep
) -> ExcursionService:
    return ExcursionService(session, storage)


async def get_gallery_service(
    session: AsyncSessionDep, storage: OptionalStorageDep
) -> GalleryService:
    return GalleryService(session, storage)


async def get_partner_service(
    session: AsyncSessionDep, storage: OptionalStorageDep
) -> PartnerService:
    return PartnerService(session, storage)


async def get_review_service(session: AsyncSessionDep) -> ReviewService:
    return ReviewService(session)


async def get_contact_service(session: AsyncSessionDep) -> ContactService:
    return ContactService(session)


async def get_pdf_service(
    session: AsyncSessionDep, storage: OptionalStorageDep
) -> PdfService:
    return PdfService(session, storage)


NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]
ExcursionServiceDep = Annotated[ExcursionService, Depends(get_excursion_service)]
GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
PartnerServiceDep = Annotated[PartnerService, Depends(get_partner_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
PdfServiceDep = Annotated[PdfService, Depends(get_pdf_service)]
