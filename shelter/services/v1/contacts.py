"""
Сервис контактов.

Контакты не загружают файлы, удаляются физически, email уникален.
"""

from typing import Any, Dict, Optional

from shelter.core.exceptions import ConflictError
from shelter.models.v1.contacts import ContactModel
from shelter.repository.v1.contacts import ContactRepository
from shelter.services.base import ContentService


class ContactService(ContentService[ContactModel]):
    """
    CRUD контактов с проверкой уникальности email.
    """

    repository_class = ContactRepository
    resource_name = "Контакт"

    async def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        if await self.repository.email_taken(email, exclude_id=exclude_id):
            raise ConflictError(
                f"Контакт с email {email} уже существует",
                extra={"email": email},
            )

    async def before_create(self, values: Dict[str, Any]) -> None:
        await self._ensure_email_free(values["email"])

    async def before_update(self, item: ContactModel, changes: Dict[str, Any]) -> None:
        email = changes.get("email")
        if email and email != item.email:
            await self._ensure_email_free(email, exclude_id=item.id)
