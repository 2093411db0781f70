from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseSchema


class ContactSchema(BaseSchema):
    """
    Контакт в ответах API.

    Attributes:
        name: Имя контакта.
        email: Email.
        phone: Телефон.
        image_url: URL изображения.
    """

    name: str
    email: str
    phone: str = Field(examples=["+380501234567"])
    image_url: Optional[str] = None
