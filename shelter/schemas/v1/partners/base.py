from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseSchema


class PartnerSchema(BaseSchema):
    """
    Партнёр в ответах API.

    Attributes:
        name: Название партнёра.
        link: Ссылка на сайт.
        logo: Публичный URL логотипа.
    """

    name: str
    link: Optional[str] = None
    logo: str = Field(description="URL логотипа")
