from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseSchema


class ExcursionSchema(BaseSchema):
    """
    Экскурсия в ответах API.

    Attributes:
        title_en / title_ua: Название.
        description_en / description_ua: Описание.
        time_from / time_to: Время начала и окончания.
        amount_of_persons: Количество участников.
        image_url: Публичный URL изображения.
    """

    title_en: str
    title_ua: Optional[str] = None
    description_en: str
    description_ua: Optional[str] = None
    time_from: str = Field(examples=["10:00"])
    time_to: str = Field(examples=["12:00"])
    amount_of_persons: str = Field(examples=["до 10"])
    image_url: Optional[str] = None
