from typing import Optional

from pydantic import Field

from shelter.schemas.base import BaseRequestSchema, BaseUpdateRequestSchema


class ReviewCreateRequestSchema(BaseRequestSchema):
    """
    Создание отзыва. Все поля обязательны.

    Example:
        POST /api/v1/reviews
        {
            "name_en": "Anna",
            "name_ua": "Анна",
            "review_en": "Lovely place",
            "review_ua": "Чудове місце"
        }
    """

    name_en: str = Field(..., min_length=1, max_length=255)
    name_ua: str = Field(..., min_length=1, max_length=255)
    review_en: str = Field(..., min_length=1)
    review_ua: str = Field(..., min_length=1)


class ReviewUpdateRequestSchema(BaseUpdateRequestSchema):
    required_fields = ("name_en", "name_ua", "review_en", "review_ua")

    name_en: Optional[str] = Field(default=None, min_length=1, max_length=255)
    name_ua: Optional[str] = Field(default=None, min_length=1, max_length=255)
    review_en: Optional[str] = Field(default=None, min_length=1)
    review_ua: Optional[str] = Field(default=None, min_length=1)
