from shelter.schemas.base import BaseSchema


class ReviewSchema(BaseSchema):
    """Отзыв посетителя."""

    name_en: str
    name_ua: str
    review_en: str
    review_ua: str
