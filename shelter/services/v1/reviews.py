from shelter.models.v1.reviews import ReviewModel
from shelter.repository.v1.reviews import ReviewRepository
from shelter.services.base import ContentService


class ReviewService(ContentService[ReviewModel]):
    """Отзывы: только текстовые поля, без файлов."""

    repository_class = ReviewRepository
    resource_name = "Отзыв"
