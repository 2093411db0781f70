from shelter.models.v1.excursions import ExcursionModel
from shelter.repository.v1.excursions import ExcursionRepository
from shelter.services.base import ContentService


class ExcursionService(ContentService[ExcursionModel]):
    """CRUD экскурсий с изображением в папке excursions."""

    repository_class = ExcursionRepository
    resource_name = "Экскурсия"

    upload_field = "image_data"
    url_field = "image_url"
    folder = "excursions"
