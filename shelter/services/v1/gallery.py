from shelter.models.v1.gallery import GalleryModel
from shelter.repository.v1.gallery import GalleryRepository
from shelter.services.base import ContentService


class GalleryService(ContentService[GalleryModel]):
    """Галерея: каждая запись это одно изображение в папке gallery."""

    repository_class = GalleryRepository
    resource_name = "Изображение"

    upload_field = "image_data"
    url_field = "image_url"
    folder = "gallery"
