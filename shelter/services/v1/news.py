"""
Сервис новостей.
"""

from shelter.models.v1.news import NewsModel
from shelter.repository.v1.news import NewsRepository
from shelter.services.base import ContentService


class NewsService(ContentService[NewsModel]):
    """
    CRUD новостей. Изображение приходит в image_data и хранится в папке news.
    """

    repository_class = NewsRepository
    resource_name = "Новость"

    upload_field = "image_data"
    url_field = "image_url"
    folder = "news"
