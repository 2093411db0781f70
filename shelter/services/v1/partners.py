from shelter.models.v1.partners import PartnerModel
from shelter.repository.v1.partners import PartnerRepository
from shelter.services.base import ContentService


class PartnerService(ContentService[PartnerModel]):
    """Партнёры: логотип приходит в logo_data, URL хранится в logo."""

    repository_class = PartnerRepository
    resource_name = "Партнёр"

    upload_field = "logo_data"
    url_field = "logo"
    folder = "partners"
