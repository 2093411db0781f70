from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from shelter.core.exceptions.base import BaseAPIException


class ServiceUnavailableException(BaseAPIException):
    """
    Внешний сервис (БД, хранилище) недоступен или не был инициализирован.
    """

    def __init__(self, service_name: str):
        super().__init__(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Сервис недоступен: {service_name}",
            error_type="service_unavailable",
            extra={"service": service_name},
        )
