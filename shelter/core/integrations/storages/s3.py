"""
Хранилище AWS S3 (или S3-совместимый сервис с кастомным endpoint).
"""

from typing import Any, Optional

from .base import BaseS3Storage


class S3Storage(BaseS3Storage):
    """
    Storage для AWS S3.

    Без кастомного endpoint ссылки строятся в virtual-hosted стиле
    ``https://<bucket>.s3.<region>.amazonaws.com/<key>``, с endpoint в path стиле
    ``<scheme><endpoint>/<bucket>/<key>``.

    Attributes:
        region: Регион AWS
        endpoint: Кастомный endpoint без схемы (None для AWS)
    """

    def __init__(
        self,
        s3_client: Any,
        bucket_name: str,
        region: str,
        endpoint: Optional[str] = None,
        public_url: Optional[str] = None,
        use_ssl: bool = True,
    ):
        super().__init__(s3_client, bucket_name, public_url=public_url, use_ssl=use_ssl)
        self.region = region
        self.endpoint = endpoint

    def _build_object_url(self, key: str) -> str:
        if self.endpoint:
            return f"{self.scheme}{self.endpoint}/{self.bucket_name}/{key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    async def startup(self) -> None:
        """Проверяет доступность бакета. Бакет AWS S3 не создаётся автоматически."""
        await self.check_connection()
        self.logger.info("Бакет S3 %s доступен", self.bucket_name)
