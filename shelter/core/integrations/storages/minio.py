"""
Хранилище MinIO.

MinIO работает через тот же S3 API (aioboto3) с path-style адресацией.
При старте бакет создаётся, если его нет, и получает политику публичного чтения.
"""

import json
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from shelter.core.exceptions import StorageError

from .base import BaseS3Storage


class MinioStorage(BaseS3Storage):
    """
    Storage для MinIO.

    Attributes:
        endpoint: Endpoint MinIO без схемы (host:port)
    """

    def __init__(
        self,
        s3_client: Any,
        bucket_name: str,
        endpoint: str,
        public_url: Optional[str] = None,
        use_ssl: bool = True,
    ):
        super().__init__(s3_client, bucket_name, public_url=public_url, use_ssl=use_ssl)
        self.endpoint = endpoint

    def _build_object_url(self, key: str) -> str:
        return f"{self.scheme}{self.endpoint}/{self.bucket_name}/{key}"

    @property
    def public_read_policy(self) -> str:
        """Политика бакета, разрешающая анонимное чтение объектов."""
        return json.dumps(
            {
                "Version": "2012-10-17",
                "Statement": [
                    {
                        "Effect": "Allow",
                        "Principal": {"AWS": ["*"]},
                        "Action": ["s3:GetObject"],
                        "Resource": [f"arn:aws:s3:::{self.bucket_name}/*"],
                    }
                ],
            }
        )

    async def startup(self) -> None:
        """
        Создаёт бакет, если он отсутствует, и устанавливает публичную политику чтения.

        Raises:
            StorageError: При ошибке MinIO.
        """
        if not await self.bucket_exists():
            try:
                await self._client.create_bucket(Bucket=self.bucket_name)
            except (ClientError, BotoCoreError) as error:
                self.logger.error("Не удалось создать бакет %s: %s", self.bucket_name, error)
                raise StorageError(f"Не удалось создать бакет: {error}") from error
            self.logger.info("Создан бакет MinIO %s", self.bucket_name)

        try:
            await self._client.put_bucket_policy(
                Bucket=self.bucket_name, Policy=self.public_read_policy
            )
        except (ClientError, BotoCoreError) as error:
            self.logger.error(
                "Не удалось установить политику бакета %s: %s", self.bucket_name, error
            )
            raise StorageError(f"Не удалось установить политику бакета: {error}") from error

        self.logger.info("Бакет MinIO %s готов", self.bucket_name)
