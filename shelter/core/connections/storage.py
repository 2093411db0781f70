"""
Подключение к S3-совместимому хранилищу через aioboto3.

S3Client выбирает параметры по settings.storage_type (s3_params или
minio_params), S3ContextManager открывает и закрывает клиент.
"""

from typing import Any

from aioboto3 import Session
from botocore.config import Config as BotocoreConfig
from botocore.exceptions import ClientError

from shelter.core.settings import Settings, settings

from .base import BaseClient, BaseContextManager


class S3Client(BaseClient):
    """
    Клиент для работы с Amazon S3/MinIO.

    MinIO всегда использует path-style адресацию, AWS S3 без кастомного
    endpoint использует virtual-hosted стиль.

    Attributes:
        settings (Settings): Конфигурация приложения
        session (Session | None): Сессия aioboto3
        client_context (Any | None): Контекст клиента S3
    """

    def __init__(self, settings: Settings = settings) -> None:
        super().__init__()
        self.settings = settings
        self.session = None
        self.client_context = None

    @property
    def client_params(self) -> dict:
        """Параметры Session.client для выбранного типа хранилища."""
        if self.settings.storage_type == "minio":
            params = dict(self.settings.minio_params)
            addressing_style = "path"
        else:
            params = dict(self.settings.s3_params)
            addressing_style = "path" if "endpoint_url" in params else "virtual"
        params["config"] = BotocoreConfig(s3={"addressing_style": addressing_style})
        return params

    async def connect(self) -> Any:
        """
        Готовит контекст клиента; само соединение открывается в ``__aenter__``.

        Raises:
            ClientError: aioboto3 не смог создать клиент.
        """
        kind = self.settings.storage_type.upper()
        self.session = Session()
        try:
            self.client_context = self.session.client(**self.client_params)
        except ClientError as e:
            self.logger.error(
                "Клиент %s не создан: %s (%s)", kind, e, e.response.get("Error", {})
            )
            raise
        self.logger.info("Клиент %s создан", kind)
        return self.client_context

    async def close(self) -> None:
        if self.client_context:
            self.client_context = None
            self.session = None
            self.logger.debug("Клиент хранилища закрыт")


class S3ContextManager(BaseContextManager):
    """
    Контекстный менеджер для S3.

    Example:
        async with S3ContextManager() as client:
            await client.head_bucket(Bucket="cows-shelter")
    """

    def __init__(self, settings: Settings = settings) -> None:
        super().__init__()
        self.s3_client = S3Client(settings)
        self.client = None
        self.client_context = None

    async def __aenter__(self):
        self.client_context = await self.s3_client.connect()
        self.client = await self.client_context.__aenter__()
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client_context:
            await self.client_context.__aexit__(exc_type, exc_val, exc_tb)
        await self.s3_client.close()
