"""
Настройки сервиса.

Все параметры читаются из переменных окружения и env-файла. Какой файл
читать, решает resolve_env_file(): ENV_FILE, затем .env.dev, затем .env.
"""

import logging
import os
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import PostgresDsn, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


def resolve_env_file() -> tuple[Path, str]:
    """
    Возвращает env-файл и название окружения (test, custom, development, production).
    """
    explicit = os.getenv("ENV_FILE")
    if explicit:
        env_type = "test" if ".env.test" in explicit else "custom"
        env_path = Path(explicit)
    elif Path(".env.dev").exists():
        env_path, env_type = Path(".env.dev"), "development"
    else:
        env_path, env_type = Path(".env"), "production"

    logger.info("Окружение %s, env-файл %s", env_type.upper(), env_path)
    return env_path, env_type


class LoggingSettings(BaseSettings):
    """
    Логирование: уровень, формат консоли (pretty/json/simple) и файл.

    Пустой LOG_FILE отключает запись в файл.
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "pretty"
    LOG_FILE: str = "./logs/app.log"
    ENCODING: str = "utf-8"
    FILE_MODE: str = "a"
    CONSOLE_ENABLED: bool = True

    FILE_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    SIMPLE_FORMAT: str = "%(levelname)s - %(name)s - %(message)s"
    PRETTY_FORMAT: str = (
        "\033[1;36m%(asctime)s\033[0m - \033[1;32m%(name)s\033[0m - "
        "\033[1;33m%(levelname)s\033[0m - %(message)s"
    )

    @property
    def current_format(self) -> str:
        if self.LOG_FORMAT == "pretty":
            return self.PRETTY_FORMAT
        if self.LOG_FORMAT == "simple":
            return self.SIMPLE_FORMAT
        return self.FILE_FORMAT

    @property
    def is_json_format(self) -> bool:
        return self.LOG_FORMAT.lower() == "json"


ENV_FILE_PATH, APP_ENV = resolve_env_file()


class Settings(BaseSettings):
    """
    Конфигурация сервиса приюта.

    Помимо полей из окружения отдаёт готовые наборы параметров:
    app_params (FastAPI), uvicorn_params, engine_params и session_params
    (SQLAlchemy), s3_params и minio_params (aioboto3), crypt_context_params
    (passlib) и cors_params.
    """

    app_env: str = APP_ENV
    logging: LoggingSettings = LoggingSettings()

    TITLE: str = "Cows Shelter Backend"
    DESCRIPTION: str = "API для управления контентом сайта приюта"
    VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    @property
    def app_params(self) -> Dict[str, Any]:
        return {
            "title": self.TITLE,
            "description": self.DESCRIPTION,
            "version": self.VERSION,
            "swagger_ui_parameters": {"defaultModelsExpandDepth": -1},
        }

    @property
    def uvicorn_params(self) -> Dict[str, Any]:
        # За reverse proxy доверяем X-Forwarded-* заголовкам
        return {
            "host": self.HOST,
            "port": self.PORT,
            "log_level": self.logging.LOG_LEVEL.lower(),
            "proxy_headers": True,
            "forwarded_allow_ips": "*",
        }

    # База данных: DATABASE_URL важнее отдельных POSTGRES_* параметров
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: Optional[SecretStr] = None
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DATABASE: str = "cows_shelter"
    DATABASE_ECHO: bool = False

    @property
    def database_url(self) -> str:
        """Строка подключения asyncpg (или DATABASE_URL как есть)."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD
        dsn = PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=password.get_secret_value() if password else None,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DATABASE,
        )
        return str(dsn)

    @property
    def engine_params(self) -> Dict[str, Any]:
        return {"echo": self.DATABASE_ECHO, "pool_pre_ping": True}

    @property
    def session_params(self) -> Dict[str, Any]:
        # expire_on_commit=False: ответ сериализуется уже после commit
        return {
            "class_": AsyncSession,
            "autoflush": False,
            "expire_on_commit": False,
        }

    # Объектное хранилище. STORAGE_TYPE: "s3" или "minio";
    # без него выбирается minio, если задан MINIO_ENDPOINT.
    STORAGE_TYPE: Optional[str] = None
    STORAGE_BUCKET: Optional[str] = None
    STORAGE_USE_SSL: Optional[bool] = None
    STORAGE_PUBLIC_URL: Optional[str] = None  # CDN

    AWS_SERVICE_NAME: str = "s3"
    AWS_REGION: str = "us-east-1"
    S3_ENDPOINT: Optional[str] = None
    AWS_ACCESS_KEY_ID: Optional[SecretStr] = None
    AWS_SECRET_ACCESS_KEY: Optional[SecretStr] = None

    MINIO_ENDPOINT: Optional[str] = None
    MINIO_BUCKET: Optional[str] = None
    MINIO_USE_SSL: Optional[bool] = None
    MINIO_REGION: str = "us-east-1"
    MINIO_ACCESS_KEY: Optional[SecretStr] = None
    MINIO_SECRET_KEY: Optional[SecretStr] = None

    DEFAULT_BUCKET_NAME: ClassVar[str] = "cows-shelter"

    @field_validator("STORAGE_TYPE", mode="before")
    @classmethod
    def normalize_storage_type(cls, v: Optional[str]) -> Optional[str]:
        """Нижний регистр без пробелов; пустая строка означает None."""
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @staticmethod
    def _strip_scheme(endpoint: str) -> str:
        return endpoint.removeprefix("http://").removeprefix("https://").rstrip("/")

    @property
    def storage_type(self) -> str:
        if self.STORAGE_TYPE:
            return self.STORAGE_TYPE
        return "minio" if self.MINIO_ENDPOINT else "s3"

    @property
    def storage_bucket(self) -> str:
        return self.STORAGE_BUCKET or self.MINIO_BUCKET or self.DEFAULT_BUCKET_NAME

    @property
    def storage_use_ssl(self) -> bool:
        """STORAGE_USE_SSL, затем MINIO_USE_SSL; по умолчанию HTTPS."""
        for flag in (self.STORAGE_USE_SSL, self.MINIO_USE_SSL):
            if flag is not None:
                return flag
        return True

    @property
    def storage_scheme(self) -> str:
        return "https://" if self.storage_use_ssl else "http://"

    @property
    def minio_endpoint(self) -> str:
        """host:port MinIO."""
        return self._strip_scheme(self.MINIO_ENDPOINT or "minio:9000")

    @property
    def s3_endpoint(self) -> Optional[str]:
        """Свой endpoint S3 (или MINIO_ENDPOINT); None - стандартный AWS."""
        endpoint = self.S3_ENDPOINT or self.MINIO_ENDPOINT
        return self._strip_scheme(endpoint) if endpoint else None

    @property
    def s3_params(self) -> Dict[str, Any]:
        """Аргументы aioboto3 Session.client для AWS S3."""
        params: Dict[str, Any] = {
            "service_name": self.AWS_SERVICE_NAME,
            "region_name": self.AWS_REGION,
        }
        if self.AWS_ACCESS_KEY_ID and self.AWS_SECRET_ACCESS_KEY:
            params.update(
                aws_access_key_id=self.AWS_ACCESS_KEY_ID.get_secret_value(),
                aws_secret_access_key=self.AWS_SECRET_ACCESS_KEY.get_secret_value(),
            )
        if self.s3_endpoint:
            params["endpoint_url"] = self.storage_scheme + self.s3_endpoint
        return params

    @property
    def minio_params(self) -> Dict[str, Any]:
        """Аргументы aioboto3 Session.client для MinIO."""
        params: Dict[str, Any] = {
            "service_name": self.AWS_SERVICE_NAME,
            "region_name": self.MINIO_REGION,
            "endpoint_url": self.storage_scheme + self.minio_endpoint,
        }
        if self.MINIO_ACCESS_KEY and self.MINIO_SECRET_KEY:
            params.update(
                aws_access_key_id=self.MINIO_ACCESS_KEY.get_secret_value(),
                aws_secret_access_key=self.MINIO_SECRET_KEY.get_secret_value(),
            )
        return params

    # Загрузка файлов
    UPLOAD_MAX_FILE_SIZE: int = 10 * 1024 * 1024
    DOCUMENT_MAX_FILE_SIZE: int = 20 * 1024 * 1024
    UPLOAD_ALLOWED_IMAGE_TYPES: List[str] = [
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
    ]
    UPLOAD_ALLOWED_IMAGE_EXTENSIONS: List[str] = [
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".webp",
    ]
    DOCUMENT_ALLOWED_MIME_TYPES: List[str] = ["application/pdf"]

    PAGINATION_DEFAULT_LIMIT: int = 10

    # Токены
    TOKEN_SECRET_KEY: SecretStr
    TOKEN_TYPE: str = "Bearer"
    TOKEN_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60

    @property
    def ACCESS_TOKEN_MAX_AGE(self) -> int:
        return self.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    # Пароли (passlib + argon2)
    PASSWORD_HASH_SCHEME: str = "argon2"
    ARGON2_TIME_COST: int = 2
    ARGON2_MEMORY_COST: int = 102400
    ARGON2_PARALLELISM: int = 8
    PASSWORD_MIN_LENGTH: int = 6

    @property
    def crypt_context_params(self) -> Dict[str, Any]:
        scheme = self.PASSWORD_HASH_SCHEME
        return {
            "schemes": [scheme],
            "deprecated": "auto",
            f"{scheme}__time_cost": self.ARGON2_TIME_COST,
            f"{scheme}__memory_cost": self.ARGON2_MEMORY_COST,
            f"{scheme}__parallelism": self.ARGON2_PARALLELISM,
        }

    # create_all при старте приложения
    AUTO_MIGRATE: bool = True

    ALLOW_ORIGINS: List[str] = ["*"]
    ALLOW_CREDENTIALS: bool = True
    ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    ALLOW_HEADERS: List[str] = ["*"]

    @property
    def cors_params(self) -> Dict[str, Any]:
        return {
            "allow_origins": self.ALLOW_ORIGINS,
            "allow_credentials": self.ALLOW_CREDENTIALS,
            "allow_methods": self.ALLOW_METHODS,
            "allow_headers": self.ALLOW_HEADERS,
        }

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )
