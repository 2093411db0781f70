"""
Общие фикстуры тестов.

Переменные окружения задаются до импорта shelter: настройки читаются при импорте.
"""

import os

os.environ.setdefault("TOKEN_SECRET_KEY", "test-secret-key")
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["AUTO_MIGRATE"] = "false"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_PARALLELISM"] = "1"

from typing import List  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (async_sessionmaker,  # noqa: E402
                                    create_async_engine)
from sqlalchemy.pool import StaticPool  # noqa: E402

from shelter.core.exceptions import StorageError  # noqa: E402
from shelter.core.integrations.storages import (  # noqa: E402
    AbstractStorageBackend, ObjectInfo, extension_from_content_type,
    generate_object_key, parse_data_url)
from shelter.core.security.auth import get_current_user  # noqa: E402
from shelter.main import create_application  # noqa: E402
from shelter.models import BaseModel  # noqa: E402
from shelter.schemas.v1.auth import CurrentUserSchema  # noqa: E402

PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
PNG_DATA_URL = f"data:image/png;base64,{PNG_BASE64}"
JPEG_DATA_URL = "data:image/jpeg;base64,/9j/4AAQSkZJRgABAQEASABIAAD/2wBDAP//"


class InMemoryStorage(AbstractStorageBackend):
    """
    Хранилище в памяти для тестов обработчиков.

    Attributes:
        objects: key -> (данные, content_type)
        deleted: Ключи, для которых вызывалось удаление
        upload_calls: Количество обращений к загрузке
        fail_uploads / fail_check: Имитация ошибок хранилища
    """

    base_url = "http://storage.test/cows-shelter"

    def __init__(self):
        self.objects = {}
        self.deleted: List[str] = []
        self.upload_calls = 0
        self.fail_uploads = False
        self.fail_check = False

    async def _store(self, key: str, data: bytes, content_type: str) -> str:
        if self.fail_uploads:
            raise StorageError("Ошибка при загрузке файла: storage is down")
        self.objects[key] = (data, content_type)
        return self.get_object_url(key)

    async def upload_file(self, file, folder: str) -> str:
        self.upload_calls += 1
        extension = os.path.splitext(file.filename or "")[1]
        key = generate_object_key(folder, extension)
        return await self._store(key, await file.read(), file.content_type)

    async def upload_base64(self, data_url: str, folder: str) -> str:
        self.upload_calls += 1
        content_type, data = parse_data_url(data_url)
        key = generate_object_key(folder, extension_from_content_type(content_type))
        return await self._store(key, data, content_type)

    async def delete_file(self, key_or_url: str) -> None:
        key = self.extract_object_key(key_or_url)
        self.deleted.append(key)
        self.objects.pop(key, None)

    def get_object_url(self, key: str) -> str:
        if key.startswith("http"):
            return key
        return f"{self.base_url}/{key}"

    def extract_object_key(self, url: str) -> str:
        prefix = f"{self.base_url}/"
        return url[len(prefix):] if url.startswith(prefix) else url

    async def list_objects(self, prefix: str = "", max_keys: int = 1000) -> List[ObjectInfo]:
        keys = sorted(key for key in self.objects if key.startswith(prefix))
        return [ObjectInfo(key=key, size=len(self.objects[key][0])) for key in keys[:max_keys]]

    async def check_connection(self) -> None:
        if self.fail_check:
            raise StorageError("Хранилище недоступно: connection refused")

    def keys(self, folder: str) -> List[str]:
        return [key for key in self.objects if key.startswith(f"{folder}/")]


@pytest.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield async_sessionmaker(bind=engine, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def app(session_factory, storage):
    application = create_application()
    application.state.session_factory = session_factory
    application.state.storage = storage
    return application


@pytest.fixture
async def anonymous_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def client(app):
    """Клиент с аутентифицированным администратором."""
    app.dependency_overrides[get_current_user] = lambda: CurrentUserSchema(
        id=1, email="admin@cows-shelter.org", role="admin"
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
