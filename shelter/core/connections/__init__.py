"""
Модуль подключений.

Предоставляет клиенты и контекстные менеджеры для внешних сервисов:
- DatabaseClient, DatabaseContextManager: Работа с реляционной БД
- S3Client, S3ContextManager: Работа с S3/MinIO хранилищем
"""

from .database import DatabaseClient, DatabaseContextManager
from .storage import S3Client, S3ContextManager

__all__ = [
    "DatabaseClient",
    "DatabaseContextManager",
    "S3Client",
    "S3ContextManager",
]
