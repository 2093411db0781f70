"""
Lifespan приложения.

Импорт модулей обработчиков регистрирует их: сначала БД, затем хранилище.
"""

from . import database, storage  # noqa: F401
from .base import (lifespan, register_shutdown_handler,
                   register_startup_handler)

__all__ = [
    "lifespan",
    "register_startup_handler",
    "register_shutdown_handler",
]
