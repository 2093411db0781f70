"""
Базовые интерфейсы клиентов внешних сервисов.

- BaseClient: установка и закрытие подключения
- BaseContextManager: асинхронный контекстный менеджер поверх клиента
"""

import logging
from abc import ABC, abstractmethod
from typing import Any


class BaseClient(ABC):
    """
    Базовый клиент подключения к внешнему сервису.

    Attributes:
        logger (logging.Logger): Логгер клиента.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def connect(self) -> Any:
        """Устанавливает подключение и возвращает клиент."""

    @abstractmethod
    async def close(self) -> None:
        """Закрывает подключение."""


class BaseContextManager(ABC):
    """
    Базовый асинхронный контекстный менеджер подключения.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def __aenter__(self) -> Any:
        """Вход в контекст."""

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Выход из контекста."""
