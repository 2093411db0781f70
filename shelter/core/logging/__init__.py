"""
Настройка логирования приложения.

setup_logging() вызывается один раз при создании приложения (и в CLI):
root-логгер получает консольный обработчик (pretty или json по LOG_FORMAT)
и, если задан LOG_FILE, файловый обработчик с JSON. Повторный вызов
заменяет обработчики, а не дублирует их.
"""

import logging
from pathlib import Path
from typing import Optional

from shelter.core.settings import settings

from .formatters import CustomJsonFormatter, PrettyFormatter

# Библиотеки, чьи DEBUG/INFO логи только засоряют вывод
QUIET_LOGGERS = (
    "aioboto3",
    "aiobotocore",
    "botocore",
    "urllib3",
    "sqlalchemy.engine",
    "passlib",
    "multipart",
    "python_multipart",
    "asyncio",
)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    if settings.logging.is_json_format:
        handler.setFormatter(CustomJsonFormatter())
    else:
        handler.setFormatter(PrettyFormatter())
    return handler


def _file_handler(log_file: str) -> Optional[logging.Handler]:
    """JSON обработчик файла логов или None, если файл открыть не удалось."""
    path = Path(log_file)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(
            path, mode=settings.logging.FILE_MODE, encoding=settings.logging.ENCODING
        )
    except OSError as error:
        logging.getLogger(__name__).warning(
            "Файл логов %s недоступен, пишем только в консоль: %s", log_file, error
        )
        return None
    handler.setFormatter(CustomJsonFormatter())
    return handler


def setup_logging() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if settings.logging.CONSOLE_ENABLED:
        root.addHandler(_console_handler())

    if settings.logging.LOG_FILE:
        file_handler = _file_handler(settings.logging.LOG_FILE)
        if file_handler is not None:
            root.addHandler(file_handler)

    root.setLevel(settings.logging.LOG_LEVEL)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
