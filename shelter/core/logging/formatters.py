"""
Форматтеры логов.

- PrettyFormatter: цветной формат для консоли (или simple, если так задано в настройках)
- CustomJsonFormatter: JSON формат на базе python-json-logger для файлов и агрегаторов
"""

import logging
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

from shelter.core.settings import settings


class PrettyFormatter(logging.Formatter):
    """
    Форматтер для человекочитаемого вывода в консоль.

    Формат берётся из настроек логирования (pretty/simple).
    """

    def __init__(self) -> None:
        super().__init__(fmt=settings.logging.current_format)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON форматтер с обязательными полями timestamp, level, logger, module, func.
    """

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(
            record.created, tz=timezone.utc
        ).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["func"] = record.funcName
