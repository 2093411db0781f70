"""
Схемы для health check.

Содержит схемы данных для проверки состояния приложения.
"""

from datetime import datetime

from pydantic import Field

from shelter.schemas.base import CommonBaseSchema


class HealthCheckSchema(CommonBaseSchema):
    """
    Отчёт о состоянии приложения.

    Attributes:
        status (str): UP, если все зависимости доступны, иначе DEGRADED
        timestamp (datetime): Время проверки
        database (str): Статус базы данных ("UP" или "DOWN: <ошибка>")
        storage (str): Статус хранилища ("UP", "DOWN: <ошибка>" или "NOT CONFIGURED")
    """

    status: str = Field(description="Общий статус", examples=["UP", "DEGRADED"])
    timestamp: datetime = Field(description="Время проверки")
    database: str = Field(
        description="Статус базы данных", examples=["UP", "DOWN: connection refused"]
    )
    storage: str = Field(
        description="Статус хранилища", examples=["UP", "NOT CONFIGURED"]
    )


__all__ = ["HealthCheckSchema"]
