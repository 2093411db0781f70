"""
Базовые классы моделей SQLAlchemy.

- BaseModel: целочисленный автоинкрементный id, created_at, updated_at
- SoftDeleteMixin: поле deleted_at для мягкого удаления

Все таблицы независимы (без внешних ключей).
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """
    Базовая модель для всех таблиц.

    Attributes:
        id (int): Автоинкрементный первичный ключ.
        created_at (datetime): Время создания записи.
        updated_at (datetime): Время последнего изменения записи.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="Идентификатор записи"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="Время создания",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="Время последнего обновления",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Возвращает значения колонок модели в виде словаря."""
        return {
            column.name: getattr(self, column.key)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"


class SoftDeleteMixin:
    """
    Миксин мягкого удаления.

    Запись с заполненным deleted_at считается удалённой и не возвращается
    репозиторием (см. BaseRepository).
    """

    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
        default=None,
        comment="Время мягкого удаления",
    )
