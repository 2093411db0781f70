"""
Базовый репозиторий.

BaseRepository реализует CRUD над одной SQLAlchemy моделью. Модели с
колонкой deleted_at удаляются мягко и не попадают в выборки и подсчёт.
"""

# pylint: disable=not-callable  # func.count() is callable in SQLAlchemy
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from shelter.models.base import BaseModel

M = TypeVar("M", bound=BaseModel)


class SessionMixin:
    """
    Миксин для предоставления экземпляра сессии базы данных.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session


class BaseRepository(SessionMixin, Generic[M]):
    """
    CRUD операции над моделью M.

    Ошибки записи (SQLAlchemyError) откатывают транзакцию и пробрасываются
    дальше: решение о компенсации (например, удалении загруженного файла)
    принимает сервис.

    Attributes:
        session (AsyncSession): Сессия запроса.
        model (Type[M]): SQLAlchemy модель.
    """

    def __init__(self, session: AsyncSession, model: Type[M]):
        super().__init__(session)
        self.model = model
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def soft_delete(self) -> bool:
        return hasattr(self.model, "deleted_at")

    def _alive(self, statement: Select) -> Select:
        """Отбрасывает мягко удалённые записи."""
        if self.soft_delete:
            statement = statement.where(self.model.deleted_at.is_(None))
        return statement

    async def _commit(self, action: str, item_id: Any = None) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as error:
            await self.session.rollback()
            self.logger.error(
                "%s %s (id=%s) не выполнено: %s",
                action,
                self.model.__name__,
                item_id,
                error,
            )
            raise

    # Чтение

    async def get_item_by_id(self, item_id: int) -> Optional[M]:
        statement = self._alive(select(self.model).where(self.model.id == item_id))
        return (await self.session.execute(statement)).scalar()

    async def get_item_by_field(self, field_name: str, value: Any) -> Optional[M]:
        """
        Первая запись с ``field_name == value``.

        Raises:
            ValueError: Если у модели нет такого поля.
        """
        column = getattr(self.model, field_name, None)
        if column is None:
            raise ValueError(f"У модели {self.model.__name__} нет поля '{field_name}'")
        statement = self._alive(select(self.model).where(column == value))
        return (await self.session.execute(statement)).scalar()

    async def get_items(
        self, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> List[M]:
        """
        Записи по возрастанию ID.

        Args:
            limit: Максимум записей (None - без ограничения).
            offset: Сколько записей пропустить.
        """
        statement = self._alive(select(self.model)).order_by(self.model.id)
        if offset:
            statement = statement.offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_items(self) -> int:
        statement = self._alive(select(func.count()).select_from(self.model))
        return (await self.session.execute(statement)).scalar() or 0

    async def exists_by_field(
        self, field_name: str, value: Any, exclude_id: Optional[int] = None
    ) -> bool:
        """
        Есть ли запись с ``field_name == value`` (мягко удалённые учитываются,
        уникальные индексы на них тоже действуют).

        Args:
            exclude_id: ID записи, которую не учитывать (проверка при обновлении).
        """
        column = getattr(self.model, field_name, None)
        if column is None:
            return False
        statement = select(func.count()).select_from(self.model).where(column == value)
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        return bool((await self.session.execute(statement)).scalar())

    # Запись

    async def create_item(self, data: Dict[str, Any]) -> M:
        """
        Сохраняет новую запись.

        Raises:
            SQLAlchemyError: Ошибка записи (транзакция откачена).
        """
        instance = self.model(**data)
        self.session.add(instance)
        await self._commit("Создание")
        await self.session.refresh(instance)
        self.logger.info("Создана запись %s id=%s", self.model.__name__, instance.id)
        return instance

    async def update_item(self, item_id: int, data: Dict[str, Any]) -> Optional[M]:
        """
        Записывает переданные поля; ``id`` и неизвестные поля игнорируются.

        Returns:
            Optional[M]: Обновлённая запись или None, если её нет.

        Raises:
            SQLAlchemyError: Ошибка записи (транзакция откачена).
        """
        instance = await self.get_item_by_id(item_id)
        if instance is None:
            return None

        for field_name, value in data.items():
            if field_name != "id" and hasattr(instance, field_name):
                setattr(instance, field_name, value)

        await self._commit("Обновление", item_id)
        await self.session.refresh(instance)
        self.logger.info("Обновлена запись %s id=%s", self.model.__name__, item_id)
        return instance

    async def delete_item(self, item_id: int) -> bool:
        """
        Удаляет запись: мягко (deleted_at), если модель это поддерживает.

        Returns:
            bool: False, если записи нет.

        Raises:
            SQLAlchemyError: Ошибка записи (транзакция откачена).
        """
        instance = await self.get_item_by_id(item_id)
        if instance is None:
            return False

        if self.soft_delete:
            instance.deleted_at = datetime.now(timezone.utc)
        else:
            await self.session.delete(instance)

        await self._commit("Удаление", item_id)
        self.logger.info(
            "Удалена запись %s id=%s (soft=%s)",
            self.model.__name__,
            item_id,
            self.soft_delete,
        )
        return True
