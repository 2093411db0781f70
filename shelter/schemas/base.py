"""
Базовые схемы Pydantic.

- CommonBaseSchema: общая конфигурация всех схем
- BaseSchema: схема записи БД (id, created_at, updated_at)
- BaseRequestSchema / BaseUpdateRequestSchema: схемы входящих данных
- BaseResponseSchema / PaginatedResponseSchema: обёртки ответов API
- ErrorSchema / ErrorResponseSchema: формат ошибок
"""

from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CommonBaseSchema(BaseModel):
    """
    Общая конфигурация схем: чтение из ORM объектов и атрибутов.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class BaseSchema(CommonBaseSchema):
    """
    Схема записи, хранящейся в БД.

    Attributes:
        id (int): Идентификатор записи.
        created_at (datetime): Время создания.
        updated_at (datetime): Время последнего обновления.
    """

    id: int = Field(description="Идентификатор записи", examples=[1])
    created_at: datetime = Field(description="Время создания")
    updated_at: datetime = Field(description="Время последнего обновления")


class BaseRequestSchema(CommonBaseSchema):
    """
    Базовая схема входящих данных. Строки обрезаются по краям.
    """

    model_config = ConfigDict(str_strip_whitespace=True)


class BaseUpdateRequestSchema(BaseRequestSchema):
    """
    Базовая схема частичного обновления.

    Все поля наследников необязательны:
    - поле не передано: значение не меняется
    - поле передано со значением: значение заменяется
    - поле передано как null: значение очищается, если оно необязательно
      (поля из required_fields очищать нельзя)
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_required_not_cleared(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) in (None, ""):
                raise ValueError(f"Поле '{name}' не может быть пустым")
        return self

    def get_changes(self) -> Dict[str, Any]:
        """Только переданные в запросе поля."""
        return self.model_dump(exclude_unset=True)


class BaseResponseSchema(CommonBaseSchema):
    """
    Базовая схема ответа API.

    Attributes:
        success (bool): Признак успешного выполнения.
        message (Optional[str]): Сообщение для клиента.
        data (Any): Полезная нагрузка.
    """

    success: bool = Field(default=True, description="Успешность операции")
    message: Optional[str] = Field(default=None, description="Сообщение")
    data: Any = Field(default=None, description="Данные ответа")


class PaginatedResponseSchema(BaseResponseSchema):
    """
    Ответ со страницей списка.

    Attributes:
        total (int): Общее количество записей.
        page (int): Номер страницы (с 1).
        limit (int): Размер страницы.
        total_pages (int): Количество страниц, ``ceil(total / limit)``.
    """

    total: int = Field(default=0, description="Общее количество записей")
    page: int = Field(default=1, description="Номер страницы")
    limit: int = Field(default=10, description="Размер страницы")
    total_pages: int = Field(default=0, description="Количество страниц")


class DeleteResponseSchema(BaseResponseSchema):
    """Ответ на удаление записи (data всегда null)."""

    data: None = None


class ErrorSchema(CommonBaseSchema):
    """
    Описание ошибки.

    Attributes:
        type (str): Тип ошибки (код для клиента).
        detail (str): Человекочитаемое описание.
        extra (Dict[str, Any]): Дополнительные данные.
        timestamp (Optional[str]): Время возникновения.
    """

    type: str = Field(description="Тип ошибки", examples=["content_not_found"])
    detail: str = Field(description="Описание ошибки")
    extra: Dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[str] = None


class ErrorResponseSchema(CommonBaseSchema):
    """
    Ответ с ошибкой.
    """

    success: bool = False
    message: str
    data: None = None
    error: ErrorSchema
