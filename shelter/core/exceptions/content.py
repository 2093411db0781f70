"""
Исключения для работы с контентом сайта (новости, экскурсии, галерея и т.д.).
"""

from typing import Any, Dict, Optional

from .common import BadRequestError, NotFoundError


class ContentNotFoundError(NotFoundError):
    """Запись контента не найдена (или мягко удалена)."""

    def __init__(
        self,
        resource: str,
        item_id: Any,
        extra: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            resource: Человекочитаемое название ресурса ("Новость", "Партнёр").
            item_id: Идентификатор записи.
            extra: Дополнительная информация.
        """
        super().__init__(
            detail=f"{resource} с ID {item_id} не найден(а)",
            error_type="content_not_found",
            extra={"resource": resource, "id": item_id, **(extra or {})},
        )


class ContentValidationError(BadRequestError):
    """Ошибка валидации данных контента, не пойманная схемой (например, multipart формы)."""

    def __init__(self, detail: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(
            detail=detail, error_type="content_validation_error", extra=extra
        )
