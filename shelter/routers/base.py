"""
Базовые роутеры.

Роутер приложения - класс, который в __init__ задаёт prefix и tags, а
маршруты описывает в configure(). Готовый APIRouter отдаёт get_router().
"""

from typing import Any, List, Optional, Sequence

from fastapi import APIRouter, Depends

from shelter.core.security.auth import get_current_user


class BaseRouter:
    """
    Публичный роутер.

    Attributes:
        router (APIRouter): FastAPI роутер с маршрутами из configure()
    """

    def __init__(
        self,
        prefix: str = "",
        tags: Optional[Sequence[str]] = None,
        dependencies: Optional[List[Any]] = None,
    ):
        """
        Args:
            prefix: Префикс пути без ведущего "/" ("news" -> "/news")
            tags: Теги Swagger
            dependencies: Зависимости, применяемые ко всем маршрутам роутера
        """
        self.router = APIRouter(
            prefix=f"/{prefix.strip('/')}" if prefix else "",
            tags=list(tags or []),
            dependencies=dependencies or [],
        )
        self.configure()

    def configure(self):
        """Регистрирует маршруты; переопределяется наследниками."""

    def get_router(self) -> APIRouter:
        return self.router


class ProtectedRouter(BaseRouter):
    """
    Роутер, все маршруты которого требуют Bearer токен.

    Проверка токена подключена зависимостью уровня роутера, поэтому маршрут
    без параметра current_user тоже защищён. Чтобы получить пользователя,
    объявите параметр ``current_user: CurrentUserDep = None``.
    """

    def __init__(self, prefix: str = "", tags: Optional[Sequence[str]] = None):
        super().__init__(
            prefix=prefix, tags=tags, dependencies=[Depends(get_current_user)]
        )
