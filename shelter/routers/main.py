"""
Корневые маршруты приложения.

Routes:
    GET /health - Состояние приложения и его зависимостей
"""

from fastapi import status

from shelter.core.dependencies import HealthServiceDep
from shelter.routers.base import BaseRouter
from shelter.schemas.v1.health import HealthCheckSchema


class MainRouter(BaseRouter):
    """
    Служебные маршруты вне /api/v1.
    """

    def __init__(self):
        super().__init__(tags=["Health"])

    def configure(self):

        @self.router.get(
            path="/health",
            response_model=HealthCheckSchema,
            status_code=status.HTTP_200_OK,
            description="""
            ## Проверка состояния

            Проверяет базу данных (`SELECT 1`) и объектное хранилище.
            Всегда отвечает 200; при недоступной зависимости status=DEGRADED.

            ### Returns:
            * **status**: UP или DEGRADED
            * **database**, **storage**: UP, DOWN: <ошибка> или NOT CONFIGURED
            """,
            responses={200: {"description": "Отчёт о состоянии"}},
        )
        async def health_check(
            health_service: HealthServiceDep = None,
        ) -> HealthCheckSchema:
            return HealthCheckSchema(**await health_service.check())
