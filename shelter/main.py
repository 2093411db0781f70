"""Точка входа ASGI: ``uvicorn shelter.main:app``."""

from fastapi import FastAPI

from shelter.core.exceptions import register_exception_handlers
from shelter.core.lifespan import lifespan
from shelter.core.logging import setup_logging
from shelter.core.middlewares import setup_middlewares
from shelter.core.settings import settings
from shelter.routers import setup_routers


def create_application() -> FastAPI:
    """
    Собирает приложение: логирование, обработчики ошибок, middleware, роуты.

    Фабрика сессий и хранилище появляются в app.state в lifespan; до этого
    там None (хранилище остаётся None, если не настроено).
    """
    setup_logging()
    app = FastAPI(**settings.app_params, lifespan=lifespan)
    app.state.session_factory = None
    app.state.storage = None

    register_exception_handlers(app=app)
    setup_middlewares(app)
    setup_routers(app)
    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, **settings.uvicorn_params)
