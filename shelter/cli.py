"""
Командная строка для обслуживания приложения.

Команды:
    migrate       - Создать отсутствующие таблицы
    create-admin  - Создать администратора (или повысить существующего пользователя)
    serve         - Запустить HTTP сервер

Usage:
    python -m shelter.cli migrate
    python -m shelter.cli create-admin --email admin@example.org --password secret123
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from shelter.core.connections.database import (DatabaseClient,
                                               DatabaseContextManager)
from shelter.core.logging import setup_logging
from shelter.core.settings import settings
from shelter.services.v1.auth import AuthService

logger = logging.getLogger("shelter.cli")


async def migrate() -> None:
    db_client = DatabaseClient(settings)
    try:
        await db_client.create_tables()
    finally:
        await db_client.close()


async def create_admin(email: str, password: str) -> None:
    """
    Создаёт таблицы (если нужно) и администратора.

    Args:
        email: Email администратора.
        password: Пароль администратора.
    """
    await migrate()
    async with DatabaseContextManager(settings) as session:
        user = await AuthService(session).create_admin(email, password)
        logger.info("Администратор готов: id=%s email=%s", user.id, user.email)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shelter", description="Обслуживание Cows Shelter Backend"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Создать таблицы базы данных")

    admin_parser = subparsers.add_parser("create-admin", help="Создать администратора")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)

    subparsers.add_parser("serve", help="Запустить HTTP сервер")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    if args.command == "migrate":
        asyncio.run(migrate())
    elif args.command == "create-admin":
        if len(args.password) < settings.PASSWORD_MIN_LENGTH:
            logger.error(
                "Пароль должен быть не короче %d символов", settings.PASSWORD_MIN_LENGTH
            )
            return 1
        asyncio.run(create_admin(args.email, args.password))
    elif args.command == "serve":
        import uvicorn

        uvicorn.run("shelter.main:app", **settings.uvicorn_params)
    return 0


if __name__ == "__main__":
    sys.exit(main())
