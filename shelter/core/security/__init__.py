"""
Модуль безопасности для работы с аутентификацией.

Содержит менеджеры для:
- Токенов (JWT)
- Паролей (хеширование и валидация)
"""

from .password_manager import PasswordManager
from .token_manager import TokenManager

__all__ = [
    "TokenManager",
    "PasswordManager",
]
