from .base import CurrentUserSchema
from .requests import LoginRequestSchema, RegistrationRequestSchema
from .responses import (TokenDataSchema, TokenResponseSchema, UserResponseSchema,
                        UserSchema)

__all__ = [
    "CurrentUserSchema",
    "RegistrationRequestSchema",
    "LoginRequestSchema",
    "UserSchema",
    "TokenDataSchema",
    "UserResponseSchema",
    "TokenResponseSchema",
]
