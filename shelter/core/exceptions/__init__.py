from .base import BaseAPIException
from .common import (BadRequestError, ConflictError, DatabaseError,
                     NotFoundError)
from .dependencies import ServiceUnavailableException
from .handlers import register_exception_handlers
from .auth import (AuthenticationError, InvalidCredentialsError, TokenError,
                   TokenExpiredError, TokenInvalidError, TokenMissingError,
                   UserExistsError, UserNotFoundError)
from .content import ContentNotFoundError, ContentValidationError
from .storage import (FileSizeExceededError, FileTypeValidationError,
                      InvalidDataURLError, StorageError)

__all__ = [
    # Base
    "BaseAPIException",
    # Common
    "BadRequestError",
    "ConflictError",
    "DatabaseError",
    "NotFoundError",
    # Dependencies
    "ServiceUnavailableException",
    # Handlers
    "register_exception_handlers",
    # Auth
    "AuthenticationError",
    "InvalidCredentialsError",
    "TokenError",
    "TokenMissingError",
    "TokenExpiredError",
    "TokenInvalidError",
    "UserNotFoundError",
    "UserExistsError",
    # Content
    "ContentNotFoundError",
    "ContentValidationError",
    # Storage
    "StorageError",
    "InvalidDataURLError",
    "FileTypeValidationError",
    "FileSizeExceededError",
]
