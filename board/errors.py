import logging
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any


logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class BoardError(Exception):
    kind: ErrorKind
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(BoardError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Not allowed"


class ValidationError(BoardError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid input"


class NotFound(BoardError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class StorageError(BoardError):
    kind = ErrorKind.STORAGE
    default_message = "File storage is unavailable"


@dataclass(frozen=True)
class ServiceResult:
    value: Any = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, error: BoardError):
        return cls(error=error.kind, message=error.message)


def returns_result(func):
    """Turn a service operation's return value or BoardError into a ServiceResult."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return ServiceResult.success(func(*args, **kwargs))
        except BoardError as e:
            logger.info("%s failed: %s (%s)", func.__name__, e.message, e.kind.value)
            return ServiceResult.failure(e)

    return wrapper
