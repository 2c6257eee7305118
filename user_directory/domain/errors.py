"""Error taxonomy raised by the user directory."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    INTERNAL = "internal"


class UserDirectoryError(Exception):
    """Base class for failures surfaced to callers of the directory service."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(UserDirectoryError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id


class InvalidArgumentError(UserDirectoryError):
    kind = ErrorKind.INVALID_ARGUMENT


class InvalidPageTokenError(InvalidArgumentError):
    def __init__(self, page_token: str) -> None:
        super().__init__(f"Invalid page token: {page_token!r}")
        self.page_token = page_token


class InternalError(UserDirectoryError):
    kind = ErrorKind.INTERNAL


class StorageError(Exception):
    """Raised by persistence adapters when the underlying database fails."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage failure during {operation}{detail}")
        self.operation = operation
