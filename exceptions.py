from enum import Enum as PyEnum
from typing import Optional


class ErrorKind(str, PyEnum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    CONNECTION = "connection"
    CREATE = "create"
    FETCH = "fetch"
    UPDATE = "update"
    DELETE = "delete"


class InventoryError(Exception):
    """Base error for the inventory app.

    The message is safe to show to users. The lower-level error, if any, is
    kept on ``cause`` for logging only.
    """

    kind: ErrorKind = ErrorKind.VALIDATION
    default_message = "inventory error"

    def __init__(self, message: Optional[str] = None, kind: Optional[ErrorKind] = None,
                 cause: Optional[BaseException] = None):
        self.message = message or self.default_message
        if kind is not None:
            self.kind = kind
        self.cause = cause
        super().__init__(self.message)


class ConfigurationError(InventoryError):
    kind = ErrorKind.CONFIGURATION
    default_message = "invalid configuration"


class ValidationError(InventoryError):
    kind = ErrorKind.VALIDATION
    default_message = "invalid input"


class DatabaseConnectionError(InventoryError):
    kind = ErrorKind.CONNECTION
    default_message = "failed to connect to database"


class OperationError(InventoryError):
    kind = ErrorKind.FETCH
    default_message = "operation failed"
