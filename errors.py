"""
errors.py
---------
Exception hierarchy shared by every layer.
Repositories never retry and never swallow these; callers decide.
"""

from typing import Optional


def _collapse(sql: str) -> str:
    return " ".join(sql.split())


class PostbookError(Exception):
    """Base exception for all postbook errors."""


class ConfigError(PostbookError):
    """Raised when a configuration value is invalid."""


class InvalidLimitError(PostbookError, ValueError):
    """Raised when a query limit is not an integer."""

    def __init__(self, limit: object):
        self.limit = limit
        super().__init__(f"limit must be an integer, got {limit!r}")


class MalformedIdentifierError(PostbookError, ValueError):
    """Raised when a stored identifier cannot be parsed back into a ULID."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"malformed identifier: {value!r}")


class NotFoundError(PostbookError):
    """Raised when a read expected at least one row and got none."""

    def __init__(self, operation: str, statement=None, detail: str = "not found"):
        self.operation = operation
        self.statement = statement
        self.detail = detail
        message = f"{operation}: {detail}"
        if statement is not None:
            message += f" ({_collapse(statement.sql)})"
        super().__init__(message)


class ExecutionError(PostbookError):
    """
    Raised when the store rejects or fails to run a statement.

    Attributes:
        operation: Repository operation that issued the statement.
        statement: The attempted ``Statement``.
        cause: The underlying driver exception.
    """

    def __init__(self, operation: str, statement, cause: Optional[BaseException] = None):
        self.operation = operation
        self.statement = statement
        self.cause = cause
        sql = _collapse(statement.sql) if statement is not None else "<none>"
        super().__init__(f"{operation}: failed to {sql}: {cause}")


class QueryCanceledError(ExecutionError):
    """Raised when a statement is cancelled by its deadline."""
