"""Domain exceptions for Scaffold Stack.

Driver-level errors raised during introspection are caught and re-raised as
one of these so callers never see raw database exceptions.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for all Scaffold Stack errors."""


class InvalidModelError(ScaffoldError, ValueError):
    """Raised when a value does not satisfy the model capability."""


class ConnectionNotConfiguredError(ScaffoldError, KeyError):
    """Raised when no connection configuration exists for a model's connection name."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class IntrospectionError(ScaffoldError):
    """Base exception for schema-introspection failures.

    Attributes:
        table: The table being introspected.
        detail: A sanitised description of what went wrong.
    """

    def __init__(
        self,
        *,
        table: str,
        detail: str,
        cause: Exception | None = None,
    ) -> None:
        self.table = table
        self.detail = detail
        super().__init__(f"[{table}] introspection failed: {detail}")
        if cause is not None:
            self.__cause__ = cause


class IntrospectionUnavailableError(IntrospectionError):
    """Raised when the database dialect or driver needed for introspection is not installed."""


class TableNotFoundError(IntrospectionError):
    """Raised when the requested table does not exist."""


class SchemaIntrospectionError(IntrospectionError):
    """Raised for any other failure while reading column metadata."""
