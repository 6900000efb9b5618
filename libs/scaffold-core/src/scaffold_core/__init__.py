"""Scaffold Core — column and model definitions shared by every Scaffold Stack lib."""

from scaffold_core.config import ConnectionConfig
from scaffold_core.exceptions import (
    ConnectionNotConfiguredError,
    IntrospectionError,
    IntrospectionUnavailableError,
    InvalidModelError,
    ScaffoldError,
    SchemaIntrospectionError,
    TableNotFoundError,
)
from scaffold_core.schema import ColumnDescriptor, ColumnType, ModelLike, TableModel
from scaffold_core.security import redact_url

__all__ = [
    "ColumnDescriptor",
    "ColumnType",
    "ConnectionConfig",
    "ConnectionNotConfiguredError",
    "IntrospectionError",
    "IntrospectionUnavailableError",
    "InvalidModelError",
    "ModelLike",
    "ScaffoldError",
    "SchemaIntrospectionError",
    "TableModel",
    "TableNotFoundError",
    "redact_url",
]
