"""Column metadata produced by schema introspection."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ColumnType(str, Enum):
    """Declared type of a table column, as seen by the scaffolder.

    ``INTEGER``, ``BIGINT`` and ``SMALLINT`` are kept apart so introspection
    stays faithful to the database, but they are classified uniformly.
    ``OTHER`` covers every type the introspector could not place.
    """

    BOOLEAN = "boolean"
    JSON = "json"
    STRING = "string"
    INTEGER = "integer"
    BIGINT = "bigint"
    SMALLINT = "smallint"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    TEXT = "text"
    BLOB = "blob"
    OTHER = "other"


class ColumnDescriptor(BaseModel):
    """Schema metadata for a single table column."""

    name: str = Field(min_length=1, description="Column name as stored in the database.")
    column_type: ColumnType = Field(description="Declared type of the column.")
    default: str | None = Field(default=None, description="Stored default value, unquoted.")

    model_config = {"extra": "forbid", "frozen": True}
