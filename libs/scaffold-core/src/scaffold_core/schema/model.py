"""Model capability consumed by the resource generator.

Any object exposing the lookups of :class:`ModelLike` can drive generation,
so ORM-specific model classes can be adapted without subclassing.
:class:`TableModel` is the plain declarative implementation used by the CLI.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class ModelLike(Protocol):
    """Lookups a model must expose to be scaffolded."""

    def get_table(self) -> str: ...

    def get_key_name(self) -> str: ...

    def get_created_at_column(self) -> str | None: ...

    def get_updated_at_column(self) -> str | None: ...

    def get_connection_name(self) -> str: ...


class TableModel(BaseModel):
    """A table-backed model described by plain values."""

    table: str = Field(min_length=1, description="Table name, optionally qualified as 'database.table'.")
    connection: str = Field(default="default", min_length=1, description="Connection profile name.")
    key_name: str = Field(default="id", min_length=1, description="Primary key column.")
    created_at_column: str | None = Field(default="created_at", description="Creation timestamp column.")
    updated_at_column: str | None = Field(default="updated_at", description="Update timestamp column.")

    model_config = {"extra": "forbid", "frozen": True}

    def get_table(self) -> str:
        return self.table

    def get_key_name(self) -> str:
        return self.key_name

    def get_created_at_column(self) -> str | None:
        return self.created_at_column

    def get_updated_at_column(self) -> str | None:
        return self.updated_at_column

    def get_connection_name(self) -> str:
        return self.connection
