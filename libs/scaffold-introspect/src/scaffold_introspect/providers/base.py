"""Abstract base for schema introspection providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from scaffold_core.config import ConnectionConfig
from scaffold_core.schema.column import ColumnDescriptor


class SchemaProvider(ABC):
    """Protocol for schema introspection providers.

    A provider connects to a database, reads the column metadata of one
    table, and returns it in physical column order.
    """

    @abstractmethod
    async def list_columns(
        self,
        connection: ConnectionConfig,
        table: str,
        *,
        schema: str | None = None,
    ) -> list[ColumnDescriptor]:
        """Read the columns of *table*.

        Args:
            connection: Where the table lives.
            table: Unqualified table name, prefix already applied.
            schema: Optional database/schema qualifier.

        Returns:
            Column descriptors in the order the database reports them.
        """
