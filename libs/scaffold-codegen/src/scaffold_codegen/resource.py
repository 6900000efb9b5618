"""Resource generator — binds a model to its table's columns and renders scaffolds."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from scaffold_core.config import ConnectionConfig
from scaffold_core.exceptions import ConnectionNotConfiguredError, InvalidModelError
from scaffold_core.schema.column import ColumnDescriptor
from scaffold_core.schema.model import ModelLike
from scaffold_introspect.providers.base import SchemaProvider
from scaffold_introspect.providers.sql import SQLSchemaProvider

from .render import generate_form, generate_grid, generate_show

logger = logging.getLogger(__name__)

SOFT_DELETE_COLUMN = "deleted_at"


@dataclass(frozen=True)
class ResourceScaffold:
    """Rendered declarations for all three admin sections."""

    form: str
    show: str
    grid: str


class ResourceGenerator:
    """Generates admin scaffolding for the table behind a model.

    Usage::

        generator = ResourceGenerator(
            TableModel(table="users"),
            connection=ConnectionConfig(database="shop", username="root"),
        )
        scaffold = await generator.generate_all()
        print(scaffold.form)
    """

    def __init__(
        self,
        model: object,
        *,
        connection: ConnectionConfig,
        provider: SchemaProvider | None = None,
    ) -> None:
        if not isinstance(model, ModelLike):
            raise InvalidModelError(f"Invalid model [{model!r}] !")
        self.model: ModelLike = model
        self.connection = connection
        self.provider = provider or SQLSchemaProvider()

    @classmethod
    def from_connections(
        cls,
        model: object,
        connections: Mapping[str, ConnectionConfig],
        *,
        provider: SchemaProvider | None = None,
    ) -> ResourceGenerator:
        """Build a generator using the connection named by the model."""
        if not isinstance(model, ModelLike):
            raise InvalidModelError(f"Invalid model [{model!r}] !")
        name = model.get_connection_name()
        if name not in connections:
            raise ConnectionNotConfiguredError(
                f"Connection '{name}' is not configured. Available: {sorted(connections)}"
            )
        return cls(model, connection=connections[name], provider=provider)

    def reserved_columns(self) -> frozenset[str]:
        """Columns managed by the framework and left out of the form."""
        names = {
            self.model.get_key_name(),
            self.model.get_created_at_column(),
            self.model.get_updated_at_column(),
            SOFT_DELETE_COLUMN,
        }
        return frozenset(name for name in names if name)

    def resolve_table(self) -> tuple[str | None, str]:
        """Return ``(database, table)`` for the model, prefixes applied."""
        table = self.connection.table_prefix + self.model.get_table()
        if table.find(".") > 0:
            database, table = table.split(".", 1)
            return database, table
        return None, table

    async def get_table_columns(self) -> list[ColumnDescriptor]:
        """Fetch the model table's columns from the schema provider."""
        database, table = self.resolve_table()
        return await self.provider.list_columns(self.connection, table, schema=database)

    async def generate_form(self) -> str:
        columns = await self.get_table_columns()
        return generate_form(columns, self.reserved_columns())

    async def generate_show(self) -> str:
        columns = await self.get_table_columns()
        return generate_show(columns)

    async def generate_grid(self) -> str:
        columns = await self.get_table_columns()
        return generate_grid(columns)

    async def generate_all(self) -> ResourceScaffold:
        """Fetch the columns once and render every section."""
        columns = await self.get_table_columns()
        logger.debug("Generating scaffold for %s (%d columns)", self.model.get_table(), len(columns))
        return ResourceScaffold(
            form=generate_form(columns, self.reserved_columns()),
            show=generate_show(columns),
            grid=generate_grid(columns),
        )
