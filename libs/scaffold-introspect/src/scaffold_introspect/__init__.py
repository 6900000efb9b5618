"""scaffold-introspect — Table column introspection for Scaffold Stack."""

from scaffold_introspect.providers.base import SchemaProvider
from scaffold_introspect.providers.sql import SQLSchemaProvider

__all__ = [
    "SQLSchemaProvider",
    "SchemaProvider",
]
