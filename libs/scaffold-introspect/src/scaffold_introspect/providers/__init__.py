"""Schema introspection providers."""

from scaffold_introspect.providers.base import SchemaProvider
from scaffold_introspect.providers.sql import SQLSchemaProvider

__all__ = ["SQLSchemaProvider", "SchemaProvider"]
