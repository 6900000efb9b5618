"""Schema models describing introspected tables and the models that own them."""

from scaffold_core.schema.column import ColumnDescriptor, ColumnType
from scaffold_core.schema.model import ModelLike, TableModel

__all__ = [
    "ColumnDescriptor",
    "ColumnType",
    "ModelLike",
    "TableModel",
]
