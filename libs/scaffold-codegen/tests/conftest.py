"""Shared test fixtures for scaffold-codegen."""

from __future__ import annotations

import pytest
from scaffold_core.schema.column import ColumnDescriptor, ColumnType
from scaffold_core.schema.model import TableModel


@pytest.fixture
def user_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor(name="id", column_type=ColumnType.INTEGER),
        ColumnDescriptor(name="name", column_type=ColumnType.STRING),
        ColumnDescriptor(name="email", column_type=ColumnType.STRING),
        ColumnDescriptor(name="is_admin", column_type=ColumnType.BOOLEAN, default="0"),
        ColumnDescriptor(name="bio", column_type=ColumnType.TEXT),
        ColumnDescriptor(name="created_at", column_type=ColumnType.DATETIME),
        ColumnDescriptor(name="updated_at", column_type=ColumnType.DATETIME),
        ColumnDescriptor(name="deleted_at", column_type=ColumnType.DATETIME),
    ]


@pytest.fixture
def user_model() -> TableModel:
    return TableModel(table="users")


@pytest.fixture
def reserved() -> frozenset[str]:
    return frozenset({"id", "created_at", "updated_at", "deleted_at"})
