#!/usr/bin/env python3
"""Example 1: Rendering — Classify columns and render admin declarations.

Demonstrates:
- Describing a table's columns by hand
- How each column is classified into a form widget
- Form, show and grid declarations for the same columns
"""

from scaffold_codegen import classify_column, format_label, generate_form, generate_grid, generate_show
from scaffold_core import ColumnDescriptor, ColumnType

COLUMNS = [
    ColumnDescriptor(name="id", column_type=ColumnType.INTEGER),
    ColumnDescriptor(name="title", column_type=ColumnType.STRING),
    ColumnDescriptor(name="status", column_type=ColumnType.STRING, default="draft"),
    ColumnDescriptor(name="cover", column_type=ColumnType.STRING),
    ColumnDescriptor(name="body", column_type=ColumnType.TEXT),
    ColumnDescriptor(name="is_pinned", column_type=ColumnType.BOOLEAN, default="0"),
    ColumnDescriptor(name="published_at", column_type=ColumnType.DATETIME),
    ColumnDescriptor(name="created_at", column_type=ColumnType.DATETIME),
    ColumnDescriptor(name="updated_at", column_type=ColumnType.DATETIME),
]

RESERVED = {"id", "created_at", "updated_at", "deleted_at"}

# ---------------------------------------------------------------------------
# 1. Classification
# ---------------------------------------------------------------------------

print("Column classification:")
for column in COLUMNS:
    classification = classify_column(column)
    label = format_label(column.name)
    print(f"   {column.name:<14} {classification.field_type:<10} {label!r:<16} {classification.default}")

# ---------------------------------------------------------------------------
# 2. Rendered sections
# ---------------------------------------------------------------------------

print("\n--- form ---")
print(generate_form(COLUMNS, RESERVED))
print("--- show ---")
print(generate_show(COLUMNS))
print("--- grid ---")
print(generate_grid(COLUMNS))
