"""Column classification and admin declaration rendering.

Maps each column to a form widget, a label and a default value expression,
and renders one declaration line per column for the form, show and grid
sections of an admin resource.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable
from dataclasses import dataclass

from scaffold_core.schema.column import ColumnDescriptor, ColumnType

FORM_FIELD_FORMAT = "$form->{field_type}('{name}', __('{label}'))"
SHOW_FIELD_FORMAT = "$show->field('{name}', __('{label}'))"
GRID_COLUMN_FORMAT = "$grid->column('{name}', __('{label}'))"

LINE_END = ";\r\n"

# Ordered (widget, pattern) pairs; evaluated top to bottom, first full match wins.
FIELD_TYPE_RULES: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (widget, re.compile(rf"^({pattern})$", re.IGNORECASE))
    for widget, pattern in (
        ("ip", "ip"),
        ("email", "email|mail"),
        ("password", "password|pwd"),
        ("url", "url|link|src|href"),
        ("mobile", "mobile|phone"),
        ("color", "color|rgb"),
        ("image", "image|img|avatar|pic|picture|cover"),
        ("file", "file|attachment"),
    )
)

# Widget for every ColumnType. STRING is refined further by FIELD_TYPE_RULES.
_FIELD_TYPES: dict[ColumnType, str] = {
    ColumnType.BOOLEAN: "switch",
    ColumnType.JSON: "text",
    ColumnType.STRING: "text",
    ColumnType.INTEGER: "number",
    ColumnType.BIGINT: "number",
    ColumnType.SMALLINT: "number",
    ColumnType.FLOAT: "decimal",
    ColumnType.DECIMAL: "decimal",
    ColumnType.DATETIME: "datetime",
    ColumnType.DATE: "date",
    ColumnType.TIME: "time",
    ColumnType.TEXT: "textarea",
    ColumnType.BLOB: "textarea",
    ColumnType.OTHER: "text",
}

# Types whose form default is "now" rather than the stored default.
_CURRENT_TIME_DEFAULTS: dict[ColumnType, str] = {
    ColumnType.DATETIME: "date('Y-m-d H:i:s')",
    ColumnType.DATE: "date('Y-m-d')",
    ColumnType.TIME: "date('H:i:s')",
}

# Types whose stored default is rendered as a quoted string literal.
_QUOTED_DEFAULT_TYPES = frozenset({ColumnType.STRING, ColumnType.OTHER})


@dataclass(frozen=True)
class Classification:
    """Widget and default value expression chosen for a column."""

    field_type: str
    default: str


def match_field_type(name: str) -> str | None:
    """Return the widget of the first rule whose pattern matches all of *name*."""
    for widget, pattern in FIELD_TYPE_RULES:
        if pattern.match(name):
            return widget
    return None


def classify_column(column: ColumnDescriptor) -> Classification:
    """Pick the form widget and default value expression for *column*."""
    field_type = _FIELD_TYPES[column.column_type]
    if column.column_type is ColumnType.STRING:
        field_type = match_field_type(column.name) or field_type

    if column.column_type in _CURRENT_TIME_DEFAULTS:
        default = _CURRENT_TIME_DEFAULTS[column.column_type]
    elif column.column_type in _QUOTED_DEFAULT_TYPES:
        default = f"'{column.default or ''}'"
    else:
        default = column.default or ""

    return Classification(field_type=field_type, default=default)


def format_label(name: str) -> str:
    """Turn a column name into a label.

    Hyphens and underscores become spaces and only the very first character
    is upper-cased: ``first_name`` gives ``First name``. A first character
    whose upper case is not a single character (``ß``) is left alone.
    """
    label = name.replace("-", " ").replace("_", " ")
    first = label[:1].upper()
    if len(first) != 1:
        return label
    return first + label[1:]


def generate_form(columns: Iterable[ColumnDescriptor], reserved: Collection[str]) -> str:
    """Render form field declarations for every column not in *reserved*."""
    output = ""
    for column in columns:
        if column.name in reserved:
            continue
        classification = classify_column(column)
        output += FORM_FIELD_FORMAT.format(
            field_type=classification.field_type,
            name=column.name,
            label=format_label(column.name),
        )
        if classification.default.strip("'\""):
            output += f"->default({classification.default})"
        output += LINE_END
    return output


def generate_show(columns: Iterable[ColumnDescriptor]) -> str:
    """Render show-page field declarations for every column."""
    return "".join(
        SHOW_FIELD_FORMAT.format(name=column.name, label=format_label(column.name)) + LINE_END for column in columns
    )


def generate_grid(columns: Iterable[ColumnDescriptor]) -> str:
    """Render grid column declarations for every column."""
    return "".join(
        GRID_COLUMN_FORMAT.format(name=column.name, label=format_label(column.name)) + LINE_END for column in columns
    )
