"""scaffold-codegen — Admin form, show and grid scaffolding for Scaffold Stack."""

from .render import (
    FIELD_TYPE_RULES,
    Classification,
    classify_column,
    format_label,
    generate_form,
    generate_grid,
    generate_show,
)
from .resource import ResourceGenerator, ResourceScaffold

__all__ = [
    "FIELD_TYPE_RULES",
    "Classification",
    "ResourceGenerator",
    "ResourceScaffold",
    "classify_column",
    "format_label",
    "generate_form",
    "generate_grid",
    "generate_show",
]
