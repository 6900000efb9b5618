"""Project-level configuration model for Scaffold Stack."""

from __future__ import annotations

from pydantic import BaseModel, Field
from scaffold_core.config import ConnectionConfig


class ScaffoldConfig(BaseModel):
    """Top-level Scaffold Stack project configuration.

    Aggregates the .scaffold/ config files into a single model.
    """

    connections: dict[str, ConnectionConfig] = Field(
        default_factory=dict,
        description="Named database connection profiles.",
    )

    model_config = {"extra": "forbid"}
