"""scaffold-cli — Typer-based CLI for Scaffold Stack."""

from scaffold_cli.config import ScaffoldConfig
from scaffold_cli.state import init_state, is_initialized, load_config, save_connections

__all__ = [
    "ScaffoldConfig",
    "init_state",
    "is_initialized",
    "load_config",
    "save_connections",
]
