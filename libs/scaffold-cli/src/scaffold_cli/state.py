""".scaffold/ directory state management — read/write config files."""

from __future__ import annotations

import json
import os
from pathlib import Path

from scaffold_core.config import ConnectionConfig

from scaffold_cli.config import ScaffoldConfig

SCAFFOLD_DIR = ".scaffold"
CONNECTIONS_FILE = "connections.json"

# Files that may contain credentials and must be owner-only readable.
_SENSITIVE_FILES = frozenset({CONNECTIONS_FILE})

# Directory permission: rwx------ (owner only)
_DIR_MODE = 0o700
# Sensitive file permission: rw------- (owner only)
_SENSITIVE_FILE_MODE = 0o600


def _state_dir(root: Path) -> Path:
    return root / SCAFFOLD_DIR


def _write_json(path: Path, data: object) -> None:
    """Write JSON data to *path*, creating parent directories as needed.

    Files whose name is in ``_SENSITIVE_FILES`` are written with restrictive
    permissions (``0o600``) so that credentials are not world-readable.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    state_dir = path.parent
    if state_dir.name == SCAFFOLD_DIR:
        os.chmod(state_dir, _DIR_MODE)

    content = json.dumps(data, indent=2) + "\n"
    if path.name in _SENSITIVE_FILES:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _SENSITIVE_FILE_MODE)
        try:
            os.write(fd, content.encode("utf-8"))
        finally:
            os.close(fd)
        # O_CREAT mode does not apply to files that already exist
        os.chmod(path, _SENSITIVE_FILE_MODE)
    else:
        path.write_text(content, encoding="utf-8")


def _read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))  # type: ignore[return-value]


def is_initialized(root: Path = Path(".")) -> bool:
    """Check whether .scaffold/ exists and contains a connections.json."""
    return (_state_dir(root) / CONNECTIONS_FILE).is_file()


def init_state(root: Path = Path(".")) -> ScaffoldConfig:
    """Create .scaffold/ with an empty connection registry.

    Returns the ScaffoldConfig that was written.
    """
    state = _state_dir(root)
    state.mkdir(parents=True, exist_ok=True)
    os.chmod(state, _DIR_MODE)

    config = ScaffoldConfig()
    save_connections(config.connections, root)
    return config


def load_config(root: Path = Path(".")) -> ScaffoldConfig:
    """Load the ScaffoldConfig from .scaffold/ files.

    Raises FileNotFoundError if .scaffold/ is not initialized.
    """
    connections_path = _state_dir(root) / CONNECTIONS_FILE
    if not connections_path.is_file():
        raise FileNotFoundError(f"{connections_path} does not exist. Run 'scaffold init' first.")

    raw = _read_json(connections_path)
    return ScaffoldConfig(connections={name: ConnectionConfig.model_validate(cfg) for name, cfg in raw.items()})


def save_connections(connections: dict[str, ConnectionConfig], root: Path = Path(".")) -> None:
    """Persist connection profiles to .scaffold/connections.json."""
    _write_json(
        _state_dir(root) / CONNECTIONS_FILE,
        {name: cfg.model_dump(exclude_defaults=True) for name, cfg in connections.items()},
    )
