"""
Shared transform defaults.

Loads defaults from config/transform_defaults.json (single source of truth).
Option normalization (validation.py) and the default blueprint repository
(adapters/blueprints.py) read from here.
"""

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

# Package root (where this file lives)
_PACKAGE_ROOT = Path(__file__).parent

CONFIG_PATH = _PACKAGE_ROOT / "config" / "transform_defaults.json"

# Overrides the configured blueprints_dir
BLUEPRINTS_ENV_VAR = "OPTIMUS_BARD_BLUEPRINTS"


@lru_cache(maxsize=1)
def get_transform_config() -> dict[str, Any]:
    """
    Load transform defaults from the JSON config file.

    Cached for performance - config doesn't change during runtime.
    """
    config: dict[str, Any] = json.loads(CONFIG_PATH.read_text())
    return config


def get_blueprints_dir() -> Path:
    """
    Directory holding blueprint YAML files.

    OPTIMUS_BARD_BLUEPRINTS wins over the config file. Relative paths are
    resolved against the current working directory.
    """
    configured = os.environ.get(BLUEPRINTS_ENV_VAR) or get_transform_config().get(
        "blueprints_dir", "resources/blueprints"
    )
    return Path(configured).expanduser()


def clear_config_cache() -> None:
    """Reload config on next access (tests)."""
    get_transform_config.cache_clear()
