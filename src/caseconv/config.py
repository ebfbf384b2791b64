"""CLI settings: defaults plus an optional ``caseconv.yaml``.

YAML format:
- style: default style for ``caseconv convert`` (camel, kebab, dot, pascal)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "caseconv.yaml"

DEFAULT_CONFIG: dict[str, str] = {
    "style": "camel",
}


def default_config_path() -> Path:
    return Path.cwd() / CONFIG_FILENAME


def resolve_config(data: dict[str, Any] | None) -> dict[str, str]:
    """Return config dict with defaults filled. Unknown keys are dropped."""
    if data is None:
        return dict(DEFAULT_CONFIG)
    out = dict(DEFAULT_CONFIG)
    out.update({k: str(v) for k, v in data.items() if k in out and v is not None})
    return out


def load_config(path: Path | None = None) -> dict[str, str]:
    """Load settings from YAML at path (default: ./caseconv.yaml).

    A missing file yields the defaults. Raises ValueError if the file cannot be read,
    is not valid YAML, or is not a mapping.
    """
    explicit = path is not None
    config_path = path if path is not None else default_config_path()
    if not config_path.is_file():
        if explicit:
            logger.warning("Config file not found, using defaults: %s", config_path)
        return resolve_config(None)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        msg = f"Failed to parse config {config_path}: {e}"
        raise ValueError(msg) from e
    if data is None:
        return resolve_config(None)
    if not isinstance(data, dict):
        msg = f"Config must be a mapping: {config_path}"
        raise ValueError(msg)
    logger.debug("Loaded config from %s", config_path)
    return resolve_config(data)
