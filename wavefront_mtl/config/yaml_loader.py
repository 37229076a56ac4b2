"""Runtime settings read from defaults.yaml.

All sections are optional:

    io        encoding and decode-error handler for .mtl files
    logging   level and format used by the command line
    trace     indent of statements under ``newmtl`` in a dump

The file is read and validated once, then cached. Setting
WAVEFRONT_MTL_DEFAULTS_PATH replaces the packaged file; call
reload_defaults() after changing it.

Usage:
    from wavefront_mtl.config.yaml_loader import get_default
    encoding = get_default('io.encoding', 'utf-8')
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from wavefront_mtl.config.validation import validate_settings

ENV_DEFAULTS_PATH = "WAVEFRONT_MTL_DEFAULTS_PATH"
PACKAGED_DEFAULTS = Path(__file__).with_name("defaults.yaml")

_settings: dict[str, dict[str, Any]] | None = None


def settings_path() -> Path:
    """The environment override if set, else the packaged defaults.yaml."""
    override = os.getenv(ENV_DEFAULTS_PATH)
    return Path(override) if override else PACKAGED_DEFAULTS


def _read_settings() -> dict[str, dict[str, Any]]:
    path = settings_path()
    with open(path, encoding="utf-8") as f:
        return validate_settings(yaml.safe_load(f), source=str(path))


def _cached_settings() -> dict[str, dict[str, Any]]:
    global _settings
    if _settings is None:
        _settings = _read_settings()
    return _settings


def get_defaults() -> dict[str, dict[str, Any]]:
    """Independent copy of every section of the settings file."""
    return copy.deepcopy(_cached_settings())


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up ``'section.key'``, returning ``default`` when it is not set.

    Example:
        >>> get_default('io.errors')
        'replace'
        >>> get_default('trace.width', 80)
        80
    """
    section, _, key = key_path.partition(".")
    value = _cached_settings().get(section, {}).get(key)
    return default if value is None else value


def reload_defaults() -> None:
    """Re-read the settings file, picking up a changed override path."""
    global _settings
    _settings = _read_settings()
