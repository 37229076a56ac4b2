"""
Settings Validation

Checks the contents of defaults.yaml before any of it is used.

Import Policy:
    from wavefront_mtl.config.validation import ConfigurationError, validate_settings

DO NOT use: from wavefront_mtl.config.validation import *
"""

from typing import Any


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


# Section -> key -> accepted value type(s)
SETTINGS_SCHEMA: dict[str, dict[str, type | tuple[type, ...]]] = {
    "io": {"encoding": str, "errors": str},
    "logging": {"level": (str, int), "format": str},
    "trace": {"indent": str},
}


def validate_settings(data: Any, source: str = "defaults.yaml") -> dict[str, dict[str, Any]]:
    """Validate the parsed YAML settings document.

    Every section is optional, but unknown sections or keys and values of
    the wrong type are rejected so that a typo in the file does not
    silently fall back to a built-in default.

    Args:
        data: Result of ``yaml.safe_load`` (None for an empty file)
        source: Name used in error messages

    Returns:
        The settings, ``{}`` for an empty file

    Raises:
        ConfigurationError: Listing every problem found
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{source}: expected a mapping of sections, got {type(data).__name__}")

    errors = []
    for section, values in data.items():
        schema = SETTINGS_SCHEMA.get(section)
        if schema is None:
            errors.append(f"unknown section '{section}'")
            continue
        if not isinstance(values, dict):
            errors.append(f"section '{section}' must be a mapping")
            continue

        for key, value in values.items():
            expected = schema.get(key)
            if expected is None:
                errors.append(f"unknown key '{section}.{key}'")
            elif isinstance(value, bool) or not isinstance(value, expected):
                errors.append(f"'{section}.{key}' has invalid value {value!r}")

    if errors:
        raise ConfigurationError(
            f"{source} failed validation with {len(errors)} error(s):\n"
            + "\n".join(f"  - {err}" for err in errors)
        )

    return data
