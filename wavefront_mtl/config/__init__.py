"""Configuration Module

Field defaults of the material model (SSOT):
    from wavefront_mtl.config.defaults import DEFAULT_SHARPNESS

Runtime settings (loaded from defaults.yaml):
    from wavefront_mtl.config import get_default, get_defaults

    encoding = get_default('io.encoding')
    level = get_default('logging.level', 'INFO')

Import Policy:
    DO NOT use: from wavefront_mtl.config import *

Submodules:
    defaults: Field default constants
    enums: Grammar enumerations (ReflectionType, ImfChannel)
    yaml_loader: Cached settings from defaults.yaml (get_default, get_defaults)
    validation: Settings schema and ConfigurationError
    loader_config: LoaderConfig dataclass
"""

from wavefront_mtl.config.enums import ImfChannel, ReflectionType
from wavefront_mtl.config.yaml_loader import get_default, get_defaults, reload_defaults
from wavefront_mtl.config.validation import ConfigurationError
from wavefront_mtl.config.loader_config import LoaderConfig

__all__ = [
    # Enums
    "ReflectionType",
    "ImfChannel",
    # Loader configuration
    "LoaderConfig",
    "ConfigurationError",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "reload_defaults",
]
