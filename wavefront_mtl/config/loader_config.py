"""Loader configuration.

Import Policy:
    from wavefront_mtl.config.loader_config import LoaderConfig
"""

import codecs
from dataclasses import dataclass, field

from wavefront_mtl.config.defaults import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS
from wavefront_mtl.config.validation import ConfigurationError
from wavefront_mtl.config.yaml_loader import get_default


def _default_encoding() -> str:
    return get_default("io.encoding", DEFAULT_ENCODING)


def _default_errors() -> str:
    return get_default("io.errors", DEFAULT_ENCODING_ERRORS)


@dataclass
class LoaderConfig:
    """How a backing .mtl file is opened and decoded to text.

    Attributes:
        encoding: Text codec used to read the file
        errors: Codec error handler ('strict', 'replace', 'ignore', ...)

    """

    encoding: str = field(default_factory=_default_encoding)
    errors: str = field(default_factory=_default_errors)

    def __post_init__(self):
        """Validate codec and error handler names."""
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {self.encoding!r}") from e

        try:
            codecs.lookup_error(self.errors)
        except LookupError as e:
            raise ConfigurationError(f"Unknown codec error handler: {self.errors!r}") from e
