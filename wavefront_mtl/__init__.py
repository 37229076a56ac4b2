"""Wavefront MTL material decoder

Decodes line-oriented Wavefront .mtl material libraries into typed,
order-preserving material records. Every field remembers whether it was
supplied by the source or left at its default, so callers can overlay
defaults without losing track of what the file actually said.

Key Principles:
- Best-effort decoding: a malformed statement skips that one field
- Provenance on every field, cleared when a material becomes a template
- Standard MTL plus Clara.io PBR and DirectXMesh packed-map statements

Example usage:
    >>> from wavefront_mtl import MaterialLoader
    >>> loader = MaterialLoader()
    >>> loader.loads("newmtl red\\nKd 1 0 0\\n")
    True
    >>> loader.lookup("red").Kd.color.as_tuple()
    (1.0, 0.0, 0.0)

Version: 1.0
"""

__version__ = "1.0"

# Data model
from wavefront_mtl.core import (
    Color,
    Field,
    Material,
    MaterialDocument,
    Model,
    Opacity,
    Reflection,
    Rgb,
    Spectral,
    Texture,
    Uvw,
    Xyz,
    copy_record,
)
from wavefront_mtl.config.enums import ImfChannel, ReflectionType

# Decoding
from wavefront_mtl.parsing import KEYWORD_DECODERS, MaterialLoader

# Output
from wavefront_mtl.utils.trace import format_document, trace

__all__ = [
    # Version
    "__version__",
    # Data model
    "Field",
    "Rgb",
    "Xyz",
    "Uvw",
    "Model",
    "Spectral",
    "Color",
    "Opacity",
    "Texture",
    "Reflection",
    "Material",
    "MaterialDocument",
    "copy_record",
    # Enums
    "ReflectionType",
    "ImfChannel",
    # Decoding
    "MaterialLoader",
    "KEYWORD_DECODERS",
    # Output
    "format_document",
    "trace",
]
