"""Material data model.

Module structure:
    fields: Field, provenance-preserving copy, triples, Model, Spectral
    material: Color, Opacity, Texture, Reflection, Material, MaterialDocument

Example usage:
    >>> from wavefront_mtl.core import Material
    >>> material = Material()
    >>> material.sharpness.value, material.sharpness.parsed
    (60.0, False)
"""

from .fields import (
    Field,
    Model,
    Parsed,
    Rgb,
    Spectral,
    Triple,
    Uvw,
    Xyz,
    copy_record,
)
from .material import (
    Color,
    Material,
    MaterialDocument,
    Opacity,
    Reflection,
    Texture,
)

__all__ = [
    # Provenance primitives
    "Parsed",
    "Field",
    "copy_record",
    # Composite values
    "Triple",
    "Rgb",
    "Xyz",
    "Uvw",
    "Model",
    "Spectral",
    "Color",
    "Opacity",
    "Texture",
    "Reflection",
    # Aggregates
    "Material",
    "MaterialDocument",
]
