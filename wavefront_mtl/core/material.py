"""Material and document records for Wavefront MTL data.

A :class:`Material` aggregates every statement the MTL grammar knows about,
each held in a provenance-carrying record (see :mod:`wavefront_mtl.core.fields`).
A :class:`MaterialDocument` is the ordered result of decoding one file.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterator

import yaml

from wavefront_mtl.config.defaults import (
    DEFAULT_BLENDU,
    DEFAULT_BLENDV,
    DEFAULT_BM,
    DEFAULT_BOOST,
    DEFAULT_CC,
    DEFAULT_CLAMP,
    DEFAULT_DISSOLVE,
    DEFAULT_HALO,
    DEFAULT_ILLUM,
    DEFAULT_IMFCHAN,
    DEFAULT_NI,
    DEFAULT_NS,
    DEFAULT_PBR_FACTOR,
    DEFAULT_SHARPNESS,
    DEFAULT_TEXRES,
    DEFAULT_TR,
)
from wavefront_mtl.config.enums import ReflectionType
from wavefront_mtl.core.fields import (
    Field,
    Model,
    Parsed,
    Rgb,
    Spectral,
    Uvw,
    Xyz,
    copy_record,
    value_field,
)


@dataclass
class Color(Parsed):
    """Color statement (Ka, Kd, Ks, Ke, Tf).

    Each occurrence in the source fills exactly one representation;
    the color counts as parsed once any of them has been filled.

    Attributes:
        color: RGB triple
        color_space: CIE XYZ triple (``xyz`` form)
        spectral: Spectral curve file (``spectral`` form)

    """

    color: Rgb = field(default_factory=Rgb)
    color_space: Xyz = field(default_factory=Xyz)
    spectral: Spectral = field(default_factory=Spectral)


@dataclass
class Opacity(Parsed):
    """Dissolve statement (``d``).

    Attributes:
        d: Dissolve factor, 1.0 is fully opaque
        halo: Dissolve depends on surface orientation (``-halo``)

    """

    d: float = DEFAULT_DISSOLVE
    halo: bool = DEFAULT_HALO


@dataclass
class Texture(Parsed):
    """Texture map statement with its inline options.

    Attributes:
        file: Image file, always the last non-option text on the line
        blendu, blendv: Horizontal / vertical texture blending
        clamp: Restrict texture coordinates to [0, 1]
        cc: Color correction (never set by the grammar, settable by callers)
        bm: Bump multiplier
        boost: Mip-map sharpness boost
        texres: Texture resolution multiplier
        mm: Base/gain value remapping
        o, s, t: Origin offset, scale and turbulence
        imfchan: Channel used for scalar and bump maps

    """

    file: Field[str] = value_field("")
    blendu: Field[bool] = value_field(DEFAULT_BLENDU)
    blendv: Field[bool] = value_field(DEFAULT_BLENDV)
    clamp: Field[bool] = value_field(DEFAULT_CLAMP)
    cc: Field[bool] = value_field(DEFAULT_CC)
    bm: Field[float] = value_field(DEFAULT_BM)
    boost: Field[float] = value_field(DEFAULT_BOOST)
    texres: Field[float] = value_field(DEFAULT_TEXRES)
    mm: Model = field(default_factory=Model)
    o: Uvw = field(default_factory=Uvw)
    s: Uvw = field(default_factory=Uvw)
    t: Uvw = field(default_factory=Uvw)
    imfchan: Field[str] = value_field(DEFAULT_IMFCHAN)


@dataclass
class Reflection(Parsed):
    """Reflection map statement (``refl -type <slot> ...``).

    One source line fills one slot; several lines may fill different
    slots of the same material.
    """

    sphere: Texture = field(default_factory=Texture)
    cube_top: Texture = field(default_factory=Texture)
    cube_bottom: Texture = field(default_factory=Texture)
    cube_front: Texture = field(default_factory=Texture)
    cube_back: Texture = field(default_factory=Texture)
    cube_left: Texture = field(default_factory=Texture)
    cube_right: Texture = field(default_factory=Texture)

    def slot(self, kind: ReflectionType) -> Texture:
        return getattr(self, kind.value)

    def populated(self) -> Iterator[tuple[ReflectionType, Texture]]:
        """Yield the slots that were filled from the source, in slot order."""
        for kind in ReflectionType:
            texture = self.slot(kind)
            if texture.parsed:
                yield kind, texture


@dataclass
class Material:
    """One ``newmtl`` block.

    Attribute names follow the MTL keywords. Standard statements come
    first, followed by the physically based extensions (Clara.io) and the
    packed DirectX maps (map_RMA, map_ORM).
    """

    name: Field[str] = value_field("")
    Kd: Color = field(default_factory=Color)
    Ka: Color = field(default_factory=Color)
    Ks: Color = field(default_factory=Color)
    Tf: Color = field(default_factory=Color)
    Ns: Field[float] = value_field(DEFAULT_NS)
    map_Kd: Texture = field(default_factory=Texture)
    map_Ka: Texture = field(default_factory=Texture)
    map_Ks: Texture = field(default_factory=Texture)
    map_Ns: Texture = field(default_factory=Texture)
    map_Pr: Texture = field(default_factory=Texture)
    map_Pm: Texture = field(default_factory=Texture)
    map_Ps: Texture = field(default_factory=Texture)
    map_d: Texture = field(default_factory=Texture)
    map_bump: Texture = field(default_factory=Texture)
    map_Po: Texture = field(default_factory=Texture)
    sharpness: Field[float] = value_field(DEFAULT_SHARPNESS)
    d: Opacity = field(default_factory=Opacity)
    disp: Texture = field(default_factory=Texture)
    decal: Texture = field(default_factory=Texture)
    bump: Texture = field(default_factory=Texture)
    illum: Field[int] = value_field(DEFAULT_ILLUM)
    Ni: Field[float] = value_field(DEFAULT_NI)
    Tr: Field[float] = value_field(DEFAULT_TR)
    refl: Reflection = field(default_factory=Reflection)
    # Physically based rendering extensions
    Ke: Color = field(default_factory=Color)
    Pr: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    Pm: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    Ps: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    Pc: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    Pcr: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    aniso: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    anisor: Field[float] = value_field(DEFAULT_PBR_FACTOR)
    map_Ke: Texture = field(default_factory=Texture)
    norm: Texture = field(default_factory=Texture)
    # DirectXMesh packed maps
    map_RMA: Texture = field(default_factory=Texture)
    map_ORM: Texture = field(default_factory=Texture)

    def copy(self, *, suppress_provenance: bool = False) -> "Material":
        """Independent copy; ``suppress_provenance`` turns it into a template."""
        return copy_record(self, suppress_provenance=suppress_provenance)

    def to_dict(self, parsed_only: bool = True) -> dict:
        """Convert material to dictionary for inspection or export.

        Args:
            parsed_only: Drop every field that was not supplied by the source

        Returns:
            Dictionary keyed by MTL statement names

        """
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if parsed_only and not value.parsed:
                continue
            data[f.name] = _record_to_plain(value, parsed_only)
        return data


def _record_to_plain(record: Any, parsed_only: bool) -> Any:
    if isinstance(record, Field):
        return record.value

    data = {}
    for f in fields(record):
        if f.name == "parsed":
            continue
        value = getattr(record, f.name)
        if isinstance(value, Parsed):
            if parsed_only and not value.parsed:
                continue
            data[f.name] = _record_to_plain(value, parsed_only)
        else:
            data[f.name] = value
    return data


@dataclass
class MaterialDocument:
    """Ordered materials of one MTL source plus its header comments.

    Attributes:
        materials: Materials in source order
        information: Comment lines found before the first ``newmtl``

    """

    materials: list[Material] = field(default_factory=list)
    information: list[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    def __len__(self) -> int:
        return len(self.materials)

    def lookup(self, name: str) -> Material | None:
        """Return the first named material called ``name``, or None."""
        for material in self.materials:
            if material.name.parsed and material.name.value == name:
                return material
        return None

    def get_material(self, name: str) -> Material:
        """Get material by name.

        Raises:
            KeyError: If material not found

        """
        material = self.lookup(name)
        if material is None:
            available = ", ".join(self.list_materials())
            raise KeyError(
                f"Material '{name}' not found. Available: {available}",
            )
        return material

    def list_materials(self) -> list[str]:
        """List the names of all named materials in source order."""
        return [m.name.value for m in self.materials if m.name.parsed]

    def to_dict(self, parsed_only: bool = True) -> dict:
        return {
            "information": list(self.information),
            "materials": [m.to_dict(parsed_only) for m in self.materials],
        }

    def save_to_yaml(self, yaml_path: str | Path, parsed_only: bool = True) -> None:
        """Save the decoded values to a YAML file.

        Args:
            yaml_path: Path to output YAML file
            parsed_only: Only write fields supplied by the source

        """
        path = Path(yaml_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(parsed_only), f, default_flow_style=False, sort_keys=False)
