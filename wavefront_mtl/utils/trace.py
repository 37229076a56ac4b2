"""Human-readable dump of decoded materials.

Only fields supplied by the source are written, each as the statement that
would produce it. Decoding the output again yields an equal document:
floats are written in their shortest exact form, switches as on/off.
"""

from __future__ import annotations

import sys
from typing import TextIO

from wavefront_mtl.config.yaml_loader import get_default
from wavefront_mtl.core.fields import Field, Triple
from wavefront_mtl.core.material import Color, Material, MaterialDocument, Opacity, Reflection, Texture

# Statement order of a material block
TRACE_ORDER = (
    "Ka", "Kd", "Ks", "Ke",
    "map_Kd", "map_Ka", "map_Ks", "map_Ke", "map_Ns", "map_Pr", "map_Pm", "map_Ps",
    "map_d", "map_bump", "map_Po",
    "Ns", "Tf", "Tr", "sharpness", "d", "disp", "decal", "bump", "illum", "Ni", "refl",
    "Pr", "Pm", "Ps", "Pc", "Pcr", "aniso", "anisor",
    "norm", "map_RMA", "map_ORM",
)

_SWITCH_OPTIONS = ("blendu", "blendv", "clamp", "cc")
_SCALAR_OPTIONS = ("bm", "boost", "texres")
_VECTOR_OPTIONS = ("o", "s", "t")


def format_number(value: float | int) -> str:
    if isinstance(value, bool):
        return format_switch(value)
    if isinstance(value, int):
        return str(value)
    return repr(float(value))


def format_switch(value: bool) -> str:
    return "on" if value else "off"


def format_triple(triple: Triple) -> str:
    return " ".join(format_number(c) for c in triple.as_tuple())


def format_texture(texture: Texture) -> str:
    """Options in canonical order followed by the file."""
    parts = []

    for name in _SWITCH_OPTIONS:
        option = getattr(texture, name)
        if option.parsed:
            parts += [f"-{name}", format_switch(option.value)]

    for name in _SCALAR_OPTIONS:
        option = getattr(texture, name)
        if option.parsed:
            parts += [f"-{name}", format_number(option.value)]

    if texture.mm.parsed:
        parts += ["-mm", str(texture.mm.base), str(texture.mm.gain)]

    for name in _VECTOR_OPTIONS:
        option = getattr(texture, name)
        if option.parsed:
            parts += [f"-{name}", format_triple(option)]

    if texture.imfchan.parsed:
        parts += ["-imfchan", texture.imfchan.value]

    if texture.file.parsed:
        parts.append(texture.file.value)

    return " ".join(parts)


def _color_lines(label: str, color: Color) -> list[str]:
    lines = []
    if color.color.parsed:
        lines.append(f"{label} {format_triple(color.color)}")
    if color.color_space.parsed:
        lines.append(f"{label} xyz {format_triple(color.color_space)}")
    if color.spectral.parsed:
        spectral = color.spectral
        lines.append(f"{label} spectral {spectral.file} {format_number(spectral.factor)}")
    return lines


def _opacity_line(label: str, opacity: Opacity) -> str:
    if opacity.halo:
        return f"{label} -halo {format_number(opacity.d)}"
    return f"{label} {format_number(opacity.d)}"


def _reflection_lines(label: str, reflection: Reflection) -> list[str]:
    return [
        f"{label} -type {kind.value} {format_texture(texture)}"
        for kind, texture in reflection.populated()
    ]


def format_statement(label: str, value) -> list[str]:
    """Statement lines for one provenance-true material attribute."""
    if not value.parsed:
        return []
    if isinstance(value, Color):
        return _color_lines(label, value)
    if isinstance(value, Texture):
        return [f"{label} {format_texture(value)}"]
    if isinstance(value, Opacity):
        return [_opacity_line(label, value)]
    if isinstance(value, Reflection):
        return _reflection_lines(label, value)
    if isinstance(value, Field):
        return [f"{label} {format_number(value.value)}"]
    raise TypeError(f"Cannot format {type(value).__name__} for '{label}'")


def format_material(material: Material, indent: str | None = None) -> list[str]:
    if indent is None:
        indent = get_default("trace.indent", "")

    lines = []
    if material.name.parsed:
        lines.append(f"newmtl {material.name.value}")

    for label in TRACE_ORDER:
        lines += [indent + line for line in format_statement(label, getattr(material, label))]

    return lines


def format_document(document: MaterialDocument, indent: str | None = None) -> str:
    lines = [f"# {info}" if info else "#" for info in document.information]

    for material in document.materials:
        if lines:
            lines.append("")
        lines += format_material(material, indent)

    return "\n".join(lines) + "\n"


def trace(document: MaterialDocument, stream: TextIO | None = None) -> None:
    """Write the canonical dump of ``document`` to ``stream`` (stdout by default)."""
    (stream or sys.stdout).write(format_document(document))
