"""Keyword dispatch for material statements.

Maps the leading keyword of a statement to the decoder for the material
attribute of the same name. ``newmtl`` and comments are handled by the
loader, not here.
"""

from __future__ import annotations

from typing import Any, Callable

from wavefront_mtl.core.material import Material
from wavefront_mtl.parsing.decoders import (
    decode_color,
    decode_float_field,
    decode_int_field,
)
from wavefront_mtl.parsing.options import decode_opacity, decode_reflection, decode_texture
from wavefront_mtl.parsing.scanner import next_word

FieldDecoder = Callable[[str, int, Any], "int | None"]

# Statement keyword -> decoder; the keyword is also the Material attribute
KEYWORD_DECODERS: dict[str, FieldDecoder] = {
    "Kd": decode_color,
    "Ka": decode_color,
    "Ks": decode_color,
    "Tf": decode_color,
    "Ns": decode_float_field,
    "map_Kd": decode_texture,
    "map_Ka": decode_texture,
    "map_Ks": decode_texture,
    "map_Ns": decode_texture,
    "map_Pr": decode_texture,
    "map_Pm": decode_texture,
    "map_Ps": decode_texture,
    "map_d": decode_texture,
    "map_bump": decode_texture,
    "map_Po": decode_texture,
    "sharpness": decode_float_field,
    "d": decode_opacity,
    "disp": decode_texture,
    "decal": decode_texture,
    "bump": decode_texture,
    "illum": decode_int_field,
    "Ni": decode_float_field,
    "Tr": decode_float_field,
    "refl": decode_reflection,
    "Ke": decode_color,
    "Pr": decode_float_field,
    "Pm": decode_float_field,
    "Ps": decode_float_field,
    "Pc": decode_float_field,
    "Pcr": decode_float_field,
    "aniso": decode_float_field,
    "anisor": decode_float_field,
    "map_Ke": decode_texture,
    "norm": decode_texture,
    "map_RMA": decode_texture,
    "map_ORM": decode_texture,
}


def split_keyword(line: str) -> tuple[str, str]:
    """Split a trimmed statement into its keyword and argument text."""
    keyword, end = next_word(line, 0)
    return keyword, line[end:]


def is_known_keyword(keyword: str) -> bool:
    return keyword in KEYWORD_DECODERS


def dispatch(line: str, material: Material) -> bool:
    """Decode one trimmed statement into ``material``.

    Returns:
        True if the keyword is known, has arguments, and its value decoded;
        False otherwise, in which case ``material`` is unchanged

    """
    keyword, arguments = split_keyword(line)
    decoder = KEYWORD_DECODERS.get(keyword)
    if decoder is None or not arguments:
        return False

    return decoder(arguments, 0, getattr(material, keyword)) is not None
