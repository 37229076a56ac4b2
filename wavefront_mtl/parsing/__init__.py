"""MTL decoding engine.

Module structure:
    scanner: trim and cursor-based token/number scanning
    decoders: scalar, triple, base/gain, spectral and color decoders
    options: option-flag decoders (texture, dissolve, reflection)
    dispatch: statement keyword -> decoder table
    loader: MaterialLoader document builder
"""

from wavefront_mtl.parsing.dispatch import KEYWORD_DECODERS, dispatch
from wavefront_mtl.parsing.loader import MaterialLoader
from wavefront_mtl.parsing.options import decode_opacity, decode_reflection, decode_texture
from wavefront_mtl.parsing.decoders import (
    decode_color,
    decode_float_field,
    decode_int_field,
    decode_model,
    decode_spectral,
    decode_triple,
    decode_word_field,
)
from wavefront_mtl.parsing.scanner import next_word, scan_float, scan_int, scan_word, trim

__all__ = [
    # Document builder
    "MaterialLoader",
    "KEYWORD_DECODERS",
    "dispatch",
    # Field decoders
    "decode_int_field",
    "decode_float_field",
    "decode_word_field",
    "decode_triple",
    "decode_model",
    "decode_spectral",
    "decode_color",
    "decode_texture",
    "decode_opacity",
    "decode_reflection",
    # Scanner
    "trim",
    "next_word",
    "scan_int",
    "scan_float",
    "scan_word",
]
