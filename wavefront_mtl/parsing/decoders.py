"""Field decoders for scalar, triple and color statements.

Every decoder has the signature ``decoder(line, pos, target) -> int | None``.
On success the target is updated, marked parsed, and the cursor just past
the consumed text is returned. On failure None is returned and the target
is left exactly as it was.
"""

from __future__ import annotations

from wavefront_mtl.core.fields import Field, Model, Spectral, Triple
from wavefront_mtl.core.material import Color
from wavefront_mtl.parsing.scanner import (
    scan_float,
    scan_int,
    scan_word,
    skip_whitespace,
    starts_keyword,
)


def decode_int_field(line: str, pos: int, target: Field[int]) -> int | None:
    result = scan_int(line, pos)
    if result is None:
        return None
    value, end = result
    target.assign(value)
    return end


def decode_float_field(line: str, pos: int, target: Field[float]) -> int | None:
    result = scan_float(line, pos)
    if result is None:
        return None
    value, end = result
    target.assign(value)
    return end


def decode_word_field(line: str, pos: int, target: Field[str]) -> int | None:
    result = scan_word(line, pos)
    if result is None:
        return None
    value, end = result
    target.assign(value)
    return end


def decode_triple(line: str, pos: int, target: Triple) -> int | None:
    """Decode one to three floats into an RGB, XYZ or UVW triple.

    A single value is broadcast to all three components. With two values
    the third component repeats the first one, not the second.
    """
    first = scan_float(line, pos)
    if first is None:
        return None
    a, end = first

    second = scan_float(line, end)
    if second is None:
        target.assign(a, a, a)
        return end
    b, end = second

    third = scan_float(line, end)
    if third is None:
        target.assign(a, b, a)
        return end
    c, end = third

    target.assign(a, b, c)
    return end


def decode_model(line: str, pos: int, target: Model) -> int | None:
    """Decode ``base [gain]`` integers; a missing gain keeps its old value."""
    base = scan_int(line, pos)
    if base is None:
        return None
    base_value, end = base

    gain = scan_int(line, end)
    if gain is None:
        target.assign(base_value)
        return end
    gain_value, end = gain

    target.assign(base_value, gain_value)
    return end


def decode_spectral(line: str, pos: int, target: Spectral) -> int | None:
    """Decode ``file [factor]``; a missing factor keeps its old value."""
    file = scan_word(line, pos)
    if file is None:
        return None
    file_value, end = file

    factor = scan_float(line, end)
    if factor is None:
        target.assign(file_value)
        return end
    factor_value, end = factor

    target.assign(file_value, factor_value)
    return end


def decode_color(line: str, pos: int, target: Color) -> int | None:
    """Decode a color in its ``spectral``, ``xyz`` or plain RGB form."""
    start = skip_whitespace(line, pos)

    after = starts_keyword(line, start, "spectral")
    if after is not None:
        end = decode_spectral(line, after, target.spectral)
    else:
        after = starts_keyword(line, start, "xyz")
        if after is not None:
            end = decode_triple(line, after, target.color_space)
        else:
            end = decode_triple(line, start, target.color)

    if end is None:
        return None

    target.mark_parsed()
    return end
