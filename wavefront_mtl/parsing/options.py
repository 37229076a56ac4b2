"""Option-flag decoders for texture, dissolve and reflection statements.

Texture lines carry ``-name value...`` options in any order followed by the
image file::

    map_Kd -blendu off -o 0.5 0.5 -mm 0 1 bricks.png

The line is scanned left to right for ``-`` at the start of a token. A
recognized option consumes its arguments and moves the end of the option
block past them. Anything else is stepped over one character at a time,
so unknown options never stop the scan. The trimmed text after the option
block is the file. When that text still opens with an unrecognized option,
the file is its final token.

Option arities:
    -blendu, -blendv, -clamp   on | off
    -bm, -boost, -texres       float
    -mm                        base [gain]
    -o, -s, -t                 u [v [w]]
    -imfchan                   one of r g b m l z

``-cc`` has a field on :class:`Texture` but no option sets it.
"""

from __future__ import annotations

from typing import Callable

from wavefront_mtl.config.enums import ImfChannel, ReflectionType
from wavefront_mtl.core.material import Opacity, Reflection, Texture
from wavefront_mtl.parsing.decoders import decode_float_field, decode_model, decode_triple
from wavefront_mtl.parsing.scanner import (
    WHITESPACE,
    is_token_start,
    next_word,
    scan_float,
    scan_word,
    trim,
)

# (line, cursor after option name, texture) -> (cursor after arguments, applied) or None
OptionHandler = Callable[[str, int, Texture], "tuple[int, bool] | None"]


def _switch(attribute: str) -> OptionHandler:
    def handle(line: str, pos: int, texture: Texture):
        result = scan_word(line, pos)
        if result is None:
            return None
        word, end = result
        if word == "on":
            getattr(texture, attribute).assign(True)
            return end, True
        if word == "off":
            getattr(texture, attribute).assign(False)
            return end, True
        # Consumed but ignored
        return end, False

    return handle


def _float_option(attribute: str) -> OptionHandler:
    def handle(line: str, pos: int, texture: Texture):
        end = decode_float_field(line, pos, getattr(texture, attribute))
        if end is None:
            return None
        return end, True

    return handle


def _triple_option(attribute: str) -> OptionHandler:
    def handle(line: str, pos: int, texture: Texture):
        end = decode_triple(line, pos, getattr(texture, attribute))
        if end is None:
            return None
        return end, True

    return handle


def _mm_option(line: str, pos: int, texture: Texture):
    end = decode_model(line, pos, texture.mm)
    if end is None:
        return None
    return end, True


def _imfchan_option(line: str, pos: int, texture: Texture):
    result = scan_word(line, pos)
    if result is None:
        return None
    word, end = result
    # Unlike a bad on/off word, an invalid channel leaves the option unconsumed
    if not ImfChannel.accepts(word):
        return None
    texture.imfchan.assign(word)
    return end, True


TEXTURE_OPTIONS: dict[str, OptionHandler] = {
    "blendu": _switch("blendu"),
    "blendv": _switch("blendv"),
    "clamp": _switch("clamp"),
    "bm": _float_option("bm"),
    "boost": _float_option("boost"),
    "texres": _float_option("texres"),
    "mm": _mm_option,
    "o": _triple_option("o"),
    "s": _triple_option("s"),
    "t": _triple_option("t"),
    "imfchan": _imfchan_option,
}


def _option_at(line: str, pos: int, origin: int) -> tuple[str, int] | None:
    """Option name starting at ``pos`` and the cursor after it.

    Only a ``-`` opening a token counts, and the name must be followed by
    whitespace.
    """
    if line[pos] != "-" or not is_token_start(line, pos, origin):
        return None
    if pos + 1 >= len(line) or line[pos + 1] in WHITESPACE:
        return None

    name, end = next_word(line, pos + 1)
    if end >= len(line):
        return None
    return name, end


def _trailing_file(remainder: str) -> str:
    text = trim(remainder)
    if text.startswith("-"):
        text = text.split()[-1]
        if text.startswith("-"):
            return ""
    return text


def decode_texture(line: str, pos: int, target: Texture) -> int | None:
    """Decode texture options and the trailing file name.

    Succeeds when at least one option was applied or a file was found.
    """
    cursor = pos
    end = pos
    applied = False

    while cursor < len(line):
        option = _option_at(line, cursor, pos)
        if option is not None:
            name, after = option
            handler = TEXTURE_OPTIONS.get(name)
            result = handler(line, after, target) if handler is not None else None
            if result is not None:
                end, ok = result
                applied = applied or ok
                cursor = end
                continue
        cursor += 1

    file = _trailing_file(line[end:])
    if file:
        target.file.assign(file)
        applied = True

    if not applied:
        return None

    target.mark_parsed()
    return len(line)


def decode_opacity(line: str, pos: int, target: Opacity) -> int | None:
    """Decode ``[-halo] factor``.

    ``-halo`` may appear anywhere on the line and sets the halo flag
    together with the factor that follows it. Without it the line is a
    bare dissolve factor and the halo flag is left alone.
    """
    cursor = pos
    while cursor < len(line):
        option = _option_at(line, cursor, pos)
        if option is not None and option[0] == "halo":
            result = scan_float(line, option[1])
            if result is not None:
                target.d, end = result
                target.halo = True
                target.mark_parsed()
                return end
        cursor += 1

    result = scan_float(line, pos)
    if result is None:
        return None
    target.d, end = result
    target.mark_parsed()
    return end


def decode_reflection(line: str, pos: int, target: Reflection) -> int | None:
    """Decode ``-type <slot>`` followed by a texture into that slot.

    Everything after the slot name is decoded as a full texture. A line
    without ``-type`` or with an unknown slot name is rejected.
    """
    cursor = pos
    while cursor < len(line):
        option = _option_at(line, cursor, pos)
        if option is not None and option[0] == "type":
            result = scan_word(line, option[1])
            if result is None:
                return None
            name, after = result

            kind = ReflectionType.from_name(name)
            if kind is None:
                return None

            end = decode_texture(line, after, target.slot(kind))
            if end is None:
                return None

            target.mark_parsed()
            return end
        cursor += 1

    return None
