"""Line trimming and token scanning.

All scanners work on an immutable line and an integer cursor. On success
they return ``(value, new_cursor)`` with the cursor just past the consumed
text; on failure they return None and the caller keeps its old cursor.

Numbers follow C ``strtol``/``strtod`` longest-valid-prefix rules: leading
whitespace is skipped and ``"0.5abc"`` yields 0.5 with the cursor on ``a``.
"""

from __future__ import annotations

import re

# C locale isspace()
WHITESPACE = " \t\n\r\f\v"

_INT_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\r\f\v]*"
    r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def trim(line: str) -> str:
    """Strip surrounding whitespace; text after an embedded NUL is dropped."""
    return line.split("\0", 1)[0].strip(WHITESPACE)


def skip_whitespace(line: str, pos: int) -> int:
    n = len(line)
    while pos < n and line[pos] in WHITESPACE:
        pos += 1
    return pos


def next_word(line: str, pos: int) -> tuple[str, int]:
    """Extract the next whitespace-delimited token.

    Returns:
        (token, cursor after token), or ("", pos) when only whitespace remains

    """
    start = skip_whitespace(line, pos)
    end = start
    n = len(line)
    while end < n and line[end] not in WHITESPACE:
        end += 1

    if start == end:
        return "", pos

    return line[start:end], end


def scan_word(line: str, pos: int) -> tuple[str, int] | None:
    word, end = next_word(line, pos)
    if not word:
        return None
    return word, end


def scan_int(line: str, pos: int) -> tuple[int, int] | None:
    match = _INT_RE.match(line, pos)
    if match is None:
        return None
    return int(match.group(1)), match.end()


def scan_float(line: str, pos: int) -> tuple[float, int] | None:
    match = _FLOAT_RE.match(line, pos)
    if match is None:
        return None
    return float(match.group(1)), match.end()


def starts_keyword(line: str, pos: int, keyword: str) -> int | None:
    """Match ``keyword`` at ``pos`` when it is followed by whitespace.

    Returns:
        Cursor just past the keyword, or None if it does not match

    """
    end = pos + len(keyword)
    if line.startswith(keyword, pos) and end < len(line) and line[end] in WHITESPACE:
        return end
    return None


def is_token_start(line: str, pos: int, origin: int = 0) -> bool:
    """True when ``pos`` is the first character of a token."""
    return pos == origin or line[pos - 1] in WHITESPACE
