"""
Enumerations for the Wavefront MTL grammar

Import Policy:
    from wavefront_mtl.config.enums import ReflectionType, ImfChannel

DO NOT use: from wavefront_mtl.config.enums import *
"""

from enum import Enum


class ReflectionType(Enum):
    """Reflection map slots selected by ``refl -type <name>``.

    Options:
        SPHERE: Single spherical environment map
        CUBE_TOP .. CUBE_RIGHT: The six faces of a cube map

    Note:
        The enum value is the literal name used in the file and the
        attribute name of the slot on :class:`Reflection`.
    """
    SPHERE = "sphere"
    CUBE_TOP = "cube_top"
    CUBE_BOTTOM = "cube_bottom"
    CUBE_FRONT = "cube_front"
    CUBE_BACK = "cube_back"
    CUBE_LEFT = "cube_left"
    CUBE_RIGHT = "cube_right"

    @classmethod
    def from_name(cls, name: str) -> "ReflectionType | None":
        """Exact-match lookup; returns None for unknown names."""
        for member in cls:
            if member.value == name:
                return member
        return None


class ImfChannel(Enum):
    """Image channel selected by ``-imfchan``.

    Options:
        R, G, B: Single color channel
        M: Matte channel (default)
        L: Luminance
        Z: Z-depth
    """
    R = "r"
    G = "g"
    B = "b"
    M = "m"
    L = "l"
    Z = "z"

    @classmethod
    def accepts(cls, text: str) -> bool:
        return any(member.value == text for member in cls)
