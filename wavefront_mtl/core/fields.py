"""Provenance-carrying values for the material model.

Every attribute of a material remembers whether it was supplied by the
source text (``parsed``) or is still sitting at its default. Decoding a
value always marks it parsed; copying a record either carries the flags
over verbatim or, for default templates, clears every one of them.

Example usage:
    >>> ka = Rgb()
    >>> ka.assign(1.0, 0.0, 0.0)
    >>> ka.parsed
    True
    >>> ka.copy(suppress_provenance=True).parsed
    False
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, ClassVar, Generic, TypeVar

import numpy as np

from wavefront_mtl.config.defaults import (
    DEFAULT_MM_BASE,
    DEFAULT_MM_GAIN,
    DEFAULT_SPECTRAL_FACTOR,
)

T = TypeVar("T")


def copy_record(record: Any, *, suppress_provenance: bool = False) -> Any:
    """Deep-copy a dataclass record, nested records included.

    Args:
        record: Field, composite or Material to copy
        suppress_provenance: If True, every provenance flag in the copy is
            cleared while the values are kept

    Returns:
        Independent copy of ``record``

    """
    clone = copy.copy(record)

    for f in fields(record):
        value = getattr(record, f.name)
        if is_dataclass(value):
            setattr(clone, f.name, copy_record(value, suppress_provenance=suppress_provenance))

    if suppress_provenance and isinstance(clone, Parsed):
        clone.parsed = False

    return clone


@dataclass
class Parsed:
    """Base for anything that tracks whether it came from the source text."""

    parsed: bool = field(default=False, init=False)

    def mark_parsed(self, flag: bool = True) -> bool:
        self.parsed = flag
        return flag

    def copy(self, *, suppress_provenance: bool = False):
        return copy_record(self, suppress_provenance=suppress_provenance)


@dataclass
class Field(Parsed, Generic[T]):
    """A single value plus its provenance flag."""

    value: T = None

    def assign(self, value: T) -> None:
        """Store a decoded or explicitly set value and mark it parsed."""
        self.value = value
        self.parsed = True


def value_field(default: Any):
    """Dataclass field holding a fresh ``Field(default)`` per instance."""
    return field(default_factory=lambda: Field(default))


@dataclass
class Triple(Parsed):
    """Three floating-point components sharing one provenance flag."""

    COMPONENTS: ClassVar[tuple[str, str, str]] = ()

    def assign(self, first: float, second: float, third: float) -> None:
        for name, component in zip(self.COMPONENTS, (first, second, third)):
            setattr(self, name, component)
        self.parsed = True

    def as_tuple(self) -> tuple[float, float, float]:
        return tuple(getattr(self, name) for name in self.COMPONENTS)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=np.float64)


@dataclass
class Rgb(Triple):
    """Color as red, green, blue [0..1]."""

    COMPONENTS: ClassVar[tuple[str, str, str]] = ("r", "g", "b")

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


@dataclass
class Xyz(Triple):
    """Color as CIE XYZ tristimulus values."""

    COMPONENTS: ClassVar[tuple[str, str, str]] = ("x", "y", "z")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Uvw(Triple):
    """Texture-space vector (origin offset, scale or turbulence)."""

    COMPONENTS: ClassVar[tuple[str, str, str]] = ("u", "v", "w")

    u: float = 0.0
    v: float = 0.0
    w: float = 0.0


@dataclass
class Model(Parsed):
    """Texture value remapping for ``-mm``.

    Attributes:
        base: Value added to every texel
        gain: Contrast multiplier applied to every texel

    """

    base: int = DEFAULT_MM_BASE
    gain: int = DEFAULT_MM_GAIN

    def assign(self, base: int, gain: int | None = None) -> None:
        self.base = base
        if gain is not None:
            self.gain = gain
        self.parsed = True


@dataclass
class Spectral(Parsed):
    """Color given by a spectral curve file (.rfl) and a scale factor."""

    file: str = ""
    factor: float = DEFAULT_SPECTRAL_FACTOR

    def assign(self, file: str, factor: float | None = None) -> None:
        self.file = file
        if factor is not None:
            self.factor = factor
        self.parsed = True
