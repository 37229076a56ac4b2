"""Document builder for Wavefront MTL sources.

Decoding is line oriented and best effort: a statement whose value does
not decode is skipped and leaves its field untouched, unknown statements
are ignored, and the load only fails when no material was ever named.

Usage:
    loader = MaterialLoader()
    if loader.load("scene.mtl"):
        for material in loader.materials:
            print(material.name.value)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from wavefront_mtl.config.loader_config import LoaderConfig
from wavefront_mtl.core.material import Material, MaterialDocument
from wavefront_mtl.parsing.dispatch import dispatch, is_known_keyword, split_keyword
from wavefront_mtl.parsing.scanner import trim

logger = logging.getLogger(__name__)

NEW_MATERIAL = "newmtl"
COMMENT = "#"


class MaterialLoader:
    """Builds a :class:`MaterialDocument` from MTL text.

    The first material held by the loader is the default template for the
    next load: every new material starts as a copy of it with all
    provenance flags cleared. A loader constructed without a template uses
    ``Material()``; after a load the first decoded material becomes the
    template for the following one. The sentinel is seeded on construction,
    so lines can be fed to :meth:`decode` straight away.

    Args:
        default_material: Template whose values seed every new material
        config: File encoding settings used by :meth:`load`

    """

    def __init__(
        self,
        default_material: Material | None = None,
        config: LoaderConfig | None = None,
    ):
        self.config = config or LoaderConfig()
        self.document = MaterialDocument()
        self.path: Path | None = None
        self._template = Material()
        self._line_number = 0

        if default_material is not None:
            self.document.materials.append(default_material.copy())

        self.begin()

    @property
    def materials(self) -> list[Material]:
        return self.document.materials

    @property
    def information(self) -> list[str]:
        return self.document.information

    def lookup(self, name: str) -> Material | None:
        return self.document.lookup(name)

    def default_material(self) -> Material:
        """Template for new materials, with every provenance flag cleared."""
        if not self.document.materials:
            return Material()
        return self.document.materials[0].copy(suppress_provenance=True)

    def begin(self) -> None:
        """Start a new document seeded with the sentinel material."""
        self._template = self.default_material()
        self._line_number = 0
        self.document = MaterialDocument(materials=[self._template.copy()])

    def decode(self, line: str | bytes) -> bool:
        """Decode one source line into the document.

        Returns:
            True if the line changed the document, False if it was blank,
            unknown, or its value did not decode

        """
        if isinstance(line, bytes):
            line = line.decode(self.config.encoding, self.config.errors)

        self._line_number += 1
        text = trim(line)
        if not text:
            return False

        current = self.document.materials[-1]

        if text.startswith(COMMENT):
            if current.name.parsed:
                return False
            self.document.information.append(trim(text[len(COMMENT):]))
            return True

        keyword, arguments = split_keyword(text)

        if keyword == NEW_MATERIAL:
            if current.name.parsed:
                current = self._template.copy()
                self.document.materials.append(current)
            current.name.assign(trim(arguments))
            return True

        if not is_known_keyword(keyword):
            logger.debug(f"line {self._line_number}: ignoring unknown statement {keyword!r}")
            return False

        if not dispatch(text, current):
            logger.debug(f"line {self._line_number}: could not decode {text!r}")
            return False

        return True

    def finalize(self) -> MaterialDocument | None:
        """Return the document if at least one material was named."""
        materials = self.document.materials
        if materials and materials[0].name.parsed:
            return self.document
        return None

    def load_lines(self, lines: Iterable[str | bytes]) -> bool:
        """Decode a complete source given as an iterable of lines."""
        self.begin()
        for line in lines:
            self.decode(line)

        document = self.finalize()
        if document is None:
            logger.debug("no named material found")
            return False

        logger.info(
            f"Decoded {len(document)} material(s) and "
            f"{len(document.information)} header line(s)"
            + (f" from {self.path}" if self.path else "")
        )
        return True

    def loads(self, text: str) -> bool:
        """Decode MTL text held in memory."""
        self.path = None
        return self.load_lines(text.splitlines())

    def load(self, path: str | Path) -> bool:
        """Decode the MTL file at ``path``.

        Returns:
            False if the file cannot be read or names no material

        """
        self.path = Path(path)
        try:
            with open(self.path, encoding=self.config.encoding, errors=self.config.errors) as f:
                return self.load_lines(f)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            return False
