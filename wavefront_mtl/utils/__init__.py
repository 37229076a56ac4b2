"""Utilities package."""

from wavefront_mtl.utils.trace import (
    format_document,
    format_material,
    format_texture,
    trace,
)
from wavefront_mtl.utils.visualization import (
    material_color_grid,
    plot_material_swatches,
)

__all__ = [
    'format_document',
    'format_material',
    'format_texture',
    'trace',
    'material_color_grid',
    'plot_material_swatches',
]
