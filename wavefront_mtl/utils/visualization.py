"""Simple visualization utilities for material colors."""

import numpy as np
import matplotlib.pyplot as plt

from wavefront_mtl.core.material import MaterialDocument


def material_color_grid(
    document: MaterialDocument,
    channels: tuple = ("Ka", "Kd", "Ks"),
) -> np.ndarray:
    """Collect the RGB slot of each color channel of each material.

    Args:
        document: Decoded materials
        channels: Color statements to collect, one column each

    Returns:
        Array [n_materials, n_channels, 3] clipped to [0, 1]

    """
    grid = np.zeros((len(document.materials), len(channels), 3), dtype=np.float64)

    for row, material in enumerate(document.materials):
        for col, channel in enumerate(channels):
            grid[row, col] = getattr(material, channel).color.as_array()

    return np.clip(grid, 0.0, 1.0)


def plot_material_swatches(
    document: MaterialDocument,
    channels: tuple = ("Ka", "Kd", "Ks"),
    title: str = 'Material Colors',
    save_path: str = None,
):
    """Draw one swatch per material and color channel.

    Channels that were not given in the source show their default value.

    Args:
        document: Decoded materials
        channels: Color statements shown as columns
        title: Plot title
        save_path: If provided, save to file
    """
    grid = material_color_grid(document, channels)
    names = [m.name.value or '<unnamed>' for m in document.materials]

    fig, ax = plt.subplots(figsize=(2 + 1.5 * len(channels), 1 + 0.5 * max(len(names), 1)))

    ax.imshow(grid, aspect='auto', interpolation='nearest')

    ax.set_xticks(range(len(channels)))
    ax.set_xticklabels(channels)
    ax.set_yticks(range(len(names)))
    ax.set_yticklabels(names)
    ax.set_title(title)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved: {save_path}")
    else:
        plt.show()

    plt.close(fig)
