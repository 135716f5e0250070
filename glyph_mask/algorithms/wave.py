"""Wave masking.

The dynamic layer follows a diagonal standing wave::

    phase = sin(col * 0.3 + row * 0.2 + t)
    index = floor((phase + 1) * K / 2) mod K

``t`` is 0 at generation time and ``now_ms * WAVE_TIME_SCALE`` on updates, so
the wave travels at a speed set by wall-clock time, independent of how often
updates are requested. The static layer is uniform noise.
"""

import random
from typing import Optional

import numpy as np

from glyph_mask.algorithms.noise import random_layer
from glyph_mask.geometry import GridSize, calculate_grid_size
from glyph_mask.grid import EMPTY_GRID, EMPTY_LAYER, MaskingGrid, layer_from_indices
from glyph_mask.palette import PALETTE_SIZE
from glyph_mask.types import Layer


WAVE_COL_FREQUENCY = 0.3
WAVE_ROW_FREQUENCY = 0.2
WAVE_TIME_SCALE = 0.01


def wave_indices(size: GridSize, t: float = 0.0) -> np.ndarray:
    """Return the ``(height, width)`` palette index field at time ``t``."""
    rows, cols = np.mgrid[0 : size.height, 0 : size.width]
    phase = np.sin(cols * WAVE_COL_FREQUENCY + rows * WAVE_ROW_FREQUENCY + t)
    return np.floor((phase + 1) * PALETTE_SIZE / 2).astype(np.int64) % PALETTE_SIZE


def generate_wave_masking(
    text: str, rng: Optional[random.Random] = None
) -> MaskingGrid:
    if not text:
        return EMPTY_GRID
    size = calculate_grid_size(text)
    return MaskingGrid(
        dynamic_grid=layer_from_indices(wave_indices(size)),
        static_grid=random_layer(text, rng),
    )


def update_wave_masking(
    text: str, current_grid: MaskingGrid, now_ms: float = 0.0
) -> Layer:
    """Deterministic in ``(row, col, now_ms)``; ``current_grid`` is unused."""
    if not text:
        return EMPTY_LAYER
    size = calculate_grid_size(text)
    return layer_from_indices(wave_indices(size, now_ms * WAVE_TIME_SCALE))
