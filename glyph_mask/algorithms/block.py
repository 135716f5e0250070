"""Block masking.

The grid is tiled into ``BLOCK_SIZE`` x ``BLOCK_SIZE`` blocks and every cell
of a block shares one symbol:

* static index: ``(block_row * 2 + block_col * 3) mod K``
* dynamic index: ``(block_row + block_col + offset) mod K`` where ``offset``
  is 0 at generation and ``floor(now_ms / BLOCK_STEP_MS) mod K`` on updates.

The offset only advances every ``BLOCK_STEP_MS`` so consecutive updates
inside one step window return identical layers. The stepped cadence is the
intended look; do not smooth it.
"""

import numpy as np

from glyph_mask.geometry import GridSize, calculate_grid_size
from glyph_mask.grid import EMPTY_GRID, EMPTY_LAYER, MaskingGrid, layer_from_indices
from glyph_mask.palette import PALETTE_SIZE
from glyph_mask.types import Layer


BLOCK_SIZE = 4
BLOCK_STEP_MS = 200


def block_coordinates(size: GridSize) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(block_row, block_col)`` index arrays for every cell."""
    rows, cols = np.mgrid[0 : size.height, 0 : size.width]
    return rows // BLOCK_SIZE, cols // BLOCK_SIZE


def time_offset(now_ms: float) -> int:
    """Coarse time offset; changes once per ``BLOCK_STEP_MS``."""
    return int(now_ms // BLOCK_STEP_MS) % PALETTE_SIZE


def generate_block_masking(text: str) -> MaskingGrid:
    if not text:
        return EMPTY_GRID
    block_row, block_col = block_coordinates(calculate_grid_size(text))
    return MaskingGrid(
        dynamic_grid=layer_from_indices((block_row + block_col) % PALETTE_SIZE),
        static_grid=layer_from_indices((block_row * 2 + block_col * 3) % PALETTE_SIZE),
    )


def update_block_masking(
    text: str, current_grid: MaskingGrid, now_ms: float = 0.0
) -> Layer:
    if not text:
        return EMPTY_LAYER
    block_row, block_col = block_coordinates(calculate_grid_size(text))
    offset = time_offset(now_ms)
    return layer_from_indices((block_row + block_col + offset) % PALETTE_SIZE)
