"""Random masking: independent uniform draws per cell, no spatial or
temporal correlation. The "pure noise" baseline."""

import random
from typing import Optional

from glyph_mask.geometry import calculate_grid_size
from glyph_mask.grid import EMPTY_GRID, EMPTY_LAYER, MaskingGrid, build_layer
from glyph_mask.palette import random_symbol
from glyph_mask.types import Layer


def random_layer(text: str, rng: Optional[random.Random] = None) -> Layer:
    """Draw a full layer sized for ``text`` from the palette."""
    return build_layer(calculate_grid_size(text), lambda row, col: random_symbol(rng))


def generate_random_masking(
    text: str, rng: Optional[random.Random] = None
) -> MaskingGrid:
    if not text:
        return EMPTY_GRID
    return MaskingGrid(
        dynamic_grid=random_layer(text, rng),
        static_grid=random_layer(text, rng),
    )


def update_random_masking(
    text: str,
    current_grid: MaskingGrid,
    now_ms: float = 0.0,
    rng: Optional[random.Random] = None,
) -> Layer:
    """Redraw every dynamic cell; ``current_grid`` and ``now_ms`` are ignored."""
    if not text:
        return EMPTY_LAYER
    return random_layer(text, rng)
