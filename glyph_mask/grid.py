"""Immutable two-layer ``MaskingGrid`` value.

A masking grid pairs two equally sized symbol layers:

* The **static layer** is generated once per display text / algorithm
  selection and never changes afterwards. It anchors the background texture
  so the glyph silhouette stays readable.
* The **dynamic layer** is swapped out wholesale on every animation tick.

Layers are persistent vectors (``pyrsistent.PVector``) of rows, so a grid is
a value object: replacing the dynamic layer produces a *new* ``MaskingGrid``
and readers holding the previous snapshot are never exposed to a partially
written grid. The only writer is :class:`glyph_mask.driver.AnimationDriver`.
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Sequence, Tuple

import numpy as np
from pyrsistent import pvector

from glyph_mask.geometry import GridSize
from glyph_mask.palette import MASKING_SYMBOLS, UNKNOWN_SYMBOL
from glyph_mask.types import Layer, Symbol


EMPTY_LAYER: Layer = pvector()

CellFn = Callable[[int, int], Symbol]


def layer_shape(layer: Layer) -> Tuple[int, int]:
    """Return ``(height, width)`` of a layer; ``(0, 0)`` when empty."""
    if len(layer) == 0:
        return 0, 0
    return len(layer), len(layer[0])


def to_layer(rows: Iterable[Iterable[Symbol]]) -> Layer:
    """Freeze nested row iterables into a ``Layer``."""
    return pvector(pvector(row) for row in rows)


def build_layer(size: GridSize, cell_fn: CellFn) -> Layer:
    """Build a layer by calling ``cell_fn(row, col)`` for every cell."""
    if size.width == 0:
        return EMPTY_LAYER
    return to_layer(
        [cell_fn(row, col) for col in range(size.width)] for row in range(size.height)
    )


def layer_from_indices(indices: np.ndarray) -> Layer:
    """Map a 2D integer array of palette indices to a ``Layer``."""
    if indices.size == 0:
        return EMPTY_LAYER
    symbols = np.asarray(MASKING_SYMBOLS)[indices % len(MASKING_SYMBOLS)]
    return to_layer(symbols.tolist())


def read_symbol(layer: Sequence[Sequence[Symbol]], row: int, col: int) -> Symbol:
    """Return ``layer[row][col]`` or ``UNKNOWN_SYMBOL`` if not populated."""
    if 0 <= row < len(layer):
        cells = layer[row]
        if 0 <= col < len(cells):
            return cells[col]
    return UNKNOWN_SYMBOL


@dataclass(frozen=True)
class MaskingGrid:
    """Two-layer masking grid snapshot.

    Attributes:
        dynamic_grid (Layer): Rapidly refreshed layer (glyph pixels).
        static_grid (Layer): Fixed layer (background, margins and gaps).

    Raises:
        ValueError: If the two layers do not share identical dimensions.
    """

    dynamic_grid: Layer = EMPTY_LAYER
    static_grid: Layer = EMPTY_LAYER

    def __post_init__(self) -> None:
        if layer_shape(self.dynamic_grid) != layer_shape(self.static_grid):
            raise ValueError(
                "Layer dimensions differ: "
                f"dynamic={layer_shape(self.dynamic_grid)} "
                f"static={layer_shape(self.static_grid)}"
            )

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)`` shared by both layers."""
        return layer_shape(self.static_grid)

    @property
    def is_empty(self) -> bool:
        return len(self.static_grid) == 0

    def with_dynamic(self, dynamic_grid: Layer) -> "MaskingGrid":
        """Return a new grid with the dynamic layer replaced."""
        return replace(self, dynamic_grid=dynamic_grid)

    def dynamic_symbol(self, row: int, col: int) -> Symbol:
        return read_symbol(self.dynamic_grid, row, col)

    def static_symbol(self, row: int, col: int) -> Symbol:
        return read_symbol(self.static_grid, row, col)


EMPTY_GRID = MaskingGrid()
