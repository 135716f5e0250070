"""Grid geometry: text string -> masking grid dimensions.

Each character occupies a 7-column glyph cell (a 5-column bitmap plus one
margin column either side) and consecutive cells are separated by a single
gap column. The height is constant: 7 bitmap rows plus a margin row above and
below.
"""

from dataclasses import dataclass


GLYPH_BITMAP_WIDTH = 5
GLYPH_BITMAP_HEIGHT = 7
GLYPH_CELL_WIDTH = GLYPH_BITMAP_WIDTH + 2
GLYPH_CELL_HEIGHT = GLYPH_BITMAP_HEIGHT + 2
GLYPH_GAP = 1


@dataclass(frozen=True)
class GridSize:
    """Dimensions of a masking grid.

    Attributes:
        width (int): Number of columns; 0 for empty text.
        height (int): Number of rows; always ``GLYPH_CELL_HEIGHT``.
    """

    width: int
    height: int = GLYPH_CELL_HEIGHT


def calculate_grid_size(text: str) -> GridSize:
    """Return the grid size needed to render ``text``.

    Pure and total: empty text yields width 0, otherwise
    ``7 * n + (n - 1)`` for ``n`` characters (no trailing gap).
    """
    n = len(text)
    if n == 0:
        return GridSize(width=0)
    return GridSize(width=n * GLYPH_CELL_WIDTH + (n - 1) * GLYPH_GAP)


def glyph_origin(char_index: int) -> int:
    """Return the first grid column of the glyph cell at ``char_index``."""
    return char_index * (GLYPH_CELL_WIDTH + GLYPH_GAP)
