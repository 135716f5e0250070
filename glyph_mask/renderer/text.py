from dataclasses import dataclass
from typing import List, Mapping

from glyph_mask.font import FONT_5X7, GlyphBitmap, glyph_for, is_glyph_pixel
from glyph_mask.geometry import (
    GLYPH_CELL_HEIGHT,
    GLYPH_CELL_WIDTH,
    GLYPH_GAP,
    glyph_origin,
)
from glyph_mask.grid import MaskingGrid
from glyph_mask.types import Symbol


@dataclass(frozen=True)
class ComposedCell:
    symbol: Symbol
    glyph: bool


def compose_cells(
    text: str,
    grid: MaskingGrid,
    font: Mapping[str, GlyphBitmap] = FONT_5X7,
) -> List[List[ComposedCell]]:
    """
    Compose the visible cell matrix for ``text``.

    Rows are ``GLYPH_CELL_HEIGHT`` tall; each character contributes a
    ``GLYPH_CELL_WIDTH`` column cell with its bitmap inset by one cell, and
    characters are separated by ``GLYPH_GAP`` static columns. Reads outside the
    grid fall back to the unknown symbol, so a grid that lags behind ``text``
    never raises.
    """
    if not text:
        return []

    glyphs = [glyph_for(char, font) for char in text]
    matrix: List[List[ComposedCell]] = []
    for row in range(GLYPH_CELL_HEIGHT):
        line: List[ComposedCell] = []
        for char_index, glyph in enumerate(glyphs):
            origin = glyph_origin(char_index)
            for col in range(GLYPH_CELL_WIDTH):
                if is_glyph_pixel(glyph, row - 1, col - 1):
                    line.append(ComposedCell(grid.dynamic_symbol(row, origin + col), True))
                else:
                    line.append(ComposedCell(grid.static_symbol(row, origin + col), False))
            if char_index < len(glyphs) - 1:
                for gap in range(GLYPH_GAP):
                    gap_col = origin + GLYPH_CELL_WIDTH + gap
                    line.append(ComposedCell(grid.static_symbol(row, gap_col), False))
        matrix.append(line)
    return matrix


def compose_lines(
    text: str,
    grid: MaskingGrid,
    font: Mapping[str, GlyphBitmap] = FONT_5X7,
) -> List[str]:
    """Return the composed matrix as one string per row."""
    return ["".join(cell.symbol for cell in line) for line in compose_cells(text, grid, font)]


def render_text(
    text: str,
    grid: MaskingGrid,
    font: Mapping[str, GlyphBitmap] = FONT_5X7,
) -> str:
    return "\n".join(compose_lines(text, grid, font))
