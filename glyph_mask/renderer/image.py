from typing import List, Mapping, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from glyph_mask.font import FONT_5X7, GlyphBitmap
from glyph_mask.geometry import GLYPH_CELL_HEIGHT
from glyph_mask.grid import MaskingGrid
from glyph_mask.renderer.text import ComposedCell, compose_cells


DEFAULT_CELL_SIZE = 16
DEFAULT_GLYPH_COLOR: Tuple[int, int, int, int] = (120, 255, 140, 255)
DEFAULT_STATIC_COLOR: Tuple[int, int, int, int] = (40, 70, 50, 255)
DEFAULT_BACKGROUND: Tuple[int, int, int, int] = (0, 0, 0, 255)

Font = ImageFont.ImageFont | ImageFont.FreeTypeFont


def render_cells(
    cells: List[List[ComposedCell]],
    cell_size: int = DEFAULT_CELL_SIZE,
    glyph_color: Tuple[int, int, int, int] = DEFAULT_GLYPH_COLOR,
    static_color: Tuple[int, int, int, int] = DEFAULT_STATIC_COLOR,
    background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
    font: Optional[Font] = None,
) -> Image.Image:
    """
    Rasterize a composed cell matrix, one symbol per ``cell_size`` square.
    Glyph cells and static cells are drawn in different colors.
    """
    rows = len(cells) or GLYPH_CELL_HEIGHT
    cols = max((len(line) for line in cells), default=0) or 1
    img = Image.new("RGBA", (cols * cell_size, rows * cell_size), background)
    draw = ImageDraw.Draw(img)
    font = font or ImageFont.load_default()

    for y, line in enumerate(cells):
        for x, cell in enumerate(line):
            x0, y0 = x * cell_size, y * cell_size
            left, top, right, bottom = draw.textbbox((0, 0), cell.symbol, font=font)
            dx = (cell_size - (right - left)) // 2 - left
            dy = (cell_size - (bottom - top)) // 2 - top
            draw.text(
                (x0 + dx, y0 + dy),
                cell.symbol,
                fill=glyph_color if cell.glyph else static_color,
                font=font,
            )
    return img


def render(
    text: str,
    grid: MaskingGrid,
    cell_size: int = DEFAULT_CELL_SIZE,
    glyph_color: Tuple[int, int, int, int] = DEFAULT_GLYPH_COLOR,
    static_color: Tuple[int, int, int, int] = DEFAULT_STATIC_COLOR,
    background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
    glyph_font: Mapping[str, GlyphBitmap] = FONT_5X7,
    font: Optional[Font] = None,
) -> Image.Image:
    """Compose ``text`` over ``grid`` and rasterize it as a PIL image.

    ``glyph_font`` decides which cells are glyph pixels; ``font`` is the PIL
    font the symbols are drawn with (Pillow's default when ``None``).
    """
    return render_cells(
        compose_cells(text, grid, glyph_font),
        cell_size=cell_size,
        glyph_color=glyph_color,
        static_color=static_color,
        background=background,
        font=font,
    )


class MaskImageRenderer:
    cell_size: int
    glyph_color: Tuple[int, int, int, int]
    static_color: Tuple[int, int, int, int]
    background: Tuple[int, int, int, int]
    font: Optional[Font]

    def __init__(
        self,
        cell_size: int = DEFAULT_CELL_SIZE,
        glyph_color: Tuple[int, int, int, int] = DEFAULT_GLYPH_COLOR,
        static_color: Tuple[int, int, int, int] = DEFAULT_STATIC_COLOR,
        background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
        font: Optional[Font] = None,
    ):
        self.cell_size = cell_size
        self.glyph_color = glyph_color
        self.static_color = static_color
        self.background = background
        self.font = font

    def render(self, text: str, grid: MaskingGrid) -> Image.Image:
        return render(
            text,
            grid,
            cell_size=self.cell_size,
            glyph_color=self.glyph_color,
            static_color=self.static_color,
            background=self.background,
            font=self.font,
        )
