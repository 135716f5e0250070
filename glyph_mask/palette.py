"""Decorative symbol palette shared by every masking algorithm."""

import random
from typing import Optional, Tuple

from glyph_mask.types import Symbol


MASKING_SYMBOLS: Tuple[Symbol, ...] = (
    "!",
    "?",
    "@",
    "#",
    "$",
    "%",
    "^",
    "&",
    "*",
    "(",
    ")",
)

PALETTE_SIZE = len(MASKING_SYMBOLS)

# Returned for reads outside a populated layer.
UNKNOWN_SYMBOL: Symbol = "?"


def symbol_at(index: int) -> Symbol:
    """Return the palette symbol for ``index`` (wrapped into palette range)."""
    return MASKING_SYMBOLS[index % PALETTE_SIZE]


def random_symbol(rng: Optional[random.Random] = None) -> Symbol:
    """Uniformly draw one palette symbol."""
    return (rng or random).choice(MASKING_SYMBOLS)
