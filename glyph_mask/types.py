"""Common type aliases and enumerations.

``GenerateFn`` and ``UpdateFn`` are the two extension points every masking
algorithm provides; :mod:`glyph_mask.algorithms` registers one pair per
algorithm name.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING

from pyrsistent.typing import PVector


# Forward declaration for GenerateFn typing to avoid circular imports:
if TYPE_CHECKING:
    from glyph_mask.grid import MaskingGrid

Symbol = str

# Row-major: ``layer[row][col]``.
Layer = PVector[PVector[Symbol]]

Clock = Callable[[], float]
CancelFn = Callable[[], None]

GenerateFn = Callable[[str], "MaskingGrid"]
UpdateFn = Callable[[str, "MaskingGrid", float], Layer]


class AlgorithmName(StrEnum):
    """Stable names of the built-in masking algorithms (also UI labels)."""

    RANDOM = "Random"
    WAVE = "Wave"
    BLOCK = "Block"


class DriverPhase(StrEnum):
    """Animation driver states."""

    IDLE = auto()
    ACTIVE = auto()
    TERMINATED = auto()
