"""Masking algorithm registry.

Each algorithm is a :class:`MaskingAlgorithm` record bundling a name, a
description and its two operations. ``MASKING_ALGORITHM_REGISTRY`` maps the
stable :class:`glyph_mask.types.AlgorithmName` to the instance; insertion
order (Random, Wave, Block) is the order shown in the selection UI.
"""

from typing import Dict, List

from glyph_mask.types import AlgorithmName
from .base import MaskingAlgorithm
from .block import generate_block_masking, update_block_masking
from .noise import generate_random_masking, update_random_masking
from .wave import generate_wave_masking, update_wave_masking


RANDOM_ALGORITHM = MaskingAlgorithm(
    name=AlgorithmName.RANDOM,
    description="Completely random character selection at all positions",
    generate_masking=generate_random_masking,
    update_dynamic_masking=update_random_masking,
)

WAVE_ALGORITHM = MaskingAlgorithm(
    name=AlgorithmName.WAVE,
    description="Characters change in wave patterns over time",
    generate_masking=generate_wave_masking,
    update_dynamic_masking=update_wave_masking,
)

BLOCK_ALGORITHM = MaskingAlgorithm(
    name=AlgorithmName.BLOCK,
    description="Generate patterns using same characters in block units",
    generate_masking=generate_block_masking,
    update_dynamic_masking=update_block_masking,
)

MASKING_ALGORITHM_REGISTRY: Dict[AlgorithmName, MaskingAlgorithm] = {
    algorithm.name: algorithm
    for algorithm in (RANDOM_ALGORITHM, WAVE_ALGORITHM, BLOCK_ALGORITHM)
}

DEFAULT_ALGORITHM = RANDOM_ALGORITHM


def all_algorithms() -> List[MaskingAlgorithm]:
    """Return registered algorithms in display order."""
    return list(MASKING_ALGORITHM_REGISTRY.values())


def get_algorithm(name: str) -> MaskingAlgorithm:
    """Look up an algorithm by name.

    Raises:
        KeyError: If ``name`` is not registered.
    """
    if name not in MASKING_ALGORITHM_REGISTRY:
        raise KeyError(
            f"Unknown masking algorithm {name!r}; "
            f"known: {[str(k) for k in MASKING_ALGORITHM_REGISTRY]}"
        )
    return MASKING_ALGORITHM_REGISTRY[name]


__all__ = [
    "BLOCK_ALGORITHM",
    "DEFAULT_ALGORITHM",
    "MASKING_ALGORITHM_REGISTRY",
    "MaskingAlgorithm",
    "RANDOM_ALGORITHM",
    "WAVE_ALGORITHM",
    "all_algorithms",
    "get_algorithm",
]
