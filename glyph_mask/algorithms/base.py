from dataclasses import dataclass

from glyph_mask.types import AlgorithmName, GenerateFn, UpdateFn


@dataclass(frozen=True)
class MaskingAlgorithm:
    """Named masking strategy.

    Attributes:
        name: Stable registry key, also shown in the selection UI.
        description: One-line human readable summary.
        generate_masking: ``(text) -> MaskingGrid`` producing both layers.
        update_dynamic_masking: ``(text, current_grid, now_ms) -> Layer``
            producing a replacement dynamic layer only. ``now_ms`` is the
            wall-clock time in milliseconds, passed in by the caller.
    """

    name: AlgorithmName
    description: str
    generate_masking: GenerateFn
    update_dynamic_masking: UpdateFn
