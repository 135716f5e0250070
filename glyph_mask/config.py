"""Caller-facing display configuration.

Only two options are exposed: the text to render and the masking algorithm.
Tick interval, block size, wave speed and palette are fixed constants of the
core modules.
"""

from dataclasses import dataclass

from glyph_mask.types import AlgorithmName


DEFAULT_DISPLAY_TEXT = "HELLO, WORLD!"


def normalize_display_text(raw_text: str) -> str:
    """Confirmed input is displayed upper-cased (the font is upper-case only)."""
    return raw_text.upper()


@dataclass(frozen=True)
class DisplayConfig:
    """Display text plus selected algorithm.

    Attributes:
        display_text (str): Text to render; empty stops the animation.
        algorithm_name (AlgorithmName): Selected masking algorithm.

    Raises:
        ValueError: If ``algorithm_name`` is not a known algorithm name.
    """

    display_text: str = DEFAULT_DISPLAY_TEXT
    algorithm_name: AlgorithmName = AlgorithmName.RANDOM

    def __post_init__(self) -> None:
        # Accept plain strings from UI widgets.
        object.__setattr__(self, "algorithm_name", AlgorithmName(self.algorithm_name))

    @classmethod
    def from_input(
        cls, raw_text: str, algorithm_name: str = AlgorithmName.RANDOM
    ) -> "DisplayConfig":
        """Build a config from raw widget input, normalizing the text."""
        return cls(
            display_text=normalize_display_text(raw_text),
            algorithm_name=AlgorithmName(algorithm_name),
        )


DEFAULT_CONFIG = DisplayConfig()


def next_config(
    current: DisplayConfig, raw_text: str, algorithm_name: str, submitted: bool
) -> DisplayConfig:
    """Resolve the config for one UI pass.

    Typed text only takes effect on submit (Confirm button or Enter); the
    algorithm selection applies immediately.
    """
    if submitted:
        return DisplayConfig.from_input(raw_text, algorithm_name)
    return DisplayConfig(current.display_text, AlgorithmName(algorithm_name))
