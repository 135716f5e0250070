import pytest

from glyph_mask.config import (
    DEFAULT_CONFIG,
    DEFAULT_DISPLAY_TEXT,
    DisplayConfig,
    next_config,
    normalize_display_text,
)
from glyph_mask.types import AlgorithmName


def test_defaults() -> None:
    assert DEFAULT_CONFIG.display_text == DEFAULT_DISPLAY_TEXT == "HELLO, WORLD!"
    assert DEFAULT_CONFIG.algorithm_name is AlgorithmName.RANDOM


@pytest.mark.parametrize(
    "raw, expected", [("hello", "HELLO"), ("MiXed 1!", "MIXED 1!"), ("", "")]
)
def test_normalize_display_text(raw: str, expected: str) -> None:
    assert normalize_display_text(raw) == expected


def test_from_input_normalizes_and_parses_name() -> None:
    config = DisplayConfig.from_input("abc", "Block")
    assert config == DisplayConfig("ABC", AlgorithmName.BLOCK)
    assert config.algorithm_name is AlgorithmName.BLOCK


def test_plain_string_algorithm_name_is_coerced() -> None:
    config = DisplayConfig("X", "Wave")  # type: ignore[arg-type]
    assert config.algorithm_name is AlgorithmName.WAVE


def test_unknown_algorithm_name() -> None:
    with pytest.raises(ValueError):
        DisplayConfig.from_input("abc", "Plasma")
    with pytest.raises(ValueError):
        DisplayConfig("abc", "Plasma")  # type: ignore[arg-type]


def test_next_config_applies_text_only_on_submit() -> None:
    current = DisplayConfig("HELLO", AlgorithmName.RANDOM)
    assert next_config(current, "bye", "Random", submitted=False) == current
    assert next_config(current, "bye", "Random", submitted=True) == DisplayConfig(
        "BYE", AlgorithmName.RANDOM
    )


def test_next_config_applies_algorithm_immediately() -> None:
    current = DisplayConfig("HELLO", AlgorithmName.RANDOM)
    assert next_config(current, "typed", "Wave", submitted=False) == DisplayConfig(
        "HELLO", AlgorithmName.WAVE
    )


def test_next_config_submitting_empty_text_clears() -> None:
    current = DisplayConfig("HELLO", AlgorithmName.BLOCK)
    assert next_config(current, "", "Block", submitted=True).display_text == ""
