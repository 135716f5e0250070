import numpy as np
import pytest
from pyrsistent import pvector

from glyph_mask.geometry import GridSize
from glyph_mask.grid import (
    EMPTY_GRID,
    EMPTY_LAYER,
    MaskingGrid,
    build_layer,
    layer_from_indices,
    layer_shape,
    read_symbol,
    to_layer,
)


def test_empty_grid() -> None:
    assert EMPTY_GRID.is_empty
    assert EMPTY_GRID.shape == (0, 0)
    assert EMPTY_GRID.dynamic_grid == EMPTY_LAYER
    assert EMPTY_GRID.static_grid == EMPTY_LAYER


def test_build_layer_calls_cell_fn_per_cell() -> None:
    layer = build_layer(GridSize(width=3, height=2), lambda r, c: f"{r}{c}")
    assert layer == to_layer([["00", "01", "02"], ["10", "11", "12"]])
    assert layer_shape(layer) == (2, 3)


def test_build_layer_zero_width_is_empty() -> None:
    assert build_layer(GridSize(width=0), lambda r, c: "!") == EMPTY_LAYER


def test_layer_from_indices_maps_and_wraps() -> None:
    layer = layer_from_indices(np.array([[0, 1, 11], [10, 22, 3]]))
    assert layer == to_layer([["!", "?", "!"], [")", "!", "#"]])
    assert all(isinstance(s, str) for row in layer for s in row)


def test_mismatched_layers_rejected() -> None:
    with pytest.raises(ValueError):
        MaskingGrid(
            dynamic_grid=to_layer([["!", "!"]]),
            static_grid=to_layer([["!"]]),
        )
    with pytest.raises(ValueError):
        MaskingGrid(dynamic_grid=to_layer([["!"]]), static_grid=EMPTY_LAYER)


def test_with_dynamic_keeps_static_layer() -> None:
    grid = MaskingGrid(
        dynamic_grid=to_layer([["!", "?"]]),
        static_grid=to_layer([["@", "#"]]),
    )
    updated = grid.with_dynamic(to_layer([["$", "%"]]))
    assert updated.static_grid is grid.static_grid
    assert updated.dynamic_grid == to_layer([["$", "%"]])
    assert grid.dynamic_grid == to_layer([["!", "?"]])


def test_with_dynamic_rejects_resize() -> None:
    grid = MaskingGrid(to_layer([["!"]]), to_layer([["?"]]))
    with pytest.raises(ValueError):
        grid.with_dynamic(to_layer([["!", "!"]]))


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (1, 0), (0, 2), (50, 50)])
def test_out_of_range_reads_fall_back(row: int, col: int) -> None:
    grid = MaskingGrid(to_layer([["!", "@"]]), to_layer([["#", "$"]]))
    assert grid.dynamic_symbol(row, col) == "?"
    assert grid.static_symbol(row, col) == "?"


def test_in_range_reads() -> None:
    grid = MaskingGrid(to_layer([["!", "@"]]), to_layer([["#", "$"]]))
    assert grid.dynamic_symbol(0, 1) == "@"
    assert grid.static_symbol(0, 0) == "#"
    assert read_symbol(pvector(), 0, 0) == "?"
    assert read_symbol([["x"], []], 1, 0) == "?"
