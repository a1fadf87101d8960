import pytest

from grid_core.grid import calculate_grid_shape, compute_grid, grid_positions, split_bands
from grid_core.rect import Rect


def test_calculate_grid_shape_zero():
    assert calculate_grid_shape(0) == (0, 0)


def test_calculate_grid_shape_single():
    assert calculate_grid_shape(1) == (1, 1)


def test_calculate_grid_shape_two_is_one_row():
    assert calculate_grid_shape(2) == (1, 2)


def test_calculate_grid_shape_five():
    assert calculate_grid_shape(5) == (2, 3)


def test_calculate_grid_shape_negative():
    with pytest.raises(ValueError):
        calculate_grid_shape(-1)


def test_split_bands_last_absorbs_remainder():
    assert split_bands(0, 100, 3, 1) == [(0, 32), (33, 32), (66, 34)]


def test_split_bands_even_spreads_remainder():
    assert split_bands(0, 100, 3, 1, remainder="even") == [(0, 33), (34, 33), (68, 32)]


def test_split_bands_offset_start():
    assert split_bands(10, 20, 2, 0) == [(10, 10), (20, 10)]


def test_split_bands_clamps_negative_sizes():
    assert split_bands(5, 10, 2, 20) == [(5, 0), (25, 0)]


def test_split_bands_no_parts():
    assert split_bands(0, 10, 0, 1) == []


def test_split_bands_unknown_policy():
    with pytest.raises(ValueError, match="remainder policy"):
        split_bands(0, 10, 2, 0, remainder="middle")


def test_grid_positions_row_major():
    assert list(grid_positions(5)) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]


def test_grid_positions_zero():
    assert list(grid_positions(0)) == []


def test_compute_grid_empty():
    assert compute_grid(Rect(0, 0, 100, 100), 0, 0) == []


def test_compute_grid_zero_count_ignores_spacing():
    assert compute_grid(Rect(0, 0, 10, 10), 0, 5) == []


def test_compute_grid_single_cell_fills_area():
    area = Rect(0, 0, 100, 100)
    assert compute_grid(area, 1, 0) == [area]


def test_compute_grid_four_cells_perfect_square():
    cells = compute_grid(Rect(0, 0, 100, 100), 4, 0)
    assert cells == [
        Rect(0, 0, 50, 50),
        Rect(50, 0, 50, 50),
        Rect(0, 50, 50, 50),
        Rect(50, 50, 50, 50),
    ]


def test_compute_grid_nine_cells_even_division():
    cells = compute_grid(Rect(0, 0, 99, 99), 9, 0)
    assert len(cells) == 9
    assert cells[0] == Rect(0, 0, 33, 33)
    assert (cells[8].x, cells[8].y) == (66, 66)


def test_compute_grid_nine_cells_with_spacing():
    cells = compute_grid(Rect(0, 0, 100, 100), 9, 1)
    assert len(cells) == 9
    assert cells[0] == Rect(0, 0, 32, 32)
    assert cells[1] == Rect(33, 0, 32, 32)
    assert cells[8] == Rect(66, 66, 34, 34)


def test_compute_grid_two_cells_side_by_side():
    cells = compute_grid(Rect(0, 0, 100, 100), 2, 0)
    assert cells == [Rect(0, 0, 50, 100), Rect(50, 0, 50, 100)]


def test_compute_grid_five_cells_partial_last_row():
    cells = compute_grid(Rect(0, 0, 90, 60), 5, 2)
    assert cells == [
        Rect(0, 0, 28, 29),
        Rect(30, 0, 28, 29),
        Rect(60, 0, 30, 29),
        Rect(0, 31, 28, 29),
        Rect(30, 31, 28, 29),
    ]


def test_compute_grid_degenerate_spacing():
    cells = compute_grid(Rect(0, 0, 1, 1), 4, 5)
    assert len(cells) == 4
    assert all(cell.width == 0 and cell.height == 0 for cell in cells)
    assert cells[3] == Rect(5, 5, 0, 0)


def test_compute_grid_more_items_than_units():
    cells = compute_grid(Rect(0, 0, 2, 2), 9, 0)
    assert len(cells) == 9
    assert [cell.width for cell in cells[:3]] == [0, 0, 2]


def test_compute_grid_respects_area_origin():
    cells = compute_grid(Rect(10, 5, 40, 20), 4, 0)
    assert cells[0] == Rect(10, 5, 20, 10)
    assert cells[3] == Rect(30, 15, 20, 10)


def test_compute_grid_even_policy():
    cells = compute_grid(Rect(0, 0, 100, 10), 2, 1, remainder="even")
    assert [cell.width for cell in cells] == [50, 49]
    assert cells[1].right == 100


def test_compute_grid_negative_spacing():
    with pytest.raises(ValueError):
        compute_grid(Rect(0, 0, 10, 10), 2, -1)


def test_compute_grid_negative_count():
    with pytest.raises(ValueError):
        compute_grid(Rect(0, 0, 10, 10), -3, 0)


def test_compute_grid_logs_degenerate_layout(caplog):
    with caplog.at_level("DEBUG", logger="autogrid"):
        compute_grid(Rect(0, 0, 3, 3), 4, 5)
    assert "degenerate" in caplog.text
