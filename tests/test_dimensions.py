"""Tests for output grid size resolution."""

import pytest

from image_to_ascii.dimensions import block_grid_size, resolve_grid_size


@pytest.mark.unit
class TestResolveGridSize:

    def test_columns_only(self):
        assert resolve_grid_size(100, 200, columns=50, font_ratio=0.5) == (50, 50)

    def test_neither_is_full_resolution(self):
        assert resolve_grid_size(100, 50) == (100, 50)

    def test_both_given_are_used_as_is(self):
        assert resolve_grid_size(100, 50, columns=7, rows=300) == (7, 300)

    def test_rows_only(self):
        # ceil(25 * 100/50 / 0.5) = 100
        assert resolve_grid_size(100, 50, rows=25) == (100, 25)

    def test_columns_only_rounds_up(self):
        # 3 * 10/10 * 0.5 = 1.5
        assert resolve_grid_size(10, 10, columns=3) == (3, 2)

    def test_rows_only_rounds_up(self):
        # 3 * 10/7 / 0.5 = 8.57...
        assert resolve_grid_size(10, 7, rows=3) == (9, 3)

    def test_font_ratio_one_keeps_pixel_aspect(self):
        assert resolve_grid_size(40, 30, columns=20, font_ratio=1.0) == (20, 15)

    def test_never_below_one(self):
        assert resolve_grid_size(10000, 1, columns=1) == (1, 1)
        assert resolve_grid_size(1, 10000, rows=1) == (1, 1)

    @pytest.mark.parametrize("kwargs", [
        {"columns": 0},
        {"rows": -3},
        {"font_ratio": 0.0},
    ])
    def test_invalid_requests(self, kwargs):
        with pytest.raises(ValueError):
            resolve_grid_size(10, 10, **kwargs)

    def test_empty_image(self):
        with pytest.raises(ValueError):
            resolve_grid_size(0, 10)


@pytest.mark.unit
class TestBlockGridSize:

    def test_default_block(self):
        assert block_grid_size(5, 5) == (5, 3)

    def test_custom_block(self):
        assert block_grid_size(7, 9, 3, 4) == (3, 3)

    def test_invalid_block(self):
        with pytest.raises(ValueError):
            block_grid_size(5, 5, 0, 2)
