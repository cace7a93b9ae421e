"""Tests for the density mapper."""

import numpy as np
import pytest

from image_to_ascii.constants import DENSITY_RAMP, RAMP_LENGTH
from image_to_ascii.density import DensityMapper


@pytest.mark.unit
class TestDensityRamp:

    def test_ramp_length(self):
        assert RAMP_LENGTH == 70
        assert len(DENSITY_RAMP) == 70

    def test_ramp_ends(self):
        assert DENSITY_RAMP[0] == '@'
        assert DENSITY_RAMP[-1] == '`'

    def test_ramp_is_printable_without_blanks(self):
        assert ' ' not in DENSITY_RAMP
        assert DENSITY_RAMP.isprintable()


@pytest.mark.unit
class TestDensityMapper:

    def test_inverted_black_is_heaviest(self):
        mapper = DensityMapper(padding=9, invert=True)
        assert mapper.index(0.0) == 0
        assert mapper.char(0.0) == '@'

    def test_default_black_without_padding_is_lightest(self):
        mapper = DensityMapper(padding=0, invert=False)
        assert mapper.index(0.0) == 69
        assert mapper.char(0.0) == '`'

    def test_default_black_with_padding_is_blank(self):
        mapper = DensityMapper(padding=9, invert=False)
        assert mapper.index(0.0) == 78
        assert mapper.char(0.0) == ' '

    def test_default_white_is_heaviest(self):
        mapper = DensityMapper(padding=9, invert=False)
        assert mapper.char(1.0) == '@'

    def test_index_formula(self):
        mapper = DensityMapper(padding=9, invert=True)
        assert mapper.index(0.5) == 39
        assert mapper.char(0.5) == DENSITY_RAMP[39]

    def test_padding_boundary(self):
        mapper = DensityMapper(padding=9, invert=True)
        # floor(78 * 70/78) == 70 is the first blank slot
        assert mapper.char(69.5 / 78) == DENSITY_RAMP[69]
        assert mapper.char(70.5 / 78) == ' '

    @pytest.mark.parametrize("padding", [0, 1, 9, 30])
    @pytest.mark.parametrize("invert", [True, False])
    def test_monotonic(self, padding, invert):
        mapper = DensityMapper(padding=padding, invert=invert)
        values = np.linspace(0.0, 1.0, 1001)
        if not invert:
            values = values[::-1]
        indices = [mapper.index(v) for v in values]
        assert all(a <= b for a, b in zip(indices, indices[1:]))

    def test_out_of_range_is_clipped(self):
        mapper = DensityMapper(padding=0, invert=True)
        assert mapper.index(-0.5) == 0
        assert mapper.index(1.5) == 69

    def test_map_row(self):
        mapper = DensityMapper(padding=9, invert=True)
        assert mapper.map_row([0.0, 1.0, 0.0]) == '@ @'

    def test_negative_padding(self):
        with pytest.raises(ValueError):
            DensityMapper(padding=-1)
