#!/usr/bin/env python3
"""
Image to ASCII Converter - Density Mapping
==========================================
Maps region luminance onto the density ramp.
"""

import math
from typing import Iterable

from image_to_ascii.constants import DENSITY_RAMP, BLANK_CHAR, DEFAULT_PADDING


class DensityMapper:
    """
    Map luminance in [0, 1] to a ramp character or a blank.

    ``padding`` adds blank slots past the light end of the ramp. Without
    ``invert`` the luminance is flipped first, so bright regions land on the
    heavy characters.
    """

    def __init__(self, padding: int = DEFAULT_PADDING, invert: bool = False,
                 ramp: str = DENSITY_RAMP):
        if padding < 0:
            raise ValueError(f"Padding must be non-negative, got {padding}")
        if not ramp:
            raise ValueError("Density ramp must not be empty")
        self.padding = padding
        self.invert = invert
        self.ramp = ramp
        self.scale = len(ramp) + padding - 1

    def index(self, luminance: float) -> int:
        """Slot for ``luminance``; values at or past ``len(ramp)`` are blank."""
        value = min(1.0, max(0.0, float(luminance)))
        if not self.invert:
            value = 1.0 - value
        return int(math.floor(self.scale * value))

    def char(self, luminance: float) -> str:
        idx = self.index(luminance)
        if idx >= len(self.ramp):
            return BLANK_CHAR
        return self.ramp[idx]

    def map_row(self, values: Iterable[float]) -> str:
        """Map a row of region luminance values to a line of text."""
        return ''.join(self.char(v) for v in values)
