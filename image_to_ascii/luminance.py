#!/usr/bin/env python3
"""
Image to ASCII Converter - Luminance
====================================
This module contains the LuminanceCalculator class for turning RGB pixels
into scalar luminance values in [0, 1].
"""

import numpy as np
from typing import Sequence, Union

from image_to_ascii.constants import (
    LuminanceModel,
    RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT,
    RED_WEIGHT_PERC, GREEN_WEIGHT_PERC, BLUE_WEIGHT_PERC,
    LUMA_MAX,
)


PixelLike = Union[Sequence[int], np.ndarray]


class LuminanceCalculator:
    """Compute luminance for a single pixel or a whole (..., 3) RGB array."""

    @staticmethod
    def _channels(pixels: PixelLike):
        rgb = np.asarray(pixels, dtype=np.float64)
        if rgb.shape[-1] != 3:
            raise ValueError(f"Expected RGB channels in the last axis, got shape {rgb.shape}")
        return rgb[..., 0], rgb[..., 1], rgb[..., 2]

    @staticmethod
    def standard(pixels: PixelLike) -> np.ndarray:
        """BT.709 weighted sum."""
        r, g, b = LuminanceCalculator._channels(pixels)
        return (RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b) / LUMA_MAX

    @staticmethod
    def perceived_fast(pixels: PixelLike) -> np.ndarray:
        """BT.601 weighted sum."""
        r, g, b = LuminanceCalculator._channels(pixels)
        return (RED_WEIGHT_PERC * r + GREEN_WEIGHT_PERC * g + BLUE_WEIGHT_PERC * b) / LUMA_MAX

    @staticmethod
    def perceived(pixels: PixelLike) -> np.ndarray:
        """BT.601 weights applied to squared channels, then square-rooted."""
        r, g, b = LuminanceCalculator._channels(pixels)
        return np.sqrt(RED_WEIGHT_PERC * r * r +
                       GREEN_WEIGHT_PERC * g * g +
                       BLUE_WEIGHT_PERC * b * b) / LUMA_MAX

    @classmethod
    def compute(cls, pixels: PixelLike,
                model: LuminanceModel = LuminanceModel.STANDARD) -> np.ndarray:
        """
        Compute luminance using the specified model.

        Args:
            pixels: One (R, G, B) triple or an array whose last axis is RGB
            model: Luminance model to apply

        Returns:
            Luminance with the leading shape of ``pixels`` (a 0-d value for a
            single pixel)
        """
        if model == LuminanceModel.STANDARD:
            return cls.standard(pixels)
        elif model == LuminanceModel.PERCEIVED_FAST:
            return cls.perceived_fast(pixels)
        elif model == LuminanceModel.PERCEIVED:
            return cls.perceived(pixels)
        else:
            raise ValueError(f"Unknown luminance model: {model}")


def luminance(pixel: PixelLike, model: LuminanceModel = LuminanceModel.STANDARD) -> float:
    """Luminance of a single pixel as a plain float."""
    return float(LuminanceCalculator.compute(pixel, model))
