"""
Image to ASCII Converter
========================
Converts raster images to plain-text ASCII art by averaging luminance over a
grid of sampling regions and mapping each average onto a density ramp.
"""

from typing import Optional, Union

from PIL import Image

from image_to_ascii.config import ConversionConfig, parse_font_ratio
from image_to_ascii.constants import DENSITY_RAMP, RAMP_LENGTH, LuminanceModel
from image_to_ascii.density import DensityMapper
from image_to_ascii.dimensions import block_grid_size, resolve_grid_size
from image_to_ascii.exceptions import ConversionError, DecodeError, OutputError
from image_to_ascii.image_buffer import ImageBuffer, load_image
from image_to_ascii.luminance import LuminanceCalculator, luminance
from image_to_ascii.renderer import AsciiArtResult, GridRenderer
from image_to_ascii.sampler import RegionSampler, SamplingRegion

__version__ = "0.1.0"

__all__ = [
    'AsciiArtResult', 'ConversionConfig', 'ConversionError', 'DecodeError',
    'DENSITY_RAMP', 'DensityMapper', 'GridRenderer', 'ImageBuffer',
    'LuminanceCalculator', 'LuminanceModel', 'OutputError', 'RAMP_LENGTH',
    'RegionSampler', 'SamplingRegion', 'block_grid_size', 'convert_image',
    'load_image', 'luminance', 'parse_font_ratio', 'resolve_grid_size',
]


def convert_image(image: Union[str, Image.Image, ImageBuffer],
                  columns: Optional[int] = None,
                  rows: Optional[int] = None,
                  model: Union[str, LuminanceModel] = LuminanceModel.STANDARD,
                  invert: bool = False,
                  **kwargs) -> AsciiArtResult:
    """
    Convenience function to convert an image to ASCII art.

    Args:
        image: File path, PIL Image or ImageBuffer
        columns: Output columns (derived if None)
        rows: Output rows (derived if None)
        model: 'standard', 'perceived', 'perceived_fast' or a LuminanceModel
        invert: Invert brightness
        **kwargs: Additional ConversionConfig options

    Returns:
        AsciiArtResult
    """
    if isinstance(model, str):
        model = LuminanceModel.from_name(model)

    if isinstance(image, str):
        buffer = load_image(image)
    elif isinstance(image, Image.Image):
        buffer = ImageBuffer.from_pil(image)
    else:
        buffer = image

    config = ConversionConfig(
        columns=columns,
        rows=rows,
        luminance_model=model,
        invert=invert,
        **kwargs
    )
    return GridRenderer(config).generate(buffer)
