#!/usr/bin/env python3
"""
Image to ASCII Converter - Grid Renderer
========================================
Drives the region sampler and the density mapper across the image and writes
the result one line at a time.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, TextIO, Tuple

from image_to_ascii.config import ConversionConfig
from image_to_ascii.density import DensityMapper
from image_to_ascii.dimensions import resolve_grid_size
from image_to_ascii.image_buffer import ImageBuffer
from image_to_ascii.luminance import LuminanceCalculator
from image_to_ascii.sampler import RegionSampler


logger = logging.getLogger(__name__)


@dataclass
class AsciiArtResult:
    """Result of ASCII art generation."""
    text: str                                          # Lines joined with '\n'
    lines: List[str]                                   # Lines of ASCII art
    width: int = 0                                     # Output columns
    height: int = 0                                    # Output rows
    original_size: Tuple[int, int] = (0, 0)            # Source image size


class GridRenderer:
    """Render an ImageBuffer as ASCII art."""

    def __init__(self, config: Optional[ConversionConfig] = None):
        """Initialize with optional configuration."""
        self.config = config or ConversionConfig()
        self.mapper = DensityMapper(padding=self.config.padding,
                                    invert=self.config.invert)

    def build_sampler(self, image: ImageBuffer) -> RegionSampler:
        """Lay out sampling regions for ``image`` according to the config."""
        if self.config.block_size is not None:
            block_width, block_height = self.config.block_size
            return RegionSampler.from_blocks(image.width, image.height,
                                             block_width, block_height)

        columns, rows = resolve_grid_size(image.width, image.height,
                                          self.config.columns, self.config.rows,
                                          self.config.font_ratio)
        return RegionSampler.from_grid(image.width, image.height, columns, rows)

    def iter_lines(self, image: ImageBuffer) -> Iterator[str]:
        """Yield output lines top to bottom, without line terminators."""
        sampler = self.build_sampler(image)
        logger.debug("Sampling %dx%d image into %dx%d grid (region %.3fx%.3f px)",
                     image.width, image.height, sampler.columns, sampler.rows,
                     sampler.region_width, sampler.region_height)

        luma_map = LuminanceCalculator.compute(image.pixels, self.config.luminance_model)
        for row in range(sampler.rows):
            yield self.mapper.map_row(sampler.average_row(luma_map, row))

    def render(self, image: ImageBuffer, sink: TextIO) -> int:
        """
        Write the ASCII art for ``image`` to ``sink``.

        Returns:
            Number of lines written
        """
        count = 0
        for line in self.iter_lines(image):
            sink.write(line)
            sink.write('\n')
            count += 1
        return count

    def generate(self, image: ImageBuffer) -> AsciiArtResult:
        """Render ``image`` into an in-memory AsciiArtResult."""
        lines = list(self.iter_lines(image))
        return AsciiArtResult(
            text='\n'.join(lines),
            lines=lines,
            width=len(lines[0]) if lines else 0,
            height=len(lines),
            original_size=image.size,
        )
