#!/usr/bin/env python3
"""
Image to ASCII Converter - Output Dimensions
============================================
Resolves the output grid size from the image size and the requested columns
and rows, correcting for the shape of the terminal font.
"""

import math
from typing import Optional, Tuple

from image_to_ascii.constants import DEFAULT_FONT_RATIO


def resolve_grid_size(width: int, height: int,
                      columns: Optional[int] = None,
                      rows: Optional[int] = None,
                      font_ratio: float = DEFAULT_FONT_RATIO) -> Tuple[int, int]:
    """
    Calculate the (columns, rows) of the output grid.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        columns: Requested columns (derived if None)
        rows: Requested rows (derived if None)
        font_ratio: Character width / character height

    Returns:
        Tuple of (columns, rows), each at least 1
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    if font_ratio <= 0:
        raise ValueError(f"Font ratio must be positive, got {font_ratio}")
    if columns is not None and columns <= 0:
        raise ValueError(f"Columns must be positive, got {columns}")
    if rows is not None and rows <= 0:
        raise ValueError(f"Rows must be positive, got {rows}")

    if columns is not None and rows is not None:
        return columns, rows

    if columns is not None:
        aspect_ratio = height / width
        rows = math.ceil(columns * aspect_ratio * font_ratio)
    elif rows is not None:
        aspect_ratio = width / height
        columns = math.ceil(rows * aspect_ratio / font_ratio)
    else:
        # One character per pixel
        columns, rows = width, height

    return max(1, columns), max(1, rows)


def block_grid_size(width: int, height: int,
                    block_width: int = 1, block_height: int = 2) -> Tuple[int, int]:
    """Grid size when walking the image in fixed pixel blocks."""
    if block_width <= 0 or block_height <= 0:
        raise ValueError(f"Block size must be positive, got {block_width}x{block_height}")
    return math.ceil(width / block_width), math.ceil(height / block_height)
