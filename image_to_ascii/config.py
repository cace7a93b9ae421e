#!/usr/bin/env python3
"""
Image to ASCII Converter - Configuration
========================================
Immutable run configuration, fully resolved before any pixel is read.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from image_to_ascii.constants import (
    LuminanceModel,
    DEFAULT_PADDING,
    DEFAULT_FONT_RATIO,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionConfig:
    """Configuration for one conversion run."""

    # Mapping
    invert: bool = False                                  # Invert brightness
    luminance_model: LuminanceModel = LuminanceModel.STANDARD
    padding: int = DEFAULT_PADDING                        # Blank slots past the ramp

    # Size parameters
    columns: Optional[int] = None                         # Output columns (derived if None)
    rows: Optional[int] = None                            # Output rows (derived if None)
    font_ratio: float = DEFAULT_FONT_RATIO                # Char width / char height
    block_size: Optional[Tuple[int, int]] = None          # Fixed (w, h) pixel blocks

    # Paths
    input_path: Optional[str] = None
    output_path: Optional[str] = None                     # stdout if None

    def __post_init__(self):
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")
        if self.columns is not None and self.columns <= 0:
            raise ValueError(f"columns must be positive, got {self.columns}")
        if self.rows is not None and self.rows <= 0:
            raise ValueError(f"rows must be positive, got {self.rows}")
        if self.font_ratio <= 0:
            raise ValueError(f"font_ratio must be positive, got {self.font_ratio}")
        if self.block_size is not None:
            if self.columns is not None or self.rows is not None:
                raise ValueError("block_size cannot be combined with columns or rows")
            if len(self.block_size) != 2 or min(self.block_size) <= 0:
                raise ValueError(f"block_size must be two positive integers, got {self.block_size}")


_RATIO_RE = re.compile(r'^\s*([^:/]*)\s*[:/]\s*([^:/]*)\s*$')


def parse_font_ratio(text: Optional[str],
                     default: float = DEFAULT_FONT_RATIO) -> float:
    """
    Parse a font ratio given as ``0.5``, ``1:2`` or ``1/2``.

    Malformed input (missing denominator, non-numeric, zero or negative)
    logs a warning and returns ``default``.
    """
    if text is None:
        return default

    match = _RATIO_RE.match(text)
    try:
        if match:
            numerator, denominator = float(match.group(1)), float(match.group(2))
            value = numerator / denominator
        else:
            value = float(text)
    except (ValueError, ZeroDivisionError):
        logger.warning("Ignoring malformed font ratio %r, using %s", text, default)
        return default

    if not value > 0 or value == float('inf'):
        logger.warning("Ignoring non-positive font ratio %r, using %s", text, default)
        return default
    return value


def parse_block_size(text: str) -> Tuple[int, int]:
    """Parse a block size such as ``1x2``."""
    parts = re.split(r'[xX*,]', text.strip())
    if len(parts) != 2:
        raise ValueError(f"Block size must look like WxH, got {text!r}")
    width, height = int(parts[0]), int(parts[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"Block size must be positive, got {text!r}")
    return width, height
