#!/usr/bin/env python3
"""
Image to ASCII Converter - Constants
====================================
Density ramp, luminance weights and shared enums.
"""

from enum import Enum, auto
from typing import Optional


# =============================================================================
# DENSITY RAMP
# =============================================================================

# Heaviest-looking character first, lightest last.
DENSITY_RAMP: str = "@QB#NgWM8RDHdOKq9$6khEPXwmeZaoS2yjufF]}{tx1zv7lciIL/\\|!?*>r^;:_\"~,'.-`"
RAMP_LENGTH: int = len(DENSITY_RAMP)

BLANK_CHAR: str = ' '


# =============================================================================
# LUMINANCE WEIGHTS
# =============================================================================

# ITU-R BT.709
RED_WEIGHT: float = 0.2126
GREEN_WEIGHT: float = 0.7152
BLUE_WEIGHT: float = 0.0722

# ITU-R BT.601
RED_WEIGHT_PERC: float = 0.299
GREEN_WEIGHT_PERC: float = 0.587
BLUE_WEIGHT_PERC: float = 0.114

LUMA_MAX: float = 255.0


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_PADDING: int = 9
DEFAULT_FONT_RATIO: float = 0.5             # char width / char height
DEFAULT_BLOCK_SIZE = (1, 2)                 # pixels per character (w, h)


# =============================================================================
# ENUMS
# =============================================================================

class LuminanceModel(Enum):
    """Perceptual model used to turn an RGB pixel into a luminance value."""
    STANDARD = auto()         # Weighted linear, BT.709
    PERCEIVED_FAST = auto()   # Weighted linear, BT.601
    PERCEIVED = auto()        # Weighted root-sum-square, BT.601

    @classmethod
    def from_flags(cls, perceived: bool = False, fast: bool = False) -> 'LuminanceModel':
        """
        Build a model from the two command-line switches.

        ``fast`` takes priority over ``perceived`` when both are set.
        """
        if fast:
            return cls.PERCEIVED_FAST
        if perceived:
            return cls.PERCEIVED
        return cls.STANDARD

    @classmethod
    def from_name(cls, name: Optional[str]) -> 'LuminanceModel':
        """Look up a model by its lowercase name, e.g. ``'perceived_fast'``."""
        if name is None:
            return cls.STANDARD
        key = name.strip().upper().replace('-', '_')
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown luminance model: {name}") from None
