#!/usr/bin/env python3
"""
Image to ASCII Converter - Image Buffer
=======================================
Decoding of image files into a read-only, row-major RGB pixel buffer.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from image_to_ascii.exceptions import DecodeError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageBuffer:
    """Decoded RGB pixels, shape (height, width, 3), dtype uint8."""
    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """Return the (R, G, B) triple at column ``x``, row ``y``."""
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    @classmethod
    def from_array(cls, arr) -> 'ImageBuffer':
        """
        Wrap an (H, W, 3) array.

        The array is copied to uint8 and marked read-only. Values outside
        [0, 255] raise ValueError instead of wrapping.
        """
        source = np.asarray(arr)
        if source.size and (source.min() < 0 or source.max() > 255):
            raise ValueError(
                f"Channel values must be within [0, 255], got "
                f"[{source.min()}, {source.max()}]")
        data = np.array(source, dtype=np.uint8, copy=True)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) RGB array, got shape {data.shape}")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError("Image has zero width or height")
        data.setflags(write=False)
        return cls(pixels=data)

    @classmethod
    def from_pil(cls, image: Image.Image) -> 'ImageBuffer':
        """Convert a PIL image of any mode to RGB. Alpha is dropped."""
        if image.mode != 'RGB':
            image = image.convert('RGB')
        return cls.from_array(np.asarray(image))


def load_image(path: str) -> ImageBuffer:
    """
    Decode an image file into an ImageBuffer.

    Only the first frame of multi-frame images is read.

    Raises:
        DecodeError: if the file is missing, unreadable, not an image, or empty
    """
    try:
        with Image.open(path) as image:
            logger.debug("Opened %s: size=%s mode=%s", path, image.size, image.mode)
            if image.width == 0 or image.height == 0:
                raise DecodeError(path, "image has zero width or height")
            buffer = ImageBuffer.from_pil(image)
    except FileNotFoundError:
        raise DecodeError(path, "no such file") from None
    except UnidentifiedImageError as e:
        raise DecodeError(path, "unsupported or corrupt image") from e
    except OSError as e:
        raise DecodeError(path, str(e)) from e

    logger.debug("Decoded %s into %dx%d pixels", path, buffer.width, buffer.height)
    return buffer
