"""
Shared fixtures for image_to_ascii tests.

All images are synthetic numpy arrays; files are written to tmp_path only
where a test needs to go through the decoder.
"""

import numpy as np
import pytest
from PIL import Image

from image_to_ascii.image_buffer import ImageBuffer


# =============================================================================
# Pytest Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "e2e: End-to-end CLI tests")


# =============================================================================
# Helpers
# =============================================================================

def solid(width: int, height: int, value) -> ImageBuffer:
    """Uniform image; ``value`` is a grey level or an (R, G, B) triple."""
    arr = np.empty((height, width, 3), dtype=np.uint8)
    arr[...] = value
    return ImageBuffer.from_array(arr)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def black_2x2() -> ImageBuffer:
    return solid(2, 2, 0)


@pytest.fixture
def white_image() -> ImageBuffer:
    return solid(12, 8, 255)


@pytest.fixture
def gradient_image() -> ImageBuffer:
    """37x23 horizontal grey ramp, black on the left."""
    width, height = 37, 23
    row = np.linspace(0, 255, width).astype(np.uint8)
    arr = np.repeat(row[np.newaxis, :, np.newaxis], 3, axis=2)
    arr = np.repeat(arr, height, axis=0)
    return ImageBuffer.from_array(arr)


@pytest.fixture
def random_pixels() -> np.ndarray:
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(500, 3), dtype=np.uint8)


@pytest.fixture
def png_path(tmp_path):
    """Path to a 4x2 PNG: left half black, right half white."""
    arr = np.zeros((2, 4, 3), dtype=np.uint8)
    arr[:, 2:] = 255
    path = tmp_path / "halves.png"
    Image.fromarray(arr).save(path)
    return str(path)


@pytest.fixture
def solid_image():
    """Factory for uniform images."""
    return solid
