"""
Pytest configuration and shared fixtures for Tattoo Stencil tests.

This module provides shared test fixtures and helpers
used across multiple test modules.
"""

import numpy as np
import pytest

from TS_Libs.StencilEngineLib.raster_models import Raster


def make_gray_raster(values, alpha=255):
    """
    Build a raster from a 2D list of gray levels.

    Args:
        values: Rows of 0-255 values (top row first)
        alpha: Alpha for every pixel, or a 2D list matching values

    Returns:
        Raster with R = G = B = value
    """
    gray = np.array(values, dtype=np.uint8)
    height, width = gray.shape
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = gray
    pixels[..., 1] = gray
    pixels[..., 2] = gray
    pixels[..., 3] = np.array(alpha, dtype=np.uint8)
    return Raster.from_array(pixels)


def rgb_plane(raster, channel=0):
    """Return one channel of a raster as a (height, width) array."""
    return raster.to_array()[..., channel]


@pytest.fixture
def temp_output_dir(tmp_path):
    """
    Provide a temporary directory for output files.

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def random_raster():
    """
    Provide a 24x16 raster of seeded random RGBA noise.

    Returns:
        Raster with varied color and alpha values
    """
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(16, 24, 4), dtype=np.uint8)
    return Raster.from_array(pixels)


@pytest.fixture
def white_raster_20():
    """A 20x20 opaque white raster."""
    return Raster.filled(20, 20, (255, 255, 255, 255))
