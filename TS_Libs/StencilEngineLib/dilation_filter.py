"""
Line thickness (morphological dilation) for binary stencil rasters.

Every black pixel of the input grows into a square of half-width
``thickness - 1``. The black mask is taken once from the unmodified input,
so pixels blackened by the dilation never spread further.
"""

import numpy as np

from TS_Libs.constants import BLACK
from TS_Libs.StencilEngineLib.raster_models import Raster


def dilate_mask(mask: np.ndarray, radius: int) -> np.ndarray:
    """
    Grow a boolean mask by a square structuring element.

    Args:
        mask: (height, width) boolean array, True = line pixel
        radius: Half-width of the square; 0 returns a copy

    Returns:
        New boolean array, clipped to the mask bounds
    """
    if radius <= 0 or mask.size == 0:
        return mask.copy()

    height, width = mask.shape
    padded = np.pad(mask, radius, mode="constant", constant_values=False)
    grown = np.zeros_like(mask, dtype=bool)

    span = 2 * radius + 1
    for dy in range(span):
        for dx in range(span):
            grown |= padded[dy:dy + height, dx:dx + width]

    return grown


def apply_line_thickness(raster: Raster, thickness: int) -> Raster:
    """
    Thicken black lines of a binary raster.

    Args:
        raster: Binary RGBA raster (RGB values 0 or 255)
        thickness: Line thickness in pixels; 1 or less leaves the raster as-is

    Returns:
        The input raster when thickness <= 1, otherwise a new raster
        where every pixel within thickness - 1 of a black pixel is black
    """
    thickness = int(thickness)
    if thickness <= 1:
        return raster

    pixels = raster.to_array()
    source_mask = pixels[..., 0] == BLACK
    grown = dilate_mask(source_mask, thickness - 1)

    pixels[grown, :3] = BLACK
    return Raster.from_array(pixels)
