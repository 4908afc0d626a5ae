"""
Edge Filter Operations (Line Sketch).

Builds a tattoo line sketch from an RGBA raster:

1. Plain BT.601 grayscale, stored as bytes (no contrast)
2. Sobel gradient magnitude over interior pixels, capped at 255
3. Magnitude above the threshold is drawn black on white
4. Optional inversion
5. Optional line thickening (dilation)

Border pixels have no full 3x3 neighborhood and get a zero gradient, so
they always come out as background. Rasters narrower or shorter than
three pixels therefore render entirely as background.
"""

import logging

import numpy as np

from TS_Libs.constants import BLACK, SOBEL_X, SOBEL_Y, WHITE
from TS_Libs.StencilEngineLib.dilation_filter import apply_line_thickness
from TS_Libs.StencilEngineLib.raster_models import Raster, StencilSettings
from TS_Libs.StencilEngineLib.tone_filter import compute_luminance, invert_binary

logger = logging.getLogger(__name__)


def grayscale_bytes(pixels: np.ndarray) -> np.ndarray:
    """
    Convert RGBA pixels to a byte grayscale plane.

    Args:
        pixels: (height, width, 4) uint8 array

    Returns:
        (height, width) uint8 array, luma rounded half-to-even
    """
    return np.clip(np.rint(compute_luminance(pixels)), 0, 255).astype(np.uint8)


def sobel_magnitude(gray: np.ndarray) -> np.ndarray:
    """
    Compute Sobel gradient magnitude.

    Args:
        gray: (height, width) grayscale array

    Returns:
        (height, width) uint8 array. Interior pixels hold
        min(255, sqrt(gx^2 + gy^2)) rounded half-to-even; border pixels are 0.
    """
    height, width = gray.shape
    magnitude = np.zeros((height, width), dtype=np.uint8)
    if height < 3 or width < 3:
        return magnitude

    values = gray.astype(np.float64)
    gx = np.zeros((height - 2, width - 2), dtype=np.float64)
    gy = np.zeros((height - 2, width - 2), dtype=np.float64)

    # Accumulate each kernel tap as a shifted view of the interior
    for ky in range(3):
        for kx in range(3):
            window = values[ky:ky + height - 2, kx:kx + width - 2]
            if SOBEL_X[ky][kx]:
                gx += SOBEL_X[ky][kx] * window
            if SOBEL_Y[ky][kx]:
                gy += SOBEL_Y[ky][kx] * window

    interior = np.minimum(255.0, np.sqrt(gx * gx + gy * gy))
    magnitude[1:-1, 1:-1] = np.rint(interior).astype(np.uint8)
    return magnitude


def apply_line_sketch(raster: Raster, settings: StencilSettings) -> Raster:
    """
    Create an edge-detected line sketch.

    Here the threshold acts as edge sensitivity: a lower threshold keeps
    more edges.

    Args:
        raster: Input RGBA raster
        settings: Processing settings (clamped before use)

    Returns:
        Binary raster, black lines on white unless inverted
    """
    settings = settings.clamped()
    pixels = raster.to_array()

    magnitude = sobel_magnitude(grayscale_bytes(pixels))
    lines = np.where(magnitude > settings.threshold, BLACK, WHITE)
    if settings.invert:
        lines = invert_binary(lines)

    lines = lines.astype(np.uint8)
    pixels[..., 0] = lines
    pixels[..., 1] = lines
    pixels[..., 2] = lines

    logger.debug(
        f"Line sketch {raster.width}x{raster.height}: "
        f"{int(np.count_nonzero(magnitude > settings.threshold))} edge pixels"
    )

    result = Raster.from_array(pixels)
    return apply_line_thickness(result, settings.line_thickness)
