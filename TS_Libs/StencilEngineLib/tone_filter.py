"""
Tone Filter Operations.

Provides the luminance-based transforms of the stencil engine:
- Grayscale: ITU-R BT.601 luma (0.299 R + 0.587 G + 0.114 B)
- Contrast: gain around the 50% midpoint, clamped to 0-255
- Solid stencil: contrast-adjusted luma thresholded to pure black/white
- Black & white: continuous contrast-adjusted luma

All functions take and return independent arrays or rasters. The alpha
channel is always copied through untouched.

Example:
    >>> from TS_Libs.StencilEngineLib.raster_models import Raster, StencilSettings
    >>> raster = Raster.filled(4, 4, (200, 120, 40, 255))
    >>> stencil = apply_solid_stencil(raster, StencilSettings(threshold=100))
    >>> stencil.pixel(0, 0)
    (255, 255, 255, 255)
"""

import numpy as np

from TS_Libs.constants import BLACK, LUMA_BLUE, LUMA_GREEN, LUMA_RED, WHITE
from TS_Libs.StencilEngineLib.dilation_filter import apply_line_thickness
from TS_Libs.StencilEngineLib.raster_models import Raster, StencilSettings


# ============================================================================
# Grayscale & Contrast
# ============================================================================

def compute_luminance(pixels: np.ndarray) -> np.ndarray:
    """
    Compute BT.601 luma for every pixel.

    Args:
        pixels: (height, width, 4) uint8 array

    Returns:
        (height, width) float64 array, unrounded
    """
    rgb = pixels[..., :3].astype(np.float64)
    return rgb[..., 0] * LUMA_RED + rgb[..., 1] * LUMA_GREEN + rgb[..., 2] * LUMA_BLUE


def apply_contrast(luminance: np.ndarray, contrast: float) -> np.ndarray:
    """
    Stretch luminance around the midpoint.

    C = clamp(((L / 255 - 0.5) * contrast + 0.5) * 255, 0, 255)

    Args:
        luminance: Float array of luma values
        contrast: Multiplicative gain (1.0 = unchanged)

    Returns:
        Float array clamped to 0-255
    """
    adjusted = ((luminance / 255.0 - 0.5) * contrast + 0.5) * 255.0
    return np.clip(adjusted, 0.0, 255.0)


def grayscale_contrast(raster: Raster, contrast: float) -> np.ndarray:
    """Luma followed by contrast, as a (height, width) float array."""
    return apply_contrast(compute_luminance(raster.to_array()), contrast)


def _write_gray(pixels: np.ndarray, values: np.ndarray) -> np.ndarray:
    """Store a single-channel value into R, G and B. Alpha is left alone."""
    gray = np.clip(np.rint(values), 0, 255).astype(np.uint8)
    pixels[..., 0] = gray
    pixels[..., 1] = gray
    pixels[..., 2] = gray
    return pixels


def invert_binary(values: np.ndarray) -> np.ndarray:
    """Swap 0 and 255 (works for any 0-255 array)."""
    return WHITE - values


# ============================================================================
# Solid Stencil
# ============================================================================

def apply_solid_stencil(raster: Raster, settings: StencilSettings) -> Raster:
    """
    Create a solid black/white stencil.

    Pixels whose contrast-adjusted luma is strictly above the threshold
    become white, the rest black. Invert swaps the two, then line
    thickness dilates the black areas.

    Args:
        raster: Input RGBA raster
        settings: Processing settings (clamped before use)

    Returns:
        Binary raster (RGB values only 0 or 255)
    """
    settings = settings.clamped()
    pixels = raster.to_array()

    contrasted = apply_contrast(compute_luminance(pixels), settings.contrast)
    stencil = np.where(contrasted > settings.threshold, WHITE, BLACK)
    if settings.invert:
        stencil = invert_binary(stencil)

    result = Raster.from_array(_write_gray(pixels, stencil))
    return apply_line_thickness(result, settings.line_thickness)


# ============================================================================
# Black & White
# ============================================================================

def apply_black_white(raster: Raster, settings: StencilSettings) -> Raster:
    """
    Create a tonal black & white rendering.

    No thresholding and no dilation: the contrast-adjusted luma is written
    as-is (inverted as 255 - C when requested).

    Args:
        raster: Input RGBA raster
        settings: Processing settings (clamped before use)

    Returns:
        Grayscale raster with the input's alpha
    """
    settings = settings.clamped()
    pixels = raster.to_array()

    tone = apply_contrast(compute_luminance(pixels), settings.contrast)
    if settings.invert:
        tone = 255.0 - tone

    return Raster.from_array(_write_gray(pixels, tone))


def invert_raster(raster: Raster) -> Raster:
    """Return a copy with R, G and B replaced by 255 - value."""
    pixels = raster.to_array()
    pixels[..., :3] = WHITE - pixels[..., :3]
    return Raster.from_array(pixels)
