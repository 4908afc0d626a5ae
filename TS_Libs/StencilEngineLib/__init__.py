"""
StencilEngineLib - Pixel engine for tattoo stencils

This module provides the stateless transforms that turn a decoded RGBA
raster into stencil artwork, along with the raster and settings models.
"""

from TS_Libs.StencilEngineLib.stencil_errors import (
    StencilEngineError,
    InvalidDimensions,
    UnsupportedMode,
)
from TS_Libs.StencilEngineLib.raster_models import (
    Raster,
    RgbaColor,
    StencilMode,
    StencilSettings,
    ProcessingResult,
)
from TS_Libs.StencilEngineLib.dilation_filter import apply_line_thickness
from TS_Libs.StencilEngineLib.tone_filter import (
    apply_solid_stencil,
    apply_black_white,
    invert_raster,
)
from TS_Libs.StencilEngineLib.edge_filter import apply_line_sketch, sobel_magnitude
from TS_Libs.StencilEngineLib.stencil_engine import process_raster

__all__ = [
    "StencilEngineError",
    "InvalidDimensions",
    "UnsupportedMode",
    "Raster",
    "RgbaColor",
    "StencilMode",
    "StencilSettings",
    "ProcessingResult",
    "apply_line_thickness",
    "apply_solid_stencil",
    "apply_black_white",
    "invert_raster",
    "apply_line_sketch",
    "sobel_magnitude",
    "process_raster",
]
