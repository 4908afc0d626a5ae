"""
Stencil engine mode dispatcher.

Takes a decoded RGBA raster plus settings and runs the transform(s) the
selected mode calls for:

- solid-stencil: solid stencil only
- black-white: black & white rendering and line sketch
- line-sketch: line sketch only

The engine is pure: no I/O, no shared state between calls, and the same
inputs always produce byte-identical outputs.

Example:
    >>> from TS_Libs.StencilEngineLib import Raster, StencilSettings, process_raster
    >>> raster = Raster.filled(8, 8, (30, 30, 30, 255))
    >>> result = process_raster(raster, StencilSettings(mode="line-sketch"))
    >>> list(result.outputs())
    ['line_sketch']
"""

import logging

from TS_Libs.StencilEngineLib.edge_filter import apply_line_sketch
from TS_Libs.StencilEngineLib.raster_models import (
    ProcessingResult,
    Raster,
    StencilMode,
    StencilSettings,
)
from TS_Libs.StencilEngineLib.stencil_errors import UnsupportedMode
from TS_Libs.StencilEngineLib.tone_filter import apply_black_white, apply_solid_stencil

logger = logging.getLogger(__name__)


def process_raster(raster: Raster, settings: StencilSettings) -> ProcessingResult:
    """
    Run the transform(s) selected by settings.mode.

    Args:
        raster: Input RGBA raster
        settings: Processing settings

    Returns:
        A new ProcessingResult with the mode's outputs populated

    Raises:
        TypeError: If raster is not a Raster
        UnsupportedMode: If settings.mode is not a recognized mode
    """
    if not isinstance(raster, Raster):
        raise TypeError(f"Expected Raster, got {type(raster)}")

    mode = settings.mode
    if not isinstance(mode, StencilMode):
        raise UnsupportedMode(f"Unknown mode: {mode!r}")

    logger.debug(
        f"Processing {raster.width}x{raster.height} raster: mode={mode.value} "
        f"threshold={settings.threshold} contrast={settings.contrast} "
        f"line_thickness={settings.line_thickness} invert={settings.invert}"
    )

    result = ProcessingResult()

    if mode is StencilMode.SOLID_STENCIL:
        result.solid_stencil = apply_solid_stencil(raster, settings)

    elif mode is StencilMode.BLACK_AND_WHITE:
        result.black_white = apply_black_white(raster, settings)
        result.line_sketch = apply_line_sketch(raster, settings)

    elif mode is StencilMode.LINE_SKETCH:
        result.line_sketch = apply_line_sketch(raster, settings)

    else:
        raise UnsupportedMode(f"Unknown mode: {mode!r}")

    return result
