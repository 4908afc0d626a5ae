"""
Exceptions raised by the stencil engine.

Classes:
    StencilEngineError: Base class for engine errors
    InvalidDimensions: Raster buffer does not match its width and height
    UnsupportedMode: Settings name a processing mode the engine does not know
"""


class StencilEngineError(ValueError):
    """Base class for errors raised by the stencil engine."""


class InvalidDimensions(StencilEngineError):
    """Raster buffer length does not equal width * height * 4."""


class UnsupportedMode(StencilEngineError):
    """Processing mode is not one of the recognized stencil modes."""
