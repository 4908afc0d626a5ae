"""
Raster and settings data models for the stencil engine.

This module defines the value types passed into and out of the engine.

Classes:
    Raster: Immutable RGBA pixel buffer with fixed width and height
    StencilMode: The three processing modes
    StencilSettings: Immutable processing parameters
    ProcessingResult: Up to three output rasters produced by one call

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import numpy as np

from TS_Libs.constants import (
    CHANNELS,
    CONTRAST_MAX,
    CONTRAST_MIN,
    DEFAULT_CONTRAST,
    DEFAULT_INVERT,
    DEFAULT_LINE_THICKNESS,
    DEFAULT_MODE,
    DEFAULT_THRESHOLD,
    LINE_THICKNESS_MAX,
    LINE_THICKNESS_MIN,
    MODE_BLACK_WHITE,
    MODE_LINE_SKETCH,
    MODE_SOLID_STENCIL,
    OUTPUT_BLACK_WHITE,
    OUTPUT_LINE_SKETCH,
    OUTPUT_SOLID_STENCIL,
    THRESHOLD_MAX,
    THRESHOLD_MIN,
)
from TS_Libs.StencilEngineLib.stencil_errors import InvalidDimensions, UnsupportedMode

RgbaColor = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Raster:
    """Row-major RGBA pixel buffer with a top-left origin.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: width * height * 4 bytes (R, G, B, A per pixel)
    """
    width: int
    height: int
    data: bytes = field(repr=False)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidDimensions(
                f"Raster dimensions must be non-negative, got {self.width}x{self.height}"
            )

        # Owned, immutable copy; memoryview rejects ints and other non-buffers
        try:
            data = bytes(memoryview(self.data))
        except TypeError:
            raise TypeError(
                f"Raster data must be bytes-like, got {type(self.data).__name__}"
            ) from None
        object.__setattr__(self, "data", data)

        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise InvalidDimensions(
                f"Buffer length {len(self.data)} does not match "
                f"{self.width}x{self.height}x{CHANNELS} = {expected}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def to_array(self) -> np.ndarray:
        """
        Copy the buffer into a writable (height, width, 4) uint8 array.

        Returns:
            A new numpy array that shares no memory with this raster
        """
        array = np.frombuffer(self.data, dtype=np.uint8)
        return array.reshape((self.height, self.width, CHANNELS)).copy()

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Raster":
        """
        Build a raster from a (height, width, 4) array.

        Values are clamped to 0-255 and rounded half-to-even before being
        stored as bytes.

        Raises:
            InvalidDimensions: If the array is not shaped (height, width, 4)
        """
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise InvalidDimensions(
                f"Expected array shaped (height, width, {CHANNELS}), got {array.shape}"
            )
        if array.dtype != np.uint8:
            array = np.clip(np.rint(array), 0, 255).astype(np.uint8)
        height, width = array.shape[:2]
        return cls(width, height, np.ascontiguousarray(array).tobytes())

    @classmethod
    def filled(cls, width: int, height: int, color: RgbaColor) -> "Raster":
        """Create a raster where every pixel has the same color."""
        if width < 0 or height < 0:
            raise InvalidDimensions(
                f"Raster dimensions must be non-negative, got {width}x{height}"
            )
        return cls(width, height, bytes(color) * (width * height))

    def pixel(self, x: int, y: int) -> RgbaColor:
        """Return the RGBA tuple at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} raster")
        offset = (y * self.width + x) * CHANNELS
        r, g, b, a = self.data[offset:offset + CHANNELS]
        return (r, g, b, a)


class StencilMode(Enum):
    """Processing modes understood by the engine."""

    SOLID_STENCIL = MODE_SOLID_STENCIL  # Thresholded black/white stencil
    BLACK_AND_WHITE = MODE_BLACK_WHITE  # Tonal rendering plus line sketch
    LINE_SKETCH = MODE_LINE_SKETCH  # Sobel edge outline only

    @classmethod
    def parse(cls, value: Any) -> "StencilMode":
        """
        Resolve a mode from an enum member, its value, or its name.

        Raises:
            UnsupportedMode: If value does not name a known mode
        """
        if isinstance(value, cls):
            return value

        text = str(value).strip()
        for mode in cls:
            if text == mode.value or text.upper() == mode.name:
                return mode

        valid = ", ".join(mode.value for mode in cls)
        raise UnsupportedMode(f"Unknown mode: {value!r}. Valid modes: {valid}")


def _clamp(value, low, high):
    return max(low, min(high, value))


@dataclass(frozen=True)
class StencilSettings:
    """Processing parameters for one engine call.

    Attributes:
        threshold: Luminance cutoff (stencil) or edge sensitivity (sketch), 0-255
        contrast: Gain around the midpoint, 0.5-3.0
        line_thickness: Dilation radius in pixels, 1-5 (1 = no dilation)
        invert: Swap black and white in the final result
        mode: Which transform(s) to run
    """
    threshold: int = DEFAULT_THRESHOLD
    contrast: float = DEFAULT_CONTRAST
    line_thickness: int = DEFAULT_LINE_THICKNESS
    invert: bool = DEFAULT_INVERT
    mode: StencilMode = StencilMode(DEFAULT_MODE)

    def __post_init__(self):
        object.__setattr__(self, "mode", StencilMode.parse(self.mode))

    def clamped(self) -> "StencilSettings":
        """Return a copy with every numeric field forced into its valid range."""
        return replace(
            self,
            threshold=int(_clamp(int(self.threshold), THRESHOLD_MIN, THRESHOLD_MAX)),
            contrast=float(_clamp(float(self.contrast), CONTRAST_MIN, CONTRAST_MAX)),
            line_thickness=int(
                _clamp(int(self.line_thickness), LINE_THICKNESS_MIN, LINE_THICKNESS_MAX)
            ),
            invert=bool(self.invert),
        )

    def with_changes(self, **changes: Any) -> "StencilSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data["mode"] = self.mode.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StencilSettings":
        """Create from dictionary, accepting the camelCase lineThickness key."""
        data = dict(data)
        if "lineThickness" in data and "line_thickness" not in data:
            data["line_thickness"] = data.pop("lineThickness")
        filtered = {k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__}
        return cls(**filtered)


@dataclass
class ProcessingResult:
    """Rasters produced by one engine call. Unused slots stay None."""
    solid_stencil: Optional[Raster] = None
    black_white: Optional[Raster] = None
    line_sketch: Optional[Raster] = None

    def outputs(self) -> Dict[str, Raster]:
        """Populated rasters keyed by output name, in a fixed order."""
        candidates = (
            (OUTPUT_SOLID_STENCIL, self.solid_stencil),
            (OUTPUT_BLACK_WHITE, self.black_white),
            (OUTPUT_LINE_SKETCH, self.line_sketch),
        )
        return {name: raster for name, raster in candidates if raster is not None}

    def is_empty(self) -> bool:
        return not self.outputs()
