"""
Tests for the stencil engine mode dispatcher.

Tests cover:
- Which outputs each mode fills
- Agreement with the individual transforms
- Determinism
- Alpha preservation in every mode
- Error handling
"""

import unittest
from types import SimpleNamespace

import numpy as np

from TS_Libs.StencilEngineLib import (
    InvalidDimensions,
    ProcessingResult,
    Raster,
    StencilMode,
    StencilSettings,
    UnsupportedMode,
    apply_black_white,
    apply_line_sketch,
    apply_solid_stencil,
    process_raster,
)


def noise_raster(width=17, height=11, seed=7):
    rng = np.random.default_rng(seed)
    return Raster.from_array(rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8))


class TestModeDispatch(unittest.TestCase):
    """Test which outputs each mode populates."""

    def setUp(self):
        self.raster = noise_raster()

    def test_solid_stencil_mode(self):
        settings = StencilSettings(mode=StencilMode.SOLID_STENCIL)

        result = process_raster(self.raster, settings)

        self.assertIsInstance(result, ProcessingResult)
        self.assertEqual(list(result.outputs()), ["solid_stencil"])
        self.assertEqual(result.solid_stencil, apply_solid_stencil(self.raster, settings))

    def test_black_white_mode_fills_two_outputs(self):
        settings = StencilSettings(mode="black-white", threshold=60)

        result = process_raster(self.raster, settings)

        self.assertEqual(list(result.outputs()), ["black_white", "line_sketch"])
        self.assertIsNone(result.solid_stencil)
        self.assertEqual(result.black_white, apply_black_white(self.raster, settings))
        self.assertEqual(result.line_sketch, apply_line_sketch(self.raster, settings))

    def test_line_sketch_mode(self):
        settings = StencilSettings(mode="line-sketch")

        result = process_raster(self.raster, settings)

        self.assertEqual(list(result.outputs()), ["line_sketch"])

    def test_outputs_keep_dimensions(self):
        for mode in StencilMode:
            result = process_raster(self.raster, StencilSettings(mode=mode))
            for raster in result.outputs().values():
                self.assertEqual(raster.size, self.raster.size)

    def test_fresh_result_per_call(self):
        settings = StencilSettings()

        first = process_raster(self.raster, settings)
        second = process_raster(self.raster, settings)

        self.assertIsNot(first, second)


class TestEngineProperties(unittest.TestCase):
    """Test determinism and channel preservation."""

    def test_deterministic(self):
        """Test identical inputs give byte-identical outputs."""
        raster = noise_raster(seed=3)
        for mode in StencilMode:
            settings = StencilSettings(mode=mode, threshold=90, contrast=2.1,
                                       line_thickness=3, invert=True)
            first = process_raster(raster, settings)
            second = process_raster(raster, settings)
            self.assertEqual(first, second)

    def test_alpha_preserved_in_every_mode(self):
        raster = noise_raster(seed=11)
        alpha = raster.to_array()[..., 3]

        for mode in StencilMode:
            for invert in (False, True):
                settings = StencilSettings(mode=mode, invert=invert, line_thickness=4)
                result = process_raster(raster, settings)
                for name, output in result.outputs().items():
                    with self.subTest(mode=mode, invert=invert, output=name):
                        self.assertTrue(np.array_equal(output.to_array()[..., 3], alpha))

    def test_degenerate_parameters_stay_in_range(self):
        """Test wildly out-of-range settings still produce valid rasters."""
        raster = noise_raster(seed=5)
        settings = StencilSettings(mode="black-white", threshold=-40, contrast=-8.0,
                                   line_thickness=40)

        result = process_raster(raster, settings)

        for output in result.outputs().values():
            self.assertEqual(len(output.data), raster.width * raster.height * 4)

    def test_input_raster_unchanged(self):
        raster = noise_raster(seed=9)
        before = raster.data

        process_raster(raster, StencilSettings(mode="black-white", line_thickness=5))

        self.assertEqual(raster.data, before)


class TestEngineErrors(unittest.TestCase):
    """Test engine error handling."""

    def test_non_raster_input(self):
        with self.assertRaises(TypeError):
            process_raster(b"\x00" * 16, StencilSettings())

    def test_unsupported_mode(self):
        """Test settings carrying an unknown mode are rejected."""
        settings = SimpleNamespace(mode="oil-paint", threshold=128, contrast=1.5,
                                   line_thickness=2, invert=False)

        with self.assertRaises(UnsupportedMode):
            process_raster(noise_raster(), settings)

    def test_invalid_dimensions_fail_fast(self):
        with self.assertRaises(InvalidDimensions):
            process_raster(Raster(4, 4, bytes(10)), StencilSettings())
