"""
Tests for Stencil Node.

Tests cover:
- Node creation helper
- Settings read from node dicts
- Executor with Raster and PIL inputs
- Error handling
- Node registration
"""

import unittest

from PIL import Image

from TS_Libs.NodesLib.stencil_node import (
    create_stencil_node,
    execute_stencil_node,
    settings_from_node,
)
from TS_Libs.PipelineLib.node_executors import get_default_registry
from TS_Libs.StencilEngineLib.raster_models import (
    ProcessingResult,
    Raster,
    StencilMode,
)
from TS_Libs.StencilEngineLib.stencil_errors import UnsupportedMode


class TestCreateStencilNode(unittest.TestCase):
    """Test create_stencil_node."""

    def test_defaults(self):
        node = create_stencil_node("stencil-1")

        self.assertEqual(node["id"], "stencil-1")
        self.assertEqual(node["type"], "Stencil")
        self.assertEqual(node["mode"], "solid-stencil")

    def test_custom_fields(self):
        node = create_stencil_node("stencil-2", "line-sketch", threshold=40, invert=True)

        self.assertEqual(node["mode"], "line-sketch")
        self.assertEqual(node["threshold"], 40)
        self.assertTrue(node["invert"])


class TestSettingsFromNode(unittest.TestCase):
    """Test settings_from_node."""

    def test_reads_fields(self):
        node = create_stencil_node("s", "black-white", threshold=12, contrast=2.5,
                                   line_thickness=4)

        settings = settings_from_node(node)

        self.assertIs(settings.mode, StencilMode.BLACK_AND_WHITE)
        self.assertEqual(settings.threshold, 12)
        self.assertEqual(settings.contrast, 2.5)
        self.assertEqual(settings.line_thickness, 4)

    def test_unknown_mode(self):
        with self.assertRaises(UnsupportedMode):
            settings_from_node({"mode": "charcoal"})


class TestExecuteStencilNode(unittest.TestCase):
    """Test execute_stencil_node."""

    def setUp(self):
        self.raster = Raster.filled(6, 6, (120, 120, 120, 255))

    def test_raster_input(self):
        node = create_stencil_node("s", "black-white")

        result = execute_stencil_node(node, [self.raster])

        self.assertIsInstance(result, ProcessingResult)
        self.assertIsNotNone(result.black_white)
        self.assertIsNotNone(result.line_sketch)

    def test_pil_input(self):
        image = Image.new("RGB", (6, 6), (120, 120, 120))
        node = create_stencil_node("s", "solid-stencil")

        result = execute_stencil_node(node, [image])

        self.assertEqual(result.solid_stencil.size, (6, 6))

    def test_no_input(self):
        with self.assertRaises(ValueError):
            execute_stencil_node(create_stencil_node("s"), [])

    def test_bad_input_type(self):
        with self.assertRaises(TypeError):
            execute_stencil_node(create_stencil_node("s"), ["not_an_image"])

    def test_unknown_mode_keeps_error_type(self):
        with self.assertRaises(UnsupportedMode) as ctx:
            execute_stencil_node({"mode": "charcoal"}, [self.raster])

        self.assertIn("Stencil node error", str(ctx.exception))


class TestStencilNodeRegistration(unittest.TestCase):
    """Test registry integration."""

    def test_registered(self):
        registry = get_default_registry()

        self.assertIn("Stencil", registry.node_types())
        self.assertEqual(registry.get_spec("Stencil").input_count, 1)

    def test_execute_through_registry(self):
        registry = get_default_registry()
        node = create_stencil_node("s", "line-sketch")

        result = registry.execute("Stencil", node, [Raster.filled(4, 4, (0, 0, 0, 255))])

        self.assertEqual(list(result.outputs()), ["line_sketch"])


if __name__ == "__main__":
    unittest.main()
