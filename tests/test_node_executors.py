"""
Tests for the stencil node executors.

Tests cover:
- Registration rules and lookup errors
- Input count enforcement
- The built-in import, stencil and output nodes
- Running the import -> stencil -> output chain
"""

import tempfile
import unittest
from pathlib import Path

from PIL import Image

from TS_Libs.NodesLib.output_node import create_output_node
from TS_Libs.NodesLib.stencil_node import create_stencil_node
from TS_Libs.PipelineLib.node_executors import (
    NodeExecutorRegistry,
    get_default_registry,
    register_default_executors,
    run_stencil_chain,
)


class TestNodeExecutorRegistry(unittest.TestCase):
    """Test registration and execution."""

    def setUp(self):
        self.registry = NodeExecutorRegistry()

    def test_register_and_execute(self):
        """Registered executors receive the node dict and inputs."""
        self.registry.register("Echo", lambda node, inputs: (node["id"], inputs[0]))

        self.assertEqual(self.registry.execute("Echo", {"id": "n1"}, ["raster"]),
                         ("n1", "raster"))

    def test_node_type_whitespace_ignored(self):
        self.registry.register("  Source  ", lambda node, inputs: 1, input_count=0)

        self.assertEqual(self.registry.node_types(), ["Source"])
        self.assertEqual(self.registry.get_spec(" Source").input_count, 0)

    def test_invalid_registrations(self):
        """Empty names, non-callables and negative arity are rejected."""
        with self.assertRaises(ValueError):
            self.registry.register("   ", lambda node, inputs: None)
        with self.assertRaises(ValueError):
            self.registry.register("Broken", "not callable")
        with self.assertRaises(ValueError):
            self.registry.register("Odd", lambda node, inputs: None, input_count=-1)

    def test_duplicate_registration(self):
        self.registry.register("Twice", lambda node, inputs: 1)

        with self.assertRaises(RuntimeError):
            self.registry.register("Twice", lambda node, inputs: 2)

    def test_unknown_type_lists_available(self):
        self.registry.register("Known", lambda node, inputs: 1)

        with self.assertRaises(KeyError) as ctx:
            self.registry.execute("Unknown", {}, [])

        self.assertIn("Known", str(ctx.exception))

    def test_input_count_enforced(self):
        """A node given the wrong number of upstream results never runs."""
        calls = []
        self.registry.register("Sink", lambda node, inputs: calls.append(inputs))

        with self.assertRaises(ValueError):
            self.registry.execute("Sink", {}, [])
        with self.assertRaises(ValueError):
            self.registry.execute("Sink", {}, [1, 2])

        self.assertEqual(calls, [])


class TestDefaultRegistry(unittest.TestCase):
    """Test the built-in nodes."""

    def test_singleton(self):
        self.assertIs(get_default_registry(), get_default_registry())

    def test_built_in_nodes(self):
        registry = NodeExecutorRegistry()
        register_default_executors(registry)

        self.assertEqual(registry.node_types(), ["Image Import", "Stencil", "Stencil Output"])
        self.assertEqual(registry.get_spec("Image Import").input_count, 0)
        self.assertEqual(registry.get_spec("Stencil").input_count, 1)
        self.assertEqual(registry.get_spec("Stencil Output").input_count, 1)


class TestRunStencilChain(unittest.TestCase):
    """Test running import -> stencil -> output."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)
        self.input_path = self.temp_path / "tiger.png"
        image = Image.new("RGB", (12, 12), (255, 255, 255))
        for x in range(4, 8):
            for y in range(4, 8):
                image.putpixel((x, y), (0, 0, 0))
        image.save(self.input_path)

    def tearDown(self):
        self.temp_dir.cleanup()

    def import_node(self, path):
        return {"id": "import", "type": "Image Import", "file_path": str(path)}

    def test_black_white_chain(self):
        out_dir = self.temp_path / "out"

        saved = run_stencil_chain(
            self.import_node(self.input_path),
            create_stencil_node("stencil", "black-white"),
            create_output_node("output", "tiger.png", output_dir=str(out_dir)),
        )

        self.assertEqual([p.name for p in saved],
                         ["tiger_black_white.png", "tiger_line_sketch.png"])
        with Image.open(saved[1]) as sketch:
            self.assertEqual(sketch.size, (12, 12))

    def test_failure_names_node(self):
        with self.assertRaises(Exception) as ctx:
            run_stencil_chain(
                self.import_node(self.temp_path / "missing.png"),
                create_stencil_node("stencil"),
                create_output_node("output", "missing.png", output_dir=str(self.temp_path)),
            )

        self.assertIn("Error executing node import", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_nodes_out_of_order(self):
        """An output node cannot stand in for the import node."""
        with self.assertRaises(Exception) as ctx:
            run_stencil_chain(
                create_output_node("output", "tiger.png", output_dir=str(self.temp_path)),
                create_stencil_node("stencil"),
                self.import_node(self.input_path),
            )

        self.assertIsInstance(ctx.exception.__cause__, ValueError)
        self.assertEqual(list(self.temp_path.iterdir()), [self.input_path])


if __name__ == "__main__":
    unittest.main()
