"""
Output Node for Tattoo Stencil.

Encodes engine rasters as PNG and saves them next to each other using the
source image's name plus a per-output suffix:

- solid_stencil -> <name>_solid_stencil.png
- black_white   -> <name>_black_white.png
- line_sketch   -> <name>_line_sketch.png

Classes:
    OutputNodeConfig: Configuration for output node
    OutputNodeHandler: Handles file naming and writing

Functions:
    raster_to_image: Wrap a Raster as a PIL Image
    encode_png: Encode a Raster as PNG bytes
    build_output_filename: Suffixed output file name for a source image
    execute_output_node: Pipeline executor for output nodes
    create_output_node: Helper to create output node dictionary
"""

import logging
from dataclasses import asdict, dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List

from PIL import Image

from TS_Libs.constants import (
    DEFAULT_OUTPUT_EXTENSION,
    DEFAULT_OUTPUT_FORMAT,
    NODE_TYPE_OUTPUT,
    OUTPUT_SUFFIXES,
)
from TS_Libs.StencilEngineLib.raster_models import ProcessingResult, Raster

logger = logging.getLogger(__name__)


def raster_to_image(raster: Raster) -> Any:
    """Wrap a Raster's bytes as an RGBA PIL Image."""
    return Image.frombytes("RGBA", raster.size, raster.data)


def encode_png(raster: Raster) -> bytes:
    """
    Encode a Raster as a PNG file in memory.

    Returns:
        PNG bytes
    """
    buffer = BytesIO()
    raster_to_image(raster).save(buffer, format=DEFAULT_OUTPUT_FORMAT)
    return buffer.getvalue()


def build_output_filename(source_name: str, output_name: str) -> str:
    """
    Build the download file name for one output.

    The source name is cut at its first '.', so "rose.final.jpg" becomes
    "rose_line_sketch.png".

    Args:
        source_name: Original file name or path
        output_name: 'solid_stencil', 'black_white' or 'line_sketch'

    Returns:
        File name (no directory)

    Raises:
        KeyError: If output_name is not a known output
    """
    if output_name not in OUTPUT_SUFFIXES:
        valid = ", ".join(sorted(OUTPUT_SUFFIXES))
        raise KeyError(f"Unknown output '{output_name}'. Valid outputs: {valid}")

    stem = Path(source_name).name.split(".")[0] or "stencil"
    return f"{stem}{OUTPUT_SUFFIXES[output_name]}{DEFAULT_OUTPUT_EXTENSION}"


@dataclass
class OutputNodeConfig:
    """Configuration for output node execution.

    Attributes:
        output_dir: Directory the PNG files are written to
        overwrite: Overwrite existing files (default: False)
        create_directories: Create output_dir if it doesn't exist (default: True)
    """
    output_dir: str = "."
    overwrite: bool = False
    create_directories: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__}
        return cls(**filtered)


class OutputNodeHandler:
    """Resolves output paths and writes rasters to disk."""

    def __init__(self, config: OutputNodeConfig):
        """Initialize handler with configuration."""
        self.config = config
        self._output_dir = Path(config.output_dir)

    def resolve_path(self, source_name: str, output_name: str) -> Path:
        """
        Resolve the path a given output will be written to.

        Raises:
            ValueError: If the resulting file name would escape output_dir
        """
        filename = build_output_filename(source_name, output_name)
        if ".." in Path(filename).parts or Path(filename).name != filename:
            raise ValueError(f"Path traversal detected in output name: {filename}")
        return self._output_dir / filename

    def check_target(self, path: Path) -> None:
        """
        Make sure path can be written under the current configuration.

        Raises:
            FileExistsError: If file exists and overwrite=False
            FileNotFoundError: If output_dir is missing and create_directories=False
        """
        if path.exists() and not self.config.overwrite:
            raise FileExistsError(
                f"Output file already exists: {path}. Set overwrite=True to replace it."
            )

        if not path.parent.exists() and not self.config.create_directories:
            raise FileNotFoundError(f"Output directory does not exist: {path.parent}")

    def save_raster(self, raster: Raster, path: Path) -> Path:
        """
        Save one raster as PNG.

        Raises:
            FileExistsError: If file exists and overwrite=False
            FileNotFoundError: If output_dir is missing and create_directories=False
            OSError: If file cannot be written
        """
        self.check_target(path)
        return self._write(raster, path)

    def _write(self, raster: Raster, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encode_png(raster))
        logger.info(f"Saved {path}")
        return path

    def save_result(self, result: ProcessingResult, source_name: str) -> List[Path]:
        """
        Save every populated output of a ProcessingResult.

        Args:
            result: Engine result
            source_name: Original image file name, used for naming

        Returns:
            Written paths, in output order

        Raises:
            FileExistsError: If any target exists and overwrite=False;
                nothing is written in that case
            FileNotFoundError: If output_dir is missing and create_directories=False
        """
        targets = [
            (self.resolve_path(source_name, output_name), raster)
            for output_name, raster in result.outputs().items()
        ]
        for path, _ in targets:
            self.check_target(path)

        return [self._write(raster, path) for path, raster in targets]


def execute_output_node(node: Dict[str, Any], inputs: List[Any]) -> List[Path]:
    """
    Pipeline executor for output nodes.

    Node dict should contain:
        - 'source_name': Original image file name (required)
        - 'output_dir', 'overwrite', 'create_directories' (optional)

    Inputs:
        - [0]: ProcessingResult to save

    Returns:
        List of written paths

    Raises:
        ValueError: If no input is given
        TypeError: If input is not a ProcessingResult
        KeyError: If 'source_name' is missing
    """
    if not inputs or len(inputs) < 1:
        raise ValueError("OutputNode requires a processing result input")

    result = inputs[0]
    if not isinstance(result, ProcessingResult):
        raise TypeError(f"Expected ProcessingResult, got {type(result)}")

    source_name = node.get("source_name")
    if not source_name:
        raise KeyError("Output node missing required 'source_name' field")

    handler = OutputNodeHandler(OutputNodeConfig.from_dict(node))
    return handler.save_result(result, str(source_name))


def create_output_node(
    node_id: str,
    source_name: str,
    output_dir: str = ".",
    overwrite: bool = False,
) -> Dict[str, Any]:
    """
    Create output node for graph.

    Args:
        node_id: Unique node identifier
        source_name: Original image file name, used for naming outputs
        output_dir: Directory to write into
        overwrite: Replace existing files

    Returns:
        Node dict for graph
    """
    return {
        "id": node_id,
        "type": NODE_TYPE_OUTPUT,
        "source_name": source_name,
        "output_dir": output_dir,
        "overwrite": overwrite,
    }
