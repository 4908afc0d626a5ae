"""
Stencil Node for the Tattoo Stencil pipeline.

Wraps the stencil engine for use with the node executor registry.

Example:
    >>> from TS_Libs.NodesLib.stencil_node import create_stencil_node
    >>> from TS_Libs.PipelineLib.node_executors import get_default_registry
    >>>
    >>> node = create_stencil_node("stencil-1", "line-sketch", threshold=60)
    >>> registry = get_default_registry()
    >>> result = registry.execute("Stencil", node, [raster])
    >>> result.line_sketch.size
    (640, 480)
"""

from typing import Any, Dict, List

from TS_Libs.NodesLib.image_import_node import raster_from_image
from TS_Libs.StencilEngineLib.raster_models import (
    ProcessingResult,
    Raster,
    StencilSettings,
)
from TS_Libs.StencilEngineLib.stencil_engine import process_raster
from TS_Libs.constants import NODE_TYPE_STENCIL


def settings_from_node(node: Dict[str, Any]) -> StencilSettings:
    """
    Read stencil settings from a node dict.

    Missing fields fall back to the StencilSettings defaults.

    Raises:
        UnsupportedMode: If the node names an unknown mode
    """
    return StencilSettings.from_dict(node)


def execute_stencil_node(node: Dict[str, Any], inputs: List[Any]) -> ProcessingResult:
    """
    Execute stencil node in pipeline.

    Node dict may contain:
        - 'mode': 'solid-stencil', 'black-white' or 'line-sketch'
        - 'threshold', 'contrast', 'line_thickness', 'invert'

    Inputs:
        - [0]: Raster or PIL Image to process

    Returns:
        ProcessingResult from the engine

    Raises:
        ValueError: If no input or invalid settings
        TypeError: If input is neither a Raster nor a PIL Image
    """
    if not inputs or len(inputs) < 1:
        raise ValueError("StencilNode requires image input")

    source = inputs[0]
    try:
        raster = source if isinstance(source, Raster) else raster_from_image(source)
        settings = settings_from_node(node)
        return process_raster(raster, settings)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Stencil node error: {str(e)}") from e


def create_stencil_node(
    node_id: str,
    mode: str = "solid-stencil",
    **settings_fields: Any,
) -> Dict[str, Any]:
    """
    Create stencil node for graph.

    Args:
        node_id: Unique node identifier
        mode: Processing mode ('solid-stencil', 'black-white', 'line-sketch')
        **settings_fields: Any of threshold (0-255), contrast (0.5-3.0),
                           line_thickness (1-5), invert (bool)

    Returns:
        Node dict for graph
    """
    node = {
        "id": node_id,
        "type": NODE_TYPE_STENCIL,
        "mode": mode,
    }
    node.update(settings_fields)
    return node
