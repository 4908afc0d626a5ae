"""
Tattoo Stencil Nodes Library.

This module contains the node implementations used around the stencil
engine. Nodes are components that process data in a pipeline.

Modules:
    image_import_node: Decode image files into rasters
    stencil_node: Run the stencil engine on a raster
    output_node: Encode results as PNG with suffixed file names
"""

from TS_Libs.NodesLib.image_import_node import (
    get_supported_image_formats,
    is_supported_format,
    raster_from_image,
    load_raster,
    decode_raster,
    execute_import_image_node,
)
from TS_Libs.NodesLib.stencil_node import (
    settings_from_node,
    execute_stencil_node,
    create_stencil_node,
)
from TS_Libs.NodesLib.output_node import (
    OutputNodeConfig,
    OutputNodeHandler,
    raster_to_image,
    encode_png,
    build_output_filename,
    execute_output_node,
    create_output_node,
)

__all__ = [
    "get_supported_image_formats",
    "is_supported_format",
    "raster_from_image",
    "load_raster",
    "decode_raster",
    "execute_import_image_node",
    "settings_from_node",
    "execute_stencil_node",
    "create_stencil_node",
    "OutputNodeConfig",
    "OutputNodeHandler",
    "raster_to_image",
    "encode_png",
    "build_output_filename",
    "execute_output_node",
    "create_output_node",
]
