"""
Image Import Node for Tattoo Stencil.

Decodes image files (or in-memory image bytes) with Pillow and hands the
pixels to the engine as an RGBA Raster.

Functions:
    get_supported_image_formats: Get list of supported image formats
    is_supported_format: Check a path's extension
    raster_from_image: Wrap a PIL Image as a Raster
    load_raster: Decode an image file into a Raster
    decode_raster: Decode image bytes into a Raster
    execute_import_image_node: Pipeline executor for image import nodes
"""

from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Union

from PIL import Image, UnidentifiedImageError

from TS_Libs.constants import SUPPORTED_STANDARD_IMAGES
from TS_Libs.StencilEngineLib.raster_models import Raster


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(list(SUPPORTED_STANDARD_IMAGES))


def is_supported_format(file_path: Union[str, Path]) -> bool:
    """
    Check if a file path has a supported format.

    Args:
        file_path: Path to the file

    Returns:
        True if file extension is supported
    """
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def raster_from_image(image: Any) -> Raster:
    """
    Convert a PIL Image to an RGBA Raster.

    Args:
        image: PIL Image in any mode

    Returns:
        Raster holding the image's RGBA bytes

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "convert") or not hasattr(image, "tobytes"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    # Always convert to RGBA for consistent processing
    if image.mode != "RGBA":
        image = image.convert("RGBA")

    width, height = image.size
    return Raster(width, height, image.tobytes())


def load_raster(file_path: Union[str, Path]) -> Raster:
    """
    Load an image file from disk as a Raster.

    Args:
        file_path: Path to image file (PNG, JPG, etc.)

    Returns:
        Decoded RGBA Raster

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or the extension is unsupported
        IOError: If the image cannot be decoded
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Image file not found: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")

    if not is_supported_format(file_path):
        supported = ", ".join(get_supported_image_formats())
        raise ValueError(
            f"Unsupported image format '{file_path.suffix}'. Supported: {supported}"
        )

    try:
        with Image.open(file_path) as img:
            img.load()
            return raster_from_image(img)
    except (UnidentifiedImageError, OSError) as e:
        raise IOError(f"Failed to load image from {file_path}: {str(e)}") from e


def decode_raster(data: bytes) -> Raster:
    """
    Decode encoded image bytes (PNG, JPEG, ...) into a Raster.

    Raises:
        IOError: If the bytes are not a decodable image
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return raster_from_image(img)
    except (UnidentifiedImageError, OSError) as e:
        raise IOError(f"Failed to decode image data: {str(e)}") from e


def execute_import_image_node(node: Dict[str, Any], inputs: List[Any]) -> Raster:
    """
    Pipeline executor for image import nodes.

    Args:
        node: Node dictionary containing:
            - 'file_path': Path to image file (required)
        inputs: Should be empty list (import nodes have no inputs)

    Returns:
        Decoded RGBA Raster

    Raises:
        KeyError: If required fields are missing
        FileNotFoundError: If image file not found
        IOError: If image cannot be loaded
    """
    file_path = node.get("file_path")
    if not file_path:
        raise KeyError("Image import node missing required 'file_path' field")

    return load_raster(Path(file_path))
