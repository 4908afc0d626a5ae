"""
Command-line entry point for Tattoo Stencil.

Loads an image, runs the chosen processing mode and writes the outputs as
PNG files named after the input (photo.jpg -> photo_solid_stencil.png).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from TS_Libs.constants import (
    CONTRAST_MAX,
    CONTRAST_MIN,
    LINE_THICKNESS_MAX,
    LINE_THICKNESS_MIN,
    MODE_BLACK_WHITE,
    MODE_LINE_SKETCH,
    MODE_SOLID_STENCIL,
    NODE_TYPE_IMAGE_IMPORT,
)
from TS_Libs.NodesLib.output_node import create_output_node
from TS_Libs.NodesLib.stencil_node import create_stencil_node
from TS_Libs.PipelineLib.node_executors import run_stencil_chain
from TS_Libs.PipelineLib.settings_store import load_settings, save_settings
from TS_Libs.StencilEngineLib.raster_models import StencilSettings

logger = logging.getLogger("tattoo_stencil")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tattoo-stencil",
        description="Turn an image into tattoo stencil artwork",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tattoo-stencil rose.jpg                              # Solid stencil, default settings
  tattoo-stencil rose.jpg --mode line-sketch -t 60     # Line sketch, more edges
  tattoo-stencil rose.jpg --mode black-white -o out/   # B&W rendering + line sketch
  tattoo-stencil rose.jpg --settings my.json --invert  # Saved settings, inverted
        """,
    )

    parser.add_argument("input", help="Input image file")
    parser.add_argument(
        "-o", "--output-dir", default=".", help="Directory for the PNG outputs (default: .)"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[MODE_SOLID_STENCIL, MODE_BLACK_WHITE, MODE_LINE_SKETCH],
        help="Processing mode (default: from settings, else solid-stencil)",
    )
    parser.add_argument(
        "-t", "--threshold", type=int, help="Threshold / edge sensitivity (0-255)"
    )
    parser.add_argument(
        "-c", "--contrast", type=float,
        help=f"Contrast gain ({CONTRAST_MIN}-{CONTRAST_MAX})",
    )
    parser.add_argument(
        "-l", "--line-thickness", type=int,
        help=f"Line thickness in pixels ({LINE_THICKNESS_MIN}-{LINE_THICKNESS_MAX})",
    )
    parser.add_argument(
        "--invert",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Swap black and white (--no-invert overrides a settings file)",
    )
    parser.add_argument("--settings", help="Load settings from a JSON file")
    parser.add_argument("--save-settings", help="Write the effective settings to a JSON file")
    parser.add_argument(
        "--overwrite", action="store_true", help="Replace existing output files"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_settings(args: argparse.Namespace) -> StencilSettings:
    """Start from the settings file (or defaults) and apply command-line overrides."""
    settings = load_settings(args.settings) if args.settings else StencilSettings()

    overrides = {
        "mode": args.mode,
        "threshold": args.threshold,
        "contrast": args.contrast,
        "line_thickness": args.line_thickness,
        "invert": args.invert,
    }
    changes = {k: v for k, v in overrides.items() if v is not None}
    return settings.with_changes(**changes).clamped()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = resolve_settings(args)
        if args.save_settings:
            save_settings(args.save_settings, settings)

        input_path = Path(args.input)
        saved = run_stencil_chain(
            {"id": "import", "type": NODE_TYPE_IMAGE_IMPORT, "file_path": str(input_path)},
            create_stencil_node("stencil", **settings.to_dict()),
            create_output_node(
                "output",
                source_name=input_path.name,
                output_dir=args.output_dir,
                overwrite=args.overwrite,
            ),
        )
    except Exception as e:
        logger.error(str(e))
        return 1

    for path in saved:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
