"""
Command-line batch mode: one source image in, one gradient image out.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from gradient_generator.config import load_config
from gradient_generator.logging_utils import logger, setup_logging
from gradient_generator.models.errors import GradientError
from gradient_generator.services.gradient_service import GradientService
from gradient_generator.services.image_service import ImageService


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser for batch generation."""
    parser = argparse.ArgumentParser(
        prog="gradient-generator-batch",
        description="Generate a lightness-sorted gradient from the colors of an image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 5000x5000 gradient with batch defaults from config
  gradient-generator-batch photo.jpg gradient.png

  # Custom size
  gradient-generator-batch photo.jpg gradient.png --width 1920 --height 1080
        """,
    )
    parser.add_argument("input", help="Source image file")
    parser.add_argument("output", help="Output image file (format from extension)")
    parser.add_argument("--width", type=int, default=None, help="Result width in px (default: batch.width)")
    parser.add_argument("--height", type=int, default=None, help="Result height in px (default: batch.height)")
    parser.add_argument("--config", default=None, help="Path to YAML config")
    parser.add_argument("--log-level", default=None, help="Logging level (default: logging.level)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns process exit code."""
    args = create_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config.logging.level)
    except (OSError, ValueError) as exc:
        print(f"Error: cannot load config: {exc}", file=sys.stderr)
        return 1

    width = args.width if args.width is not None else config.batch.width
    height = args.height if args.height is not None else config.batch.height

    image_service = ImageService()
    try:
        source = image_service.load_image(args.input)
        grid = GradientService().generate_gradient(source, width, height)
        saved = image_service.save_grid(grid, args.output)
    except (GradientError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("Gradient %dx%d written to %s", width, height, saved)
    print(f"Saved: {saved}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
