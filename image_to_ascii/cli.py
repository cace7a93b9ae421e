#!/usr/bin/env python3
"""
Image to ASCII Converter - Command Line Interface
=================================================
Parses arguments into a ConversionConfig and runs one conversion.
"""

import argparse
import logging
import sys
from typing import List, Optional

from image_to_ascii.config import ConversionConfig, parse_block_size, parse_font_ratio
from image_to_ascii.constants import LuminanceModel, DEFAULT_PADDING
from image_to_ascii.exceptions import ConversionError
from image_to_ascii.image_buffer import load_image
from image_to_ascii.output import open_sink
from image_to_ascii.renderer import GridRenderer


logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _block_size(text: str):
    try:
        return parse_block_size(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {text}")
    return value


def create_argument_parser():
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='image-to-ascii',
        description='Convert an image to ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # One character per pixel
  %(prog)s image.png -w 80                    # 80 columns, rows from aspect ratio
  %(prog)s image.png -w 80 -r 1:2             # Font twice as tall as wide
  %(prog)s image.png -b 1x2 -o out.txt        # 1x2 pixel blocks, write to file
  %(prog)s image.png -p -i -n 0               # Perceived luminance, inverted
        """
    )

    # Input/Output
    parser.add_argument('input', nargs='?', help='Input image file')
    parser.add_argument('-o', '--output', help='Output text file (default: stdout)')

    # Size options
    parser.add_argument('-w', '--columns', type=_positive_int,
                        help='Output width in characters')
    parser.add_argument('-H', '--rows', type=_positive_int,
                        help='Output height in characters')
    parser.add_argument('-r', '--font-ratio', default=None,
                        help='Character width/height, e.g. 0.5 or 1:2 (default: 0.5)')
    parser.add_argument('-b', '--block', type=_block_size, default=None,
                        help='Sample fixed pixel blocks, e.g. 1x2')

    # Mapping options
    parser.add_argument('-i', '--invert', action='store_true', help='Invert brightness')
    parser.add_argument('-n', '--padding', type=_non_negative_int, default=DEFAULT_PADDING,
                        help="Number of ' ' at the end of the density string (default: %(default)s)")
    parser.add_argument('-p', '--perceived', action='store_true',
                        help='Use perceived luminance')
    parser.add_argument('-a', '--fast', action='store_true',
                        help='Use fast perceived luminance (overrides -p)')

    # Other options
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def build_config(args: argparse.Namespace) -> ConversionConfig:
    """Turn parsed arguments into a ConversionConfig."""
    return ConversionConfig(
        invert=args.invert,
        luminance_model=LuminanceModel.from_flags(perceived=args.perceived, fast=args.fast),
        padding=args.padding,
        columns=args.columns,
        rows=args.rows,
        font_ratio=parse_font_ratio(args.font_ratio),
        block_size=args.block,
        input_path=args.input,
        output_path=args.output,
    )


def run(config: ConversionConfig) -> None:
    """Decode, render and write one image. Raises ConversionError on failure."""
    image = load_image(config.input_path)
    logger.info("Loaded image: %s (%dx%d)", config.input_path, image.width, image.height)

    renderer = GridRenderer(config)
    with open_sink(config.output_path) as sink:
        lines = renderer.render(image, sink)
    logger.debug("Wrote %d lines", lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Check for input
    if not args.input:
        parser.print_help()
        return EXIT_FAILURE

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    logger.debug("Configuration: %s", config)

    try:
        run(config)
    except ConversionError as e:
        logger.critical("%s", e)
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == '__main__':
    sys.exit(main())
