# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Command-line interface.

    lumitheme wallpaper.png --light -o theme.json

Prints a swatch preview of the generated theme and optionally writes the
theme document to a file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from lumitheme import __version__
from lumitheme.engine import QuantizerKind, generate_theme
from lumitheme.engine.generate import DARK_LUMINOSITY, LIGHT_LUMINOSITY
from lumitheme.runtime import SerializerFormat, print_preview, to_document

logger = logging.getLogger("lumitheme")


def _luminosity_percent(value: str) -> float:
    try:
        percent = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid luminosity {value!r}; expected 0-100") from None
    return min(100, max(0, percent)) / 100.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lumitheme",
        description="generates a color theme from an image",
    )
    parser.add_argument(
        "image",
        type=Path,
        help="input image used to generate the theme",
    )
    parser.add_argument(
        "-q",
        "--quantizer",
        dest="quantizer",
        choices=[k.value for k in QuantizerKind],
        default=QuantizerKind.MEDIAN_CUT.value,
        help="quantization algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "--size",
        dest="size",
        type=int,
        default=32,
        help="size of the intermediate palette (default: %(default)s)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--dark",
        dest="luminosity",
        action="store_const",
        const=DARK_LUMINOSITY,
        help="generate a dark theme (default)",
    )
    mode.add_argument(
        "--light",
        dest="luminosity",
        action="store_const",
        const=LIGHT_LUMINOSITY,
        help="generate a light theme",
    )
    mode.add_argument(
        "--luminosity",
        dest="luminosity",
        type=_luminosity_percent,
        help="overall theme luminosity between 0 and 100",
    )
    parser.set_defaults(luminosity=DARK_LUMINOSITY)

    parser.add_argument(
        "--seed",
        dest="seed",
        type=int,
        default=None,
        help="quantizer seed (no effect with median-cut)",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        type=Path,
        default=None,
        help="write the theme document to this file",
    )
    parser.add_argument(
        "--format",
        dest="format",
        choices=[f.value for f in SerializerFormat],
        default=SerializerFormat.JSON_PRETTY.value,
        help="format of the theme document (default: %(default)s)",
    )
    parser.add_argument(
        "-s",
        "--silent",
        dest="silent",
        action="store_true",
        default=False,
        help="do not print the preview",
    )
    parser.add_argument(
        "--details",
        dest="details",
        action="store_true",
        default=False,
        help="print a table of every role below the preview",
    )
    parser.add_argument(
        "-d",
        "--debug",
        dest="debug",
        action="store_true",
        default=False,
        help="log debug information",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(debug: bool) -> None:
    logger.setLevel(logging.DEBUG if debug else logging.ERROR)
    # One handler per run, bound to the current stderr
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    log_handler = logging.StreamHandler()
    log_formatter = logging.Formatter(
        "%(asctime)s\t%(levelname)s\t%(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    log_handler.setFormatter(log_formatter)
    logger.addHandler(log_handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.debug)

    if not args.image.exists():
        logger.error("input image %s does not exist", args.image)
        return 1

    try:
        result = generate_theme(
            args.image,
            palette_size=args.size,
            luminosity=args.luminosity,
            quantizer=args.quantizer,
            seed=args.seed,
        )
    except (ValueError, OSError) as e:
        logger.error("failed to generate a theme from %s: %s", args.image, e)
        return 1

    if not args.silent:
        print_preview(result.theme, detailed=args.details)

    if args.output is not None:
        document = to_document(result.theme, format=SerializerFormat(args.format))
        try:
            args.output.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            logger.error("failed to write %s: %s", args.output, e)
            return 1
        logger.info("wrote %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
