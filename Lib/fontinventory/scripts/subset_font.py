#!/usr/bin/env python3
"""Make webfonts which only contain the characters of a text.

Writes one file per flavor plus an @font-face stylesheet into the output
directory. The default flavors can be set with the FONTINVENTORY_FLAVORS
environment variable, e.g. FONTINVENTORY_FLAVORS=ttf,woff2.

Usage:

$ fontinventory subset-font MyFont-Bold.ttf "Welcome home" -o web --weight bold
"""
import sys
from pathlib import Path

from fontinventory.argparse import FIArgumentParser
from fontinventory.logging import setup_logging
from fontinventory.subset import (
    FontToolsSubsetter,
    parse_flavors,
    subset_font,
    write_subset,
)


def main(args=None):
    parser = FIArgumentParser(description="Subset a font to the characters of a text")
    parser.add_argument("font", type=Path, help="Path to the source font")
    parser.add_argument("text", help="Characters to keep")
    parser.add_argument(
        "-o", "--out", type=Path, required=True, help="Output directory"
    )
    parser.add_argument(
        "--flavors",
        type=parse_flavors,
        help="Comma separated list of ttf, otf, woff, woff2",
    )
    parser.add_argument("--family", help="font-family used in the stylesheet")
    parser.add_argument("--weight", default="normal")
    parser.add_argument("--style", default="normal")
    parser.add_argument(
        "--basename", help="Output file name without extension. Defaults to the font's"
    )
    parser.add_argument(
        "--no-hinting", action="store_true", help="Drop hinting instructions"
    )
    args = parser.parse_args(args)
    log = setup_logging("fontinventory.subset_font", args, __name__)

    if not args.font.is_file():
        raise FileNotFoundError(f"Font file not found: {args.font}")

    subsetter = FontToolsSubsetter(hinting=not args.no_hinting)
    result = subset_font(args.font, args.text, args.flavors, subsetter)
    paths = write_subset(
        result,
        args.out,
        args.basename or args.font.stem,
        family=args.family,
        weight=args.weight,
        style=args.style,
    )
    for path in paths:
        print(path)
    if result.missing:
        log.warning("%d characters could not be included", len(set(result.missing)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
