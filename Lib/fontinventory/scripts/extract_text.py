#!/usr/bin/env python3
"""List the characters a font can display.

Usage:

# Print every printable character as one string
$ fontinventory extract-text MyFont.ttf

# Save the glyph records as JSON and show the font's names
$ fontinventory extract-text MyFont.ttf --format json -o chars.json --info
"""
import sys
from pathlib import Path

from tabulate import tabulate

from fontinventory.argparse import FIArgumentParser
from fontinventory.inventory import OUTPUT_FORMATS, extract_text_from_font
from fontinventory.logging import setup_logging


def info_table(inventory):
    rows = [
        ("Family", inventory.family_name),
        ("Subfamily", inventory.subfamily_name),
        ("Full name", inventory.full_name),
        ("PostScript name", inventory.postscript_name),
        ("Characters", inventory.glyph_count),
    ]
    return tabulate(rows, tablefmt="plain")


def main(args=None):
    parser = FIArgumentParser(description="Extract the characters in a font")
    parser.add_argument("font", type=Path, help="Path to a TTF, OTF or WOFF font")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Write to this file instead of stdout"
    )
    parser.add_argument(
        "--printable-only",
        action="store_true",
        default=True,
        help="Only list printable characters (default)",
    )
    parser.add_argument(
        "--include-control",
        action="store_true",
        help="Include control characters. Turns off --printable-only",
    )
    parser.add_argument("--info", action="store_true", help="Show font names")
    args = parser.parse_args(args)
    log = setup_logging("fontinventory.extract_text", args, __name__)

    if not args.font.is_file():
        raise FileNotFoundError(f"Font file not found: {args.font}")
    log.info("Parsing %s", args.font)

    inventory = extract_text_from_font(
        args.font,
        printable_only=args.printable_only and not args.include_control,
        include_control_chars=args.include_control,
        output_format=args.format,
    )

    if args.info:
        print(info_table(inventory))
        print()

    output = inventory.render()
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Saved to {args.output}")
    else:
        print(output)
    print(f"Characters: {inventory.glyph_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
