#!/usr/bin/env python3
"""Check that a font has a glyph for every character of one or more texts.

Exits with status 1 if any character is missing.

Usage:

$ fontinventory check-text MyFont.ttf "Hello world" "Ünïcödé"
"""
import sys
from pathlib import Path

from tabulate import tabulate

from fontinventory.argparse import FIArgumentParser
from fontinventory.coverage import check_multiple_texts
from fontinventory.font import open_font, resolve_names
from fontinventory.logging import setup_logging
from fontinventory.subset import FLAVORS, font_face_css
from fontinventory.unicode import describe


def report_rows(result):
    rows = []
    for char in result.chars:
        rows.append(
            (
                "✓" if char.exists else "✗",
                char.char,
                describe(char.unicode),
                char.glyph_name if char.exists else "missing",
            )
        )
    return rows


def main(args=None):
    parser = FIArgumentParser(
        description="Check whether a font can display the given texts"
    )
    parser.add_argument("font", type=Path, help="Path to a font file")
    parser.add_argument("texts", nargs="+", metavar="TEXT")
    parser.add_argument(
        "--css-family",
        help="font-family used in the suggested @font-face rule. "
        "Defaults to the font's full name",
    )
    parser.add_argument(
        "--selector",
        default=".target-text",
        help="CSS selector for the suggested rule",
    )
    args = parser.parse_args(args)
    setup_logging("fontinventory.check_text", args, __name__)

    if not args.font.is_file():
        raise FileNotFoundError(f"Font file not found: {args.font}")
    font = open_font(args.font)
    results = check_multiple_texts(font, args.texts)

    for result in results:
        print(f'Text: "{result.text}"')
        print(tabulate(report_rows(result), tablefmt="plain"))
        if result.all_exists:
            print("All characters are present in the font")
        else:
            print("Missing characters:")
            for char in result.missing_chars:
                print(f"  - {char} ({describe(ord(char))})")
        print()

    if all(r.all_exists for r in results):
        flavor = args.font.suffix.lower().lstrip(".")
        if flavor not in FLAVORS:
            flavor = "ttf"
        family = args.css_family or resolve_names(font.names).full_name
        print("Suggested CSS:\n")
        print(
            font_face_css(family, args.font.stem, [flavor], selector=args.selector)
        )
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
