"""Build the inventory of characters a font can display.

Usage:

    font = open_font("MyFont-Regular.ttf")
    inventory = build_inventory(font, printable_only=True)
    print(inventory.render("array"))
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from fontinventory.errors import GlyphConversionWarning, InvalidOptionError
from fontinventory.font import Font, open_font, resolve_names
from fontinventory.unicode import codepoint_to_char, is_control, is_printable

log = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json", "array")


@dataclass(frozen=True)
class ExtractOptions:
    printable_only: bool = True
    include_control_chars: bool = False
    filter: Optional[Callable[[str, int], bool]] = None
    output_format: str = "text"

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidOptionError(
                f"Invalid output format '{self.output_format}'. "
                f"Choose from {', '.join(OUTPUT_FORMATS)}"
            )


@dataclass(frozen=True)
class GlyphRecord:
    unicode: int
    char: str
    name: str
    has_outline: bool

    def to_json(self):
        return {
            "unicode": self.unicode,
            "char": self.char,
            "name": self.name,
            "hasOutline": self.has_outline,
        }


@dataclass(frozen=True)
class FontInventory:
    family_name: str
    subfamily_name: str
    full_name: str
    postscript_name: str
    glyphs: tuple = field(default_factory=tuple)
    output_format: str = "text"

    @property
    def glyph_count(self) -> int:
        return len(self.glyphs)

    @property
    def extracted_text(self) -> str:
        return "".join(g.char for g in self.glyphs)

    @property
    def chars(self) -> list:
        return [g.char for g in self.glyphs]

    def render(self, output_format: Optional[str] = None) -> str:
        return format_inventory(self, output_format or self.output_format)


def format_inventory(inventory: FontInventory, output_format: str = "text") -> str:
    """Serialise an inventory as plain text, a JSON list of glyph records
    or a JSON list of characters."""
    if output_format == "text":
        return inventory.extracted_text
    if output_format == "json":
        return json.dumps(
            [g.to_json() for g in inventory.glyphs], indent=2, ensure_ascii=False
        )
    if output_format == "array":
        return json.dumps(inventory.chars, indent=2, ensure_ascii=False)
    raise InvalidOptionError(
        f"Invalid output format '{output_format}'. "
        f"Choose from {', '.join(OUTPUT_FORMATS)}"
    )


def _excluded(char, unicode, options):
    if not options.include_control_chars and is_control(unicode):
        return True
    if options.printable_only and not is_printable(char, unicode):
        return True
    if options.filter is not None and not options.filter(char, unicode):
        return True
    return False


def build_inventory(
    font: Font, options: Optional[ExtractOptions] = None, **kwargs
) -> FontInventory:
    """Collect one record per distinct character the font encodes.

    Glyphs are visited in glyph order and the first glyph seen for a
    character wins. Glyphs without a code point, or whose code point
    cannot be converted, are skipped. Keyword arguments override fields of
    ``options``.
    """
    options = options or ExtractOptions()
    if kwargs:
        options = replace(options, **kwargs)

    records = {}
    skipped = 0
    for i in range(len(font.glyphs)):
        glyph = font.glyphs.get(i)
        if glyph.unicode is None:
            continue
        try:
            char = codepoint_to_char(glyph.unicode, glyph.name)
        except GlyphConversionWarning as e:
            log.warning("%s, skipping", e)
            skipped += 1
            continue
        if _excluded(char, glyph.unicode, options):
            skipped += 1
            continue
        if char in records:
            continue
        records[char] = GlyphRecord(
            unicode=glyph.unicode,
            char=char,
            name=glyph.name,
            has_outline=glyph.has_outline,
        )

    log.debug("Kept %d characters, skipped %d", len(records), skipped)
    names = resolve_names(font.names)
    return FontInventory(
        family_name=names.family_name,
        subfamily_name=names.subfamily_name,
        full_name=names.full_name,
        postscript_name=names.postscript_name,
        glyphs=tuple(sorted(records.values(), key=lambda g: g.unicode)),
        output_format=options.output_format,
    )


def extract_text_from_font(source, options: Optional[ExtractOptions] = None, **kwargs):
    """Read a font from a path or bytes and build its inventory."""
    return build_inventory(open_font(source), options, **kwargs)
