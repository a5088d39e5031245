"""Read-only view of a parsed font.

The inventory and coverage code only ever look at ``Font.glyphs`` and
``Font.names``. ``parse_font`` produces such a view from raw bytes using
fontTools; tests and other callers can construct ``Font`` directly from
``Glyph`` objects.
"""
from __future__ import annotations

import logging
import os
from collections import namedtuple
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property
from io import BytesIO
from typing import Optional, Union

from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.ttLib import TTFont

from fontinventory.errors import FontParseError

log = logging.getLogger(__name__)

FAMILY_NAME_ID = 1
SUBFAMILY_NAME_ID = 2
FULL_NAME_ID = 4
POSTSCRIPT_NAME_ID = 6

# (platformID, platEncID, langID) tried in order
ENGLISH_NAME_RECORDS = ((3, 1, 0x409), (1, 0, 0))

OUTLINE_TABLES = ("glyf", "CFF ", "CFF2")

UNKNOWN_NAME = "Unknown"


def synthetic_glyph_name(index):
    return f"glyph_{index}"


class Glyph:
    """A single glyph: its position, label, encoding and whether it has
    path data."""

    def __init__(
        self,
        index: int,
        name: Optional[str] = None,
        unicode: Optional[int] = None,
        unicodes=None,
        has_outline: bool = False,
    ):
        self.index = index
        self._name = name
        if unicodes is None:
            unicodes = [] if unicode is None else [unicode]
        self.unicodes = list(unicodes)
        self.unicode = unicode
        self._has_outline = has_outline

    @property
    def name(self) -> str:
        return self._name or synthetic_glyph_name(self.index)

    @property
    def has_outline(self) -> bool:
        return self._has_outline

    def __repr__(self):
        unicode = "None" if self.unicode is None else f"U+{self.unicode:04X}"
        return f"<Glyph {self.index} {self.name!r} {unicode}>"


class TTGlyph(Glyph):
    """Glyph backed by a fontTools glyph set. The outline check draws the
    glyph, so it is only done when asked for."""

    def __init__(self, index, name, unicodes, glyphset=None):
        unicodes = sorted(unicodes)
        super().__init__(
            index, name, unicodes[0] if unicodes else None, unicodes=unicodes
        )
        self._glyphset = glyphset

    @cached_property
    def has_outline(self) -> bool:
        if self._glyphset is None or self._name not in self._glyphset:
            return False
        pen = ControlBoundsPen(self._glyphset)
        try:
            self._glyphset[self._name].draw(pen)
        except Exception as e:
            log.warning("Cannot draw glyph %r, treating it as empty: %s", self._name, e)
            return False
        return pen.bounds is not None


class GlyphList(Sequence):
    """Glyphs in glyph order. ``glyphs.get(i)`` and ``glyphs[i]`` are
    equivalent."""

    def __init__(self, glyphs=()):
        self._glyphs = list(glyphs)

    def __len__(self):
        return len(self._glyphs)

    def __getitem__(self, index):
        return self._glyphs[index]

    def get(self, index: int) -> Glyph:
        return self[index]


class TTGlyphList(GlyphList):
    def __init__(self, ttfont: TTFont):
        self._glyph_order = ttfont.getGlyphOrder()
        cmap = ttfont.getBestCmap() or {}
        self._unicodes = {}
        for codepoint, glyph_name in cmap.items():
            self._unicodes.setdefault(glyph_name, []).append(codepoint)
        if any(tag in ttfont for tag in OUTLINE_TABLES):
            self._glyphset = ttfont.getGlyphSet()
        else:
            log.debug("Font has no outline tables, no glyph will have a path")
            self._glyphset = None
        self._cache = {}

    def __len__(self):
        return len(self._glyph_order)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(f"glyph index {index} out of range")
        if index not in self._cache:
            name = self._glyph_order[index]
            self._cache[index] = TTGlyph(
                index, name, self._unicodes.get(name, []), self._glyphset
            )
        return self._cache[index]


@dataclass(frozen=True)
class NameTable:
    family_name: Optional[str] = None
    subfamily_name: Optional[str] = None
    full_name: Optional[str] = None
    postscript_name: Optional[str] = None

    @classmethod
    def from_ttfont(cls, ttfont: TTFont) -> "NameTable":
        if "name" not in ttfont:
            return cls()
        return cls(
            family_name=_english_name(ttfont["name"], FAMILY_NAME_ID),
            subfamily_name=_english_name(ttfont["name"], SUBFAMILY_NAME_ID),
            full_name=_english_name(ttfont["name"], FULL_NAME_ID),
            postscript_name=_english_name(ttfont["name"], POSTSCRIPT_NAME_ID),
        )


def _english_name(name_table, name_id):
    for platform_id, enc_id, lang_id in ENGLISH_NAME_RECORDS:
        record = name_table.getName(name_id, platform_id, enc_id, lang_id)
        if record is not None:
            return record.toUnicode()
    return None


FontNames = namedtuple(
    "FontNames", "family_name subfamily_name full_name postscript_name"
)


def resolve_names(names: NameTable) -> FontNames:
    """Fill in missing name table entries.

    family and subfamily default to "Unknown", the full name to
    "{family} {subfamily}" and the PostScript name to the full name with
    its whitespace removed."""
    family = names.family_name or UNKNOWN_NAME
    subfamily = names.subfamily_name or UNKNOWN_NAME
    full = names.full_name or f"{family} {subfamily}"
    postscript = names.postscript_name or "".join(full.split())
    return FontNames(family, subfamily, full, postscript)


class Font:
    def __init__(self, glyphs, names: Optional[NameTable] = None, ttfont=None):
        if not isinstance(glyphs, GlyphList):
            glyphs = GlyphList(glyphs)
        self.glyphs = glyphs
        self.names = names or NameTable()
        self.ttfont = ttfont

    @classmethod
    def from_ttfont(cls, ttfont: TTFont) -> "Font":
        return cls(TTGlyphList(ttfont), NameTable.from_ttfont(ttfont), ttfont)

    def __repr__(self):
        return f"<Font {self.names.full_name or self.names.family_name!r} ({len(self.glyphs)} glyphs)>"


class FontParser:
    """Turns raw font bytes into a Font."""

    def parse(self, data: bytes) -> Font:
        raise NotImplementedError


class FontToolsParser(FontParser):
    def parse(self, data: bytes) -> Font:
        try:
            ttfont = TTFont(BytesIO(data))
            font = Font.from_ttfont(ttfont)
        except Exception as e:
            raise FontParseError(f"Not a readable font: {e}") from e
        log.debug("Parsed %r", font)
        return font


def parse_font(data: bytes, parser: Optional[FontParser] = None) -> Font:
    parser = parser or FontToolsParser()
    return parser.parse(data)


def read_font_bytes(source: Union[str, os.PathLike, bytes, bytearray]) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    with open(source, "rb") as doc:
        return doc.read()


def open_font(
    source: Union[str, os.PathLike, bytes, bytearray],
    parser: Optional[FontParser] = None,
) -> Font:
    """Parse a font given as a path or as raw bytes."""
    return parse_font(read_font_bytes(source), parser)
