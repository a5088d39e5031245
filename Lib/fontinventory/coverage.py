"""Check whether a font has glyphs for every character of a string."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from fontinventory.font import Font, open_font

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharCheckResult:
    char: str
    unicode: int
    exists: bool
    glyph_name: Optional[str] = None


@dataclass(frozen=True)
class TextCheckResult:
    text: str
    chars: List[CharCheckResult] = field(default_factory=list)
    missing_chars: List[str] = field(default_factory=list)

    @property
    def all_exists(self) -> bool:
        return not self.missing_chars


def check_char(font: Font, char: str) -> CharCheckResult:
    """Look up a single character by scanning the glyphs in order.

    Only the first character of ``char`` is checked."""
    if not char:
        raise ValueError("char must not be empty")
    unicode = ord(char[0])
    for i in range(len(font.glyphs)):
        glyph = font.glyphs.get(i)
        if glyph.unicode == unicode:
            return CharCheckResult(char, unicode, True, glyph.name)
    return CharCheckResult(char, unicode, False)


def glyph_lookup(font: Font):
    """Map code points to (glyph name, glyph index), lowest index first."""
    lookup = {}
    for i in range(len(font.glyphs)):
        glyph = font.glyphs.get(i)
        if glyph.unicode is None or glyph.unicode in lookup:
            continue
        lookup[glyph.unicode] = (glyph.name, i)
    return lookup


def check_text(font: Font, text: str) -> TextCheckResult:
    lookup = glyph_lookup(font)
    chars = []
    missing = []
    for char in text:
        unicode = ord(char)
        found = lookup.get(unicode)
        if found is None:
            chars.append(CharCheckResult(char, unicode, False))
            missing.append(char)
        else:
            chars.append(CharCheckResult(char, unicode, True, found[0]))
    if missing:
        log.debug("%d of %d characters missing", len(missing), len(chars))
    return TextCheckResult(text, chars, missing)


def check_multiple_texts(font: Font, texts) -> List[TextCheckResult]:
    # Each text gets its own lookup table
    return [check_text(font, text) for text in texts]


def check_char_in_font(source, char: str) -> CharCheckResult:
    return check_char(open_font(source), char)


def check_text_in_font(source, text: str) -> TextCheckResult:
    return check_text(open_font(source), text)


def check_multiple_texts_in_font(source, texts) -> List[TextCheckResult]:
    return check_multiple_texts(open_font(source), texts)
