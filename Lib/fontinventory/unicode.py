"""Character classification used when building a font inventory."""
import unicodedata

from fontinventory.errors import GlyphConversionWarning

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xDFFF + 1)
CONTROL_CHARS = range(0x00, 0x1F + 1)

# Blocks which are always treated as printable, (start, end) inclusive
PRINTABLE_RANGES = (
    (0x0020, 0x007E),  # Basic Latin (printable)
    (0x00A0, 0x00FF),  # Latin-1 Supplement
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
    (0x20000, 0x2A6DF),  # CJK Unified Ideographs Extension B
    (0x0100, 0x017F),  # Latin Extended-A
    (0x0180, 0x024F),  # Latin Extended-B
    (0x0370, 0x03FF),  # Greek and Coptic
    (0x0400, 0x04FF),  # Cyrillic
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0x1F300, 0x1F9FF),  # Emoji and pictographs
)

# Characters other than space separators which count as blank
BLANK_CHARS = frozenset("\t\n\v\f\r\u2028\u2029\ufeff")


def codepoint_to_char(codepoint, glyph_name=None):
    """Return the single character for a Unicode scalar value.

    Raises GlyphConversionWarning for negative values, values beyond
    U+10FFFF and lone surrogates, none of which can be encoded."""
    if not isinstance(codepoint, int) or codepoint < 0 or codepoint > MAX_CODEPOINT:
        raise GlyphConversionWarning(codepoint, glyph_name)
    if codepoint in SURROGATES:
        raise GlyphConversionWarning(codepoint, glyph_name)
    return chr(codepoint)


def is_control(codepoint):
    return codepoint in CONTROL_CHARS


def is_blank(char):
    if not char:
        return True
    return all(c in BLANK_CHARS or unicodedata.category(c) == "Zs" for c in char)


def is_printable(char, unicode):
    """Decide whether a character should be listed as printable.

    Any code point in one of PRINTABLE_RANGES qualifies. Beyond those,
    everything above the C0 controls which is not a surrogate and does not
    render as blank is also accepted, so the check is permissive: U+007F
    and the C1 controls pass, while U+3000 does not."""
    for start, end in PRINTABLE_RANGES:
        if start <= unicode <= end:
            return True
    if unicode > 0x1F and unicode not in SURROGATES:
        if unicode == 0x20 or not is_blank(char):
            return True
    return False


def describe(codepoint):
    """U+XXXX notation, padded to four hex digits."""
    return f"U+{codepoint:04X}"


def char_name(char):
    return unicodedata.name(char, "")
