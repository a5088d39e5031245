"""Find out which characters a font covers and whether it can display a
given text."""
from fontinventory._version import version as __version__
from fontinventory.coverage import (
    CharCheckResult,
    TextCheckResult,
    check_char,
    check_char_in_font,
    check_multiple_texts,
    check_multiple_texts_in_font,
    check_text,
    check_text_in_font,
)
from fontinventory.errors import (
    FontInventoryError,
    FontParseError,
    GlyphConversionWarning,
    InvalidOptionError,
    SubsetError,
)
from fontinventory.font import Font, FontParser, Glyph, NameTable, open_font, parse_font
from fontinventory.inventory import (
    ExtractOptions,
    FontInventory,
    GlyphRecord,
    build_inventory,
    extract_text_from_font,
    format_inventory,
)
from fontinventory.unicode import is_printable
