class FontInventoryError(Exception):
    pass


class FontParseError(FontInventoryError):
    """The supplied bytes are not a font fontTools can read."""


class GlyphConversionWarning(FontInventoryError, UserWarning):
    """A glyph's code point cannot be turned into a character.

    Raised per glyph and handled by the inventory builder, which skips the
    glyph and carries on with the scan."""

    def __init__(self, codepoint, glyph_name=None):
        self.codepoint = codepoint
        self.glyph_name = glyph_name
        if isinstance(codepoint, int):
            shown = f"{codepoint:#06x}"
        else:
            shown = repr(codepoint)
        super().__init__(
            f"Cannot convert code point {shown} of glyph {glyph_name!r} to a character"
        )


class InvalidOptionError(FontInventoryError, ValueError):
    pass


class SubsetError(FontInventoryError):
    pass
