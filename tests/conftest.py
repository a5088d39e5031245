from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontinventory.font import Font, Glyph, NameTable, parse_font


def _draw_box(pen):
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()


# (glyph name, code points, has outline), in glyph order
SAMPLE_GLYPHS = [
    (".notdef", [], True),
    ("space", [0x20, 0xA0], False),
    ("A", [0x41], True),
    ("uni4E2D", [0x4E2D], True),
    ("u1F600", [0x1F600], True),
    ("tab", [0x09], False),
    ("u20000", [0x20000], True),
    ("A.alt", [], True),
    ("uni3000", [0x3000], False),
]


def build_font(glyphs, names, cff=False):
    """Serialise a small font. glyphs is a list of
    (name, codepoints, has_outline) tuples."""
    glyph_order = [g[0] for g in glyphs]
    cmap = {cp: name for name, cps, _ in glyphs for cp in cps}

    fb = FontBuilder(1000, isTTF=not cff)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    if cff:
        charstrings = {}
        for name, _, outline in glyphs:
            pen = T2CharStringPen(600, None)
            if outline:
                _draw_box(pen)
            charstrings[name] = pen.getCharString()
        fb.setupCFF(names.get("psName", "TestCFF"), {}, charstrings, {})
    else:
        outlines = {}
        for name, _, outline in glyphs:
            pen = TTGlyphPen(None)
            if outline:
                _draw_box(pen)
            outlines[name] = pen.glyph()
        fb.setupGlyf(outlines)
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(names)
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200)
    fb.setupPost()

    buf = BytesIO()
    fb.font.save(buf)
    return buf.getvalue()


@pytest.fixture
def sample_font_bytes():
    return build_font(SAMPLE_GLYPHS, {"familyName": "Test Sans", "styleName": "Regular"})


@pytest.fixture
def sample_font(sample_font_bytes):
    return parse_font(sample_font_bytes)


@pytest.fixture
def sample_font_path(tmp_path, sample_font_bytes):
    path = tmp_path / "TestSans-Regular.ttf"
    path.write_bytes(sample_font_bytes)
    return path


@pytest.fixture
def cff_font():
    return parse_font(
        build_font(
            SAMPLE_GLYPHS[:4],
            {
                "familyName": "Test Serif",
                "styleName": "Bold",
                "fullName": "Test Serif Bold",
                "psName": "TestSerif-Bold",
            },
            cff=True,
        )
    )


def make_font(*glyphs, names=None):
    """Font from (name, unicode) pairs, one glyph per pair in order."""
    return Font(
        [
            Glyph(i, name=name, unicode=unicode, has_outline=True)
            for i, (name, unicode) in enumerate(glyphs)
        ],
        names or NameTable(family_name="Fake", subfamily_name="Regular"),
    )
