import os
from io import BytesIO

import pytest
from fontTools.ttLib import TTFont

from fontinventory.errors import FontParseError, InvalidOptionError, SubsetError
from fontinventory.subset import (
    DEFAULT_FLAVORS,
    FLAVORS_ENV_KEY,
    FontToolsSubsetter,
    default_flavors,
    font_face_css,
    parse_flavors,
    subset_font,
    write_subset,
)


def test_subset_font(sample_font_bytes):
    result = subset_font(sample_font_bytes, "AA中", flavors=["ttf", "woff", "woff2"])
    assert result.family_name == "Test Sans"
    assert result.characters == [0x41, 0x4E2D]
    assert result.missing == []
    assert set(result.blobs) == {"ttf", "woff", "woff2"}

    ttf = TTFont(BytesIO(result.blobs["ttf"]))
    assert set(ttf.getBestCmap()) == {0x41, 0x4E2D}
    assert ttf.flavor is None
    assert TTFont(BytesIO(result.blobs["woff"])).flavor == "woff"
    assert TTFont(BytesIO(result.blobs["woff2"])).flavor == "woff2"


def test_subset_font_missing_chars(sample_font_path, caplog):
    result = subset_font(sample_font_path, "AXX", flavors="ttf")
    assert result.missing == ["X", "X"]
    assert "X" in caplog.text
    assert set(TTFont(BytesIO(result.blobs["ttf"])).getBestCmap()) == {0x41}


def test_subset_font_nothing_covered(sample_font_bytes):
    with pytest.raises(SubsetError):
        subset_font(sample_font_bytes, "XYZ")


def test_subset_font_empty_text(sample_font_bytes):
    with pytest.raises(SubsetError):
        subset_font(sample_font_bytes, "")


def test_subset_bad_font():
    with pytest.raises(FontParseError):
        FontToolsSubsetter().subset(b"nope", "A", ["ttf"])


def test_default_flavors(monkeypatch):
    monkeypatch.delenv(FLAVORS_ENV_KEY, raising=False)
    assert default_flavors() == DEFAULT_FLAVORS
    monkeypatch.setenv(FLAVORS_ENV_KEY, "ttf, WOFF2")
    assert default_flavors() == ("ttf", "woff2")


def test_env_flavors_used(sample_font_bytes, monkeypatch):
    monkeypatch.setenv(FLAVORS_ENV_KEY, "ttf")
    result = subset_font(sample_font_bytes, "A")
    assert list(result.blobs) == ["ttf"]


@pytest.mark.parametrize("value", ["eot", "ttf,svg", "", ","])
def test_parse_flavors_invalid(value):
    with pytest.raises(InvalidOptionError):
        parse_flavors(value)


def test_font_face_css():
    css = font_face_css(
        "HarmonyOS Sans SC Bold", "Harmony", ["ttf", "woff2", "woff"], weight="bold"
    )
    assert "font-family: 'HarmonyOS Sans SC Bold';" in css
    assert "font-weight: bold;" in css
    assert "font-display: swap;" in css
    woff2 = css.index("url('./Harmony.woff2') format('woff2'),")
    woff = css.index("url('./Harmony.woff') format('woff'),")
    ttf = css.index("url('./Harmony.ttf') format('truetype');")
    assert woff2 < woff < ttf
    assert ".target-text" not in css


def test_font_face_css_selector():
    css = font_face_css("Foo", "foo", ["otf"], selector=".target-text")
    assert "url('./foo.otf') format('opentype');" in css
    assert ".target-text {" in css
    assert "font-family: 'Foo', sans-serif;" in css


def test_write_subset(sample_font_bytes, tmp_path):
    result = subset_font(sample_font_bytes, "A", flavors=["woff", "woff2"])
    out = tmp_path / "web" / "subset"
    paths = write_subset(result, out, "TestSans", weight="bold")
    assert sorted(p.name for p in paths) == [
        "TestSans.css",
        "TestSans.woff",
        "TestSans.woff2",
    ]
    assert all(p.exists() for p in paths)
    css = (out / "TestSans.css").read_text(encoding="utf-8")
    assert "font-family: 'Test Sans';" in css
    assert "TestSans.ttf" not in css
    assert (out / "TestSans.woff2").read_bytes() == result.blobs["woff2"]


def test_subset_secondary_codepoint(sample_font_bytes):
    # U+00A0 shares the space glyph with U+0020
    result = subset_font(sample_font_bytes, "\u00a0", flavors="ttf")
    assert result.missing == []
    assert 0xA0 in TTFont(BytesIO(result.blobs["ttf"])).getBestCmap()

    result = subset_font(sample_font_bytes, "A\u00a0", flavors="ttf")
    assert result.missing == []
    assert set(TTFont(BytesIO(result.blobs["ttf"])).getBestCmap()) == {0x41, 0xA0}
