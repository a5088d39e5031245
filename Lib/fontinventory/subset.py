"""Cut a font down to the characters of a piece of text and package the
result as webfonts with a matching @font-face stylesheet."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional

from fontTools import subset as ftsubset
from jinja2 import Environment, FileSystemLoader

from fontinventory.errors import InvalidOptionError, SubsetError
from fontinventory.font import parse_font, read_font_bytes, resolve_names

log = logging.getLogger(__name__)

FLAVORS_ENV_KEY = "FONTINVENTORY_FLAVORS"
DEFAULT_FLAVORS = ("woff", "woff2")

# flavor: (file extension, css format), in stylesheet order
FLAVORS = {
    "woff2": ("woff2", "woff2"),
    "woff": ("woff", "woff"),
    "ttf": ("ttf", "truetype"),
    "otf": ("otf", "opentype"),
}

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")


def parse_flavors(value) -> tuple:
    if isinstance(value, str):
        value = value.split(",")
    flavors = tuple(f.strip().lower() for f in value if f.strip())
    unknown = [f for f in flavors if f not in FLAVORS]
    if unknown:
        raise InvalidOptionError(
            f"Unknown flavor(s) {', '.join(unknown)}. Choose from {', '.join(FLAVORS)}"
        )
    if not flavors:
        raise InvalidOptionError("At least one flavor is needed")
    return flavors


def default_flavors() -> tuple:
    if FLAVORS_ENV_KEY in os.environ:
        return parse_flavors(os.environ[FLAVORS_ENV_KEY])
    return DEFAULT_FLAVORS


@dataclass
class SubsetResult:
    family_name: str
    characters: List[int] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    blobs: Dict[str, bytes] = field(default_factory=dict)


class Subsetter:
    """Produces webfont blobs containing only the glyphs a text needs."""

    def subset(self, font_bytes: bytes, text: str, flavors=None) -> SubsetResult:
        raise NotImplementedError


class FontToolsSubsetter(Subsetter):
    def __init__(self, hinting=True):
        self.hinting = hinting

    def options(self):
        options = ftsubset.Options()
        options.hinting = self.hinting
        options.name_IDs = ["*"]
        options.notdef_outline = True
        options.glyph_names = True
        return options

    def subset(self, font_bytes: bytes, text: str, flavors=None) -> SubsetResult:
        flavors = parse_flavors(flavors) if flavors else default_flavors()
        if not text:
            raise SubsetError("Nothing to subset, text is empty")

        font = parse_font(font_bytes)
        ttfont = font.ttfont
        names = resolve_names(font.names)
        # Every cmap entry counts here, not just each glyph's primary code point
        cmap = ttfont.getBestCmap() or {}
        codepoints = sorted(set(ord(c) for c in text))
        missing = [c for c in text if ord(c) not in cmap]
        if len(set(missing)) == len(codepoints):
            raise SubsetError(
                f"Font {names.full_name!r} has none of the {len(codepoints)} requested characters"
            )
        if missing:
            log.warning(
                "Font is missing %s, subset will not cover them",
                "".join(dict.fromkeys(missing)),
            )

        subsetter = ftsubset.Subsetter(options=self.options())
        subsetter.populate(unicodes=codepoints)
        subsetter.subset(ttfont)

        result = SubsetResult(
            family_name=names.family_name,
            characters=codepoints,
            missing=missing,
        )
        for flavor in flavors:
            ttfont.flavor = None if flavor in ("ttf", "otf") else flavor
            buf = BytesIO()
            ttfont.save(buf)
            result.blobs[flavor] = buf.getvalue()
        ttfont.flavor = None
        return result


def font_face_css(
    family: str,
    basename: str,
    flavors,
    weight="normal",
    style="normal",
    selector: Optional[str] = None,
    fallback="sans-serif",
) -> str:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    sources = [
        {"url": f"./{basename}.{ext}", "format": fmt}
        for flavor, (ext, fmt) in FLAVORS.items()
        if flavor in flavors
    ]
    return env.get_template("font-face.css").render(
        family=family,
        sources=sources,
        weight=weight,
        style=style,
        selector=selector,
        fallback=fallback,
    )


def write_subset(
    result: SubsetResult,
    out_dir,
    basename: str,
    family: Optional[str] = None,
    weight="normal",
    style="normal",
) -> List[Path]:
    """Write every blob plus ``{basename}.css`` into out_dir."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for flavor, blob in result.blobs.items():
        ext = FLAVORS[flavor][0]
        path = out_dir / f"{basename}.{ext}"
        path.write_bytes(blob)
        log.info("Saved %s (%.2f KB)", path, len(blob) / 1024)
        written.append(path)
    css = font_face_css(
        family or result.family_name, basename, result.blobs, weight, style
    )
    css_path = out_dir / f"{basename}.css"
    css_path.write_text(css, encoding="utf-8")
    log.info("Saved %s", css_path)
    written.append(css_path)
    return written


def subset_font(source, text: str, flavors=None, subsetter=None) -> SubsetResult:
    subsetter = subsetter or FontToolsSubsetter()
    return subsetter.subset(read_font_bytes(source), text, flavors)
