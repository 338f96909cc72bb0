"""Host-side services for the layout engine: fonts, text, media and URLs."""

from __future__ import annotations

from enum import IntFlag

from .enums import SPLIT_DELIMS_SPACES, FontStyle, MediaType, TextTransform
from .geometry import MediaFeatures

DEFAULT_FONT_FAMILY = "Roboto-Medium"
FONT_DIRECTORY = "data/fonts"

_DECORATION_UNDERLINE = 1
_DECORATION_LINETHROUGH = 2

MASTER_CSS = """
html { display: block; }
head, meta, title, link, style, script { display: none }
body { display: block; margin: 8px; }
p { display: block; margin-top: 1em; margin-bottom: 1em; }
b, strong { display: inline; font-weight: bold; }
i, em, cite { display: inline; font-style: italic; }
ins, u { text-decoration: underline }
del, s, strike { text-decoration: line-through }
center { text-align: center; display: block; }
a:link { text-decoration: underline; color: #00f; cursor: pointer; }
h1, h2, h3, h4, h5, h6, div { display: block; }
h1 { font-weight: bold; margin-top: 0.67em; margin-bottom: 0.67em; font-size: 2em; }
h2 { font-weight: bold; margin-top: 0.83em; margin-bottom: 0.83em; font-size: 1.5em; }
h3 { font-weight: bold; margin-top: 1em; margin-bottom: 1em; font-size: 1.17em; }
h4 { font-weight: bold; margin-top: 1.33em; margin-bottom: 1.33em }
h5 { font-weight: bold; margin-top: 1.67em; margin-bottom: 1.67em; font-size: .83em; }
h6 { font-weight: bold; margin-top: 2.33em; margin-bottom: 2.33em; font-size: .67em; }
br { display: inline-block; }
br[clear="all"] { clear: both; }
br[clear="left"] { clear: left; }
br[clear="right"] { clear: right; }
span { display: inline }
img { display: inline-block; }
img[align="right"] { float: right; }
img[align="left"] { float: left; }
hr { display: block; margin-top: 0.5em; margin-bottom: 0.5em; margin-left: auto;
     margin-right: auto; border-style: inset; border-width: 1px }
table { display: table; border-collapse: separate; border-spacing: 2px;
        border-top-color: gray; border-left-color: gray; border-bottom-color: black;
        border-right-color: black; font-size: medium; font-weight: normal; font-style: normal; }
tbody, tfoot, thead { display: table-row-group; vertical-align: middle; }
tr { display: table-row; vertical-align: inherit; border-color: inherit; }
td, th { display: table-cell; vertical-align: inherit; border-width: 1px; padding: 1px; }
th { font-weight: bold; }
table[border] { border-style: solid; }
table[border^="0"] { border-style: none; }
table[border] td, table[border] th { border-style: solid; border-top-color: black;
    border-left-color: black; border-bottom-color: gray; border-right-color: gray; }
table[border^="0"] td, table[border^="0"] th { border-style: none; }
table[align=left] { float: left; }
table[align=right] { float: right; }
table[align=center] { margin-left: auto; margin-right: auto; }
caption { display: table-caption; }
td[nowrap], th[nowrap] { white-space: nowrap; }
tt, code, kbd, samp { font-family: monospace }
pre, xmp, plaintext, listing { display: block; font-family: monospace; white-space: pre; margin: 1em 0 }
ul, menu, dir { display: block; list-style-type: disc; margin-top: 1em; margin-bottom: 1em;
    margin-left: 0; margin-right: 0; padding-left: 40px }
ol { display: block; list-style-type: decimal; margin-top: 1em; margin-bottom: 1em;
    margin-left: 0; margin-right: 0; padding-left: 40px }
li { display: list-item; }
ul ul, ol ul { list-style-type: circle; }
ol ol ul, ol ul ul, ul ol ul, ul ul ul { list-style-type: square; }
dd { display: block; margin-left: 40px; }
dl { display: block; margin-top: 1em; margin-bottom: 1em; margin-left: 0; margin-right: 0; }
dt { display: block; }
ol ul, ul ol, ul ul, ol ol { margin-top: 0; margin-bottom: 0 }
blockquote { display: block; margin-top: 1em; margin-bottom: 1em; margin-left: 40px; margin-right: 40px; }
form { display: block; margin-top: 0em; }
option { display: none; }
input, textarea, keygen, select, button, isindex { margin: 0em; color: initial;
    line-height: normal; text-transform: none; text-indent: 0; text-shadow: none; display: inline-block; }
input[type="hidden"] { display: none; }
article, aside, footer, header, hgroup, nav, section { display: block; }
sub { vertical-align: sub; font-size: smaller; }
sup { vertical-align: super; font-size: smaller; }
figure { display: block; margin-top: 1em; margin-bottom: 1em; margin-left: 40px; margin-right: 40px; }
figcaption { display: block; }
"""


class FontStyleFlags(IntFlag):
    """Style flags applied to a loaded font."""

    NORMAL = 0x00
    BOLD = 0x01
    ITALIC = 0x02
    UNDERLINE = 0x04
    STRIKETHROUGH = 0x08


def font_file_path(family):
    """Path of the font file for the first family in a CSS family list."""
    name = family.split(",", 1)[0] if family else DEFAULT_FONT_FAMILY
    return f"{FONT_DIRECTORY}/{name}.ttf"


def font_style_flags(description):
    """Style flags for a font description: italic, strikethrough, underline."""
    flags = FontStyleFlags.NORMAL
    if description.style == FontStyle.ITALIC:
        flags |= FontStyleFlags.ITALIC
    decoration = int(description.decoration_line)
    if decoration & _DECORATION_LINETHROUGH:
        flags |= FontStyleFlags.STRIKETHROUGH
    if decoration & _DECORATION_UNDERLINE:
        flags |= FontStyleFlags.UNDERLINE
    return flags


def pt_to_px(pt):
    """Points are drawn one to one as pixels."""
    return pt


def default_font_size():
    return 16


def default_font_name():
    return "Arial"


def language():
    """The (language, culture) pair of the document."""
    return "en", ""


def media_features(viewport_width, viewport_height):
    """Media features of a colour screen showing the given viewport."""
    return MediaFeatures(
        type=MediaType.SCREEN,
        width=viewport_width,
        height=viewport_height,
        device_width=512,
        device_height=512,
        color=8,
        color_index=256,
        monochrome=0,
        resolution=96,
    )


def transform_text(text, transform):
    """Apply a CSS text-transform; capitalize upper-cases only the first character."""
    transform = TextTransform(transform)
    if transform == TextTransform.CAPITALIZE:
        return text[:1].upper() + text[1:]
    if transform == TextTransform.UPPERCASE:
        return text.upper()
    if transform == TextTransform.LOWERCASE:
        return text.lower()
    return text


def split_text(text, on_word, on_space):
    """Call ``on_word`` for each run of non-space characters and ``on_space`` for each space."""
    word = []
    for ch in text:
        if ch in SPLIT_DELIMS_SPACES:
            if word:
                on_word("".join(word))
                word.clear()
            on_space(ch)
        else:
            word.append(ch)
    if word:
        on_word("".join(word))


def is_absolute_url(url):
    return "://" in url


def is_root_path(path):
    return path.startswith("/")


def normalize_path(path):
    """Collapse ``.``, ``..`` and empty segments into an absolute path."""
    parts = []
    for segment in path.split("/"):
        if segment == "..":
            if parts:
                parts.pop()
        elif segment and segment != ".":
            parts.append(segment)
    return "".join(f"/{part}" for part in parts) or "/"


def resolve_url(url, base_url):
    """Resolve ``url`` against the directory of ``base_url``."""
    if is_absolute_url(url):
        return url
    if is_root_path(url):
        return normalize_path(url)
    base = base_url or "/"
    slash = base.rfind("/")
    if slash != -1:
        base = base[: slash + 1]
    return normalize_path(base + url)