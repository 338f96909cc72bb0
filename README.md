# pagelayout

Building blocks for a small HTML rendering host, with no dependencies outside
the standard library.

## Modules

- `pagelayout.enums`: CSS keyword enumerations such as `StyleDisplay`,
  `BorderStyle`, `CssUnits` and `FlexDirection`. Those built on `KeywordEnum`
  convert to and from their CSS keyword with `from_keyword` and `keyword`
  (for example `CssUnits.PERCENTAGE.keyword()` is `"%"`); an unknown keyword
  raises `ValueError`. Bit sets such as `TextDecorationLine`,
  `TextEmphasisPosition` and `SelectResult` are plain `IntFlag`s. The module
  also provides `border_width_value` (`thin`/`medium`/`thick` as 1, 3 and 5
  pixels), `background_position_percentage` and `is_void_element`.
- `pagelayout.css_length`: `CssLength`, which holds a number with units or a
  predefined keyword index, and `CssOffsets`, the left/top/right/bottom
  offsets of a positioned box.
- `pagelayout.gradient`: gradient and image values: `Gradient`, `ColorStop`,
  `Image`, and the enumerations `GradientSide`, `RadialShape`,
  `RadialExtent`, `ColorSpace`, `HueInterpolation` and `ImageType`.
- `pagelayout.geometry`: `Margins`, `PointF`, `Size`, `Position`,
  `FontMetrics`, `TypedInt`, `ContainingBlockContext`, `MediaFeatures` and
  `Baseline`.
- `pagelayout.css_properties`: `CssProperties`, the computed style of an
  element, and `CssLineHeight`.
- `pagelayout.box`: `RenderBox`, a box tree node that answers geometry
  questions about margins, padding, borders and box sizing, and whether a
  box is visible or a flex item.
- `pagelayout.fonts`: `FontDescription` and its cache key, `hash()`.
- `pagelayout.host`: host-side helpers: `font_file_path`,
  `font_style_flags`, `pt_to_px`, `default_font_size`, `default_font_name`,
  `language`, `media_features`, `transform_text`, `split_text`,
  `is_absolute_url`, `is_root_path`, `normalize_path` and `resolve_url`, plus
  the default stylesheet text `MASTER_CSS`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Examples

Resolving a link on a page:

```python
from pagelayout.host import resolve_url, normalize_path

resolve_url("img/logo.png", "/docs/index.html")   # "/docs/img/logo.png"
resolve_url("../a.css", "/docs/guide/page.html")  # "/docs/a.css"
resolve_url("http://example.com/x.png", "/")      # unchanged
normalize_path("/a/./b/../c")                     # "/a/c"
```

Working with lengths:

```python
from pagelayout.css_length import CssLength
from pagelayout.enums import CssUnits

half = CssLength(50, CssUnits.PERCENTAGE)
half.calc_percent(300)  # 150
```

Splitting text into words and whitespace:

```python
from pagelayout.host import split_text

words, spaces = [], []
split_text("hello  world", words.append, spaces.append)
# words == ["hello", "world"], spaces == [" ", " "]
```

Box geometry:

```python
from pagelayout.box import RenderBox

box = RenderBox()
box.pos.width = 100
box.padding.left = box.padding.right = 10
box.width()  # 120
```

## What it does not do

The package holds values and geometry; it does not do the work around them.
It has no HTML or CSS parser (`MASTER_CSS` is provided as text only), no
layout algorithm that places boxes, no font loading or text measurement, no
drawing to a screen, no image loading and no network fetching. There is no
command to run.