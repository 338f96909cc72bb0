"""Computed CSS property values of an element."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .css_length import CssLength, CssOffsets
from .enums import (
    Appearance,
    BorderCollapse,
    BoxSizing,
    CaptionSide,
    ElementClear,
    ElementFloat,
    ElementPosition,
    FlexAlignContent,
    FlexAlignItems,
    FlexDirection,
    FlexJustifyContent,
    FlexWrap,
    FontStyle,
    ListStylePosition,
    ListStyleType,
    Overflow,
    StyleDisplay,
    TextAlign,
    TextDecorationLine,
    TextDecorationStyle,
    TextEmphasisPosition,
    TextTransform,
    VerticalAlign,
    Visibility,
    WhiteSpace,
)
from .geometry import FontMetrics


@dataclass
class CssLineHeight:
    """The line-height as written in CSS and its computed pixel value."""

    css_value: CssLength = field(default_factory=CssLength)
    computed_value: int = 0


@dataclass
class CssProperties:
    """The style of one element once its CSS has been resolved.

    ``z_index``, ``font_size`` and ``order`` are whole numbers; fractional
    values given for them are truncated towards zero.
    """

    position: ElementPosition = ElementPosition.STATIC
    text_align: TextAlign = TextAlign.LEFT
    overflow: Overflow = Overflow.VISIBLE
    white_space: WhiteSpace = WhiteSpace.NORMAL
    display: StyleDisplay = StyleDisplay.INLINE
    visibility: Visibility = Visibility.VISIBLE
    appearance: Appearance = Appearance.NONE
    box_sizing: BoxSizing = BoxSizing.CONTENT_BOX
    z_index: int = 0
    vertical_align: VerticalAlign = VerticalAlign.BASELINE
    element_float: ElementFloat = ElementFloat.NONE
    clear: ElementClear = ElementClear.NONE

    margins: Any = None
    padding: Any = None
    borders: Any = None

    width: CssLength = field(default_factory=CssLength)
    height: CssLength = field(default_factory=CssLength)
    min_width: CssLength = field(default_factory=CssLength)
    min_height: CssLength = field(default_factory=CssLength)
    max_width: CssLength = field(default_factory=CssLength)
    max_height: CssLength = field(default_factory=CssLength)
    offsets: CssOffsets = field(default_factory=CssOffsets)
    text_indent: CssLength = field(default_factory=CssLength)
    css_line_height: CssLength = field(default_factory=lambda: CssLength(0))
    line_height: CssLineHeight = field(default_factory=CssLineHeight)

    list_style_type: ListStyleType = ListStyleType.NONE
    list_style_position: ListStylePosition = ListStylePosition.OUTSIDE
    list_style_image: str = ""
    list_style_image_baseurl: str = ""

    bg: Any = None

    font: Optional[Any] = None
    font_size: int = 0
    font_family: str = ""
    font_weight: CssLength = field(default_factory=CssLength)
    font_style: FontStyle = FontStyle.NORMAL
    font_metrics: FontMetrics = field(default_factory=FontMetrics)

    text_decoration_line: TextDecorationLine = TextDecorationLine.NONE
    text_decoration_style: TextDecorationStyle = TextDecorationStyle.SOLID
    text_decoration_thickness: CssLength = field(default_factory=CssLength)
    text_decoration_color: Any = None
    text_emphasis_style: str = ""
    text_emphasis_color: Any = None
    text_emphasis_position: TextEmphasisPosition = TextEmphasisPosition.OVER

    text_transform: TextTransform = TextTransform.NONE
    color: Any = None
    cursor: str = ""
    content: str = ""

    border_collapse: BorderCollapse = BorderCollapse.SEPARATE
    border_spacing_x: CssLength = field(default_factory=CssLength)
    border_spacing_y: CssLength = field(default_factory=CssLength)

    flex_grow: float = 0.0
    flex_shrink: float = 1.0
    flex_basis: CssLength = field(default_factory=CssLength)
    flex_direction: FlexDirection = FlexDirection.ROW
    flex_wrap: FlexWrap = FlexWrap.NOWRAP
    flex_justify_content: FlexJustifyContent = FlexJustifyContent.FLEX_START
    flex_align_items: FlexAlignItems = FlexAlignItems.STRETCH
    flex_align_self: FlexAlignItems = FlexAlignItems.AUTO
    flex_align_content: FlexAlignContent = FlexAlignContent.STRETCH

    caption_side: CaptionSide = CaptionSide.TOP
    order: int = 0

    def __post_init__(self):
        self.z_index = int(self.z_index)
        self.font_size = int(self.font_size)
        self.order = int(self.order)
        self.flex_grow = float(self.flex_grow)
        self.flex_shrink = float(self.flex_shrink)