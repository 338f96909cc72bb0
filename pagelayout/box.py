"""Rendered boxes: the margin, border and padding geometry of laid-out elements."""

from __future__ import annotations

import weakref
from typing import Any, Optional

from .css_properties import CssProperties
from .enums import BoxSizing, StyleDisplay, Visibility
from .geometry import Margins, Position

_FLEX_DISPLAYS = (StyleDisplay.FLEX, StyleDisplay.INLINE_FLEX)


class RenderBox:
    """A box in the render tree.

    ``pos`` is the content rectangle. ``margins``, ``padding`` and ``borders``
    lie outside it, in that order from the outside in. A box holds its
    parent weakly, so the parent must be kept alive elsewhere.
    """

    def __init__(self, css: Optional[CssProperties] = None, *, element: Any = None):
        self.element = element
        self.css = css if css is not None else CssProperties()
        self.children: list[RenderBox] = []
        self.margins = Margins()
        self.padding = Margins()
        self.borders = Margins()
        self.pos = Position()
        self.skip = False
        self.positioned: list[RenderBox] = []
        self._parent_ref: Optional[weakref.ReferenceType] = None

    @property
    def parent(self) -> Optional["RenderBox"]:
        """The parent box, or None for a root or when the parent is gone."""
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Optional["RenderBox"]) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    def add_child(self, child):
        """Append ``child`` and make this box its parent."""
        self.children.append(child)
        child.parent = self

    def is_root(self):
        return self.parent is None

    def clone(self):
        """A fresh, unlaid-out box for the same element and style."""
        return type(self)(self.css, element=self.element)

    # Outer extents, margins included.

    def left(self):
        return self.pos.left() - self.content_offset_left()

    def right(self):
        return self.left() + self.width()

    def top(self):
        return self.pos.top() - self.content_offset_top()

    def bottom(self):
        return self.top() + self.height()

    def width(self):
        return self.pos.width + self.margins.width() + self.padding.width() + self.borders.width()

    def height(self):
        return self.pos.height + self.margins.height() + self.padding.height() + self.borders.height()

    # Offsets from the outer edge to the content.

    def content_offset_top(self):
        return self.margins.top + self.padding.top + self.borders.top

    def content_offset_bottom(self):
        return self.margins.bottom + self.padding.bottom + self.borders.bottom

    def content_offset_left(self):
        return self.margins.left + self.padding.left + self.borders.left

    def content_offset_right(self):
        return self.margins.right + self.padding.right + self.borders.right

    def content_offset_width(self):
        return self.content_offset_left() + self.content_offset_right()

    def content_offset_height(self):
        return self.content_offset_top() + self.content_offset_bottom()

    # Offsets that depend on box-sizing.

    def _content_box(self):
        return self.css.box_sizing == BoxSizing.CONTENT_BOX

    def _border_box(self):
        return self.css.box_sizing == BoxSizing.BORDER_BOX

    def render_offset_left(self):
        if self._content_box():
            return self.margins.left + self.borders.left + self.padding.left
        return self.margins.left

    def render_offset_right(self):
        if self._content_box():
            return self.margins.right + self.borders.right + self.padding.right
        return self.margins.right

    def render_offset_width(self):
        return self.render_offset_left() + self.render_offset_right()

    def render_offset_top(self):
        if self._content_box():
            return self.margins.top + self.borders.top + self.padding.top
        return self.margins.top

    def render_offset_bottom(self):
        if self._content_box():
            return self.margins.bottom + self.borders.bottom + self.padding.bottom
        return self.margins.bottom

    def render_offset_height(self):
        return self.render_offset_top() + self.render_offset_bottom()

    def box_sizing_left(self):
        if self._border_box():
            return self.padding.left + self.borders.left
        return 0

    def box_sizing_right(self):
        if self._border_box():
            return self.padding.right + self.borders.right
        return 0

    def box_sizing_width(self):
        return self.box_sizing_left() + self.box_sizing_right()

    def box_sizing_top(self):
        if self._border_box():
            return self.padding.top + self.borders.top
        return 0

    def box_sizing_bottom(self):
        if self._border_box():
            return self.padding.bottom + self.borders.bottom
        return 0

    def box_sizing_height(self):
        return self.box_sizing_top() + self.box_sizing_bottom()

    # State.

    def is_visible(self):
        return not (
            self.skip
            or self.css.display == StyleDisplay.NONE
            or self.css.visibility != Visibility.VISIBLE
        )

    def is_flex_item(self):
        parent = self.parent
        return parent is not None and parent.css.display in _FLEX_DISPLAYS

    def get_first_baseline(self):
        """Offset of the first baseline from the top: the bottom minus its margin."""
        return self.height() - self.margins.bottom

    def get_last_baseline(self):
        """Offset of the last baseline from the top: the bottom minus its margin."""
        return self.height() - self.margins.bottom

    def __repr__(self):
        return f"{type(self).__name__}(pos={self.pos!r}, children={len(self.children)})"