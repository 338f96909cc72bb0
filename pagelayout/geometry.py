"""Boxes, sizes, font metrics and layout contexts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum, IntFlag

from .enums import MediaType


@dataclass
class Margins:
    """Left, right, top and bottom extents around a box."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0

    def width(self):
        return self.left + self.right

    def height(self):
        return self.top + self.bottom


@dataclass
class PointF:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Size:
    width: int = 0
    height: int = 0


@dataclass
class Position:
    """An axis-aligned rectangle."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def right(self):
        return self.x + self.width

    def bottom(self):
        return self.y + self.height

    def left(self):
        return self.x

    def top(self):
        return self.y

    def expanded(self, margins):
        """A copy grown outwards by ``margins``."""
        return Position(
            self.x - margins.left,
            self.y - margins.top,
            self.width + margins.left + margins.right,
            self.height + margins.top + margins.bottom,
        )

    def shrunk(self, margins):
        """A copy shrunk inwards by ``margins``."""
        return Position(
            self.x + margins.left,
            self.y + margins.top,
            self.width - margins.left - margins.right,
            self.height - margins.top - margins.bottom,
        )

    def move_to(self, x, y):
        self.x = x
        self.y = y

    def does_intersect(self, other):
        """True if the rectangles touch or overlap; always true for ``None``."""
        if other is None:
            return True
        return (
            self.left() <= other.right()
            and self.right() >= other.left()
            and self.bottom() >= other.top()
            and self.top() <= other.bottom()
        ) or (
            other.left() <= self.right()
            and other.right() >= self.left()
            and other.bottom() >= self.top()
            and other.top() <= self.bottom()
        )

    def intersect(self, other):
        """The overlapping rectangle, or an empty one at the origin."""
        x1 = max(other.x, self.x)
        y1 = max(other.y, self.y)
        x2 = min(other.right(), self.right())
        y2 = min(other.bottom(), self.bottom())
        if x2 > x1 and y2 > y1:
            return Position(x1, y1, x2 - x1, y2 - y1)
        return Position()

    def is_empty(self):
        return not self.width and not self.height

    def is_point_inside(self, x, y):
        return self.left() <= x < self.right() and self.top() <= y < self.bottom()


@dataclass
class FontMetrics:
    """Measurements of a loaded font, in pixels."""

    font_size: int = 0
    height: int = 0
    ascent: int = 0
    descent: int = 0
    x_height: int = 0
    ch_width: int = 0
    draw_spaces: bool = True
    sub_shift: int = 0
    super_shift: int = 0

    def base_line(self):
        return self.descent


class CbcValueType(IntEnum):
    ABSOLUTE = 0
    PERCENTAGE = 1
    AUTO = 2
    NONE = 3


class SizeMode(IntFlag):
    NORMAL = 0x00
    EXACT_WIDTH = 0x01
    EXACT_HEIGHT = 0x02
    CONTENT = 0x04


@dataclass(frozen=True)
class TypedInt:
    """An integer dimension tagged with how it was specified."""

    value: int
    type: CbcValueType

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def with_value(self, value):
        """A copy with a new value and the same type."""
        return replace(self, value=value)


def _typed(kind):
    return lambda: TypedInt(0, kind)


@dataclass
class ContainingBlockContext:
    """Dimensions of the block a box is laid out within."""

    width: TypedInt = field(default_factory=_typed(CbcValueType.AUTO))
    render_width: TypedInt = field(default_factory=_typed(CbcValueType.AUTO))
    min_width: TypedInt = field(default_factory=_typed(CbcValueType.NONE))
    max_width: TypedInt = field(default_factory=_typed(CbcValueType.NONE))
    height: TypedInt = field(default_factory=_typed(CbcValueType.AUTO))
    min_height: TypedInt = field(default_factory=_typed(CbcValueType.NONE))
    max_height: TypedInt = field(default_factory=_typed(CbcValueType.NONE))
    context_idx: int = 0
    size_mode: SizeMode = SizeMode.NORMAL

    def new_width(self, width, size_mode=SizeMode.NORMAL):
        """A copy with a new width; the render width keeps its offset."""
        render = width - (self.width.value - self.render_width.value)
        return replace(
            self,
            width=self.width.with_value(width),
            render_width=self.render_width.with_value(render),
            size_mode=SizeMode(size_mode),
        )

    def new_width_height(self, width, height, size_mode=SizeMode.NORMAL):
        """A copy with a new width and height."""
        ctx = self.new_width(width, size_mode)
        ctx.height = self.height.with_value(height)
        return ctx


@dataclass
class MediaFeatures:
    """Properties of the output device used by media queries."""

    type: MediaType = MediaType.UNKNOWN
    width: int = 0
    height: int = 0
    device_width: int = 0
    device_height: int = 0
    color: int = 0
    color_index: int = 0
    monochrome: int = 0
    resolution: int = 0


class BaselineType(IntEnum):
    NONE = 0
    TOP = 1
    BOTTOM = 2


@dataclass
class Baseline:
    """A baseline offset measured from the top or the bottom of a box."""

    value: int = 0
    type: BaselineType = BaselineType.NONE

    def __int__(self):
        return self.value

    def get_offset_from_top(self, height):
        if self.type == BaselineType.TOP:
            return self.value
        return height - self.value

    def get_offset_from_bottom(self, height):
        if self.type == BaselineType.BOTTOM:
            return self.value
        return height - self.value

    def calc(self, top, bottom):
        """Set the value from the extents of a box aligned at baseline zero."""
        if self.type == BaselineType.TOP:
            self.value = -top
        elif self.type == BaselineType.BOTTOM:
            self.value = bottom