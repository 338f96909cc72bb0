"""Gradient and image descriptions for backgrounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Optional

from .css_length import CssLength
from .enums import KeywordEnum

LINEAR_GRADIENT = "linear-gradient"
REPEATING_LINEAR_GRADIENT = "repeating-linear-gradient"
RADIAL_GRADIENT = "radial-gradient"
REPEATING_RADIAL_GRADIENT = "repeating-radial-gradient"
CONIC_GRADIENT = "conic-gradient"
REPEATING_CONIC_GRADIENT = "repeating-conic-gradient"


class GradientSide(IntFlag):
    NONE = 0
    LEFT = 0x01
    RIGHT = 0x02
    TOP = 0x04
    BOTTOM = 0x08
    X_CENTER = 0x10
    Y_CENTER = 0x20
    X_LENGTH = 0x40
    Y_LENGTH = 0x80


class RadialShape(KeywordEnum):
    NONE = 0
    CIRCLE = 1
    ELLIPSE = 2


class RadialExtent(KeywordEnum):
    NONE = 0
    CLOSEST_CORNER = 1
    CLOSEST_SIDE = 2
    FARTHEST_CORNER = 3
    FARTHEST_SIDE = 4


class ColorSpace(KeywordEnum):
    NONE = 0
    SRGB = 1
    SRGB_LINEAR = 2
    DISPLAY_P3 = 3
    A98_RGB = 4
    PROPHOTO_RGB = 5
    REC2020 = 6
    LAB = 7
    OKLAB = 8
    XYZ = 9
    XYZ_D50 = 10
    XYZ_D65 = 11
    HSL = 12
    HWB = 13
    LCH = 14
    OKLCH = 15
    POLAR_START = 12

    @property
    def is_polar(self):
        """True for the polar (hue-based) colour spaces."""
        return self >= ColorSpace.POLAR_START


class HueInterpolation(KeywordEnum):
    NONE = 0
    SHORTER = 1
    LONGER = 2
    INCREASING = 3
    DECREASING = 4


@dataclass
class ColorStop:
    """A colour stop, or a colour hint when no colour is given."""

    color: Any = None
    length: Optional[CssLength] = None
    angle: Optional[float] = None

    def __post_init__(self):
        if self.length is not None and self.angle is not None:
            raise ValueError("a color stop has either a length or an angle, not both")
        if self.color is None and self.length is None and self.angle is None:
            raise ValueError("a color hint needs a length or an angle")

    def is_color_hint(self):
        return self.color is None


def _origin():
    return CssLength.predef_value(0)


@dataclass
class Gradient:
    """A linear, radial or conic gradient and its parameters."""

    kind: str = ""
    side: GradientSide = GradientSide.NONE
    angle: float = 180.0
    colors: list = field(default_factory=list)
    position_x: CssLength = field(default_factory=_origin)
    position_y: CssLength = field(default_factory=_origin)
    radial_shape: RadialShape = RadialShape.ELLIPSE
    radial_extent: RadialExtent = RadialExtent.FARTHEST_CORNER
    radial_radius_x: CssLength = field(default_factory=_origin)
    radial_radius_y: CssLength = field(default_factory=_origin)
    conic_from_angle: float = 0.0
    color_space: ColorSpace = ColorSpace.OKLAB
    hue_interpolation: HueInterpolation = HueInterpolation.SHORTER

    def is_empty(self):
        return not self.kind or not self.colors

    def is_linear(self):
        return self.kind in (LINEAR_GRADIENT, REPEATING_LINEAR_GRADIENT)

    def is_radial(self):
        return self.kind in (RADIAL_GRADIENT, REPEATING_RADIAL_GRADIENT)

    def is_conic(self):
        return self.kind in (CONIC_GRADIENT, REPEATING_CONIC_GRADIENT)


class ImageType(IntEnum):
    NONE = 0
    URL = 1
    GRADIENT = 2


@dataclass
class Image:
    """A background image: nothing, a URL, or a gradient."""

    type: ImageType = ImageType.NONE
    url: str = ""
    gradient: Gradient = field(default_factory=Gradient)

    def is_empty(self):
        if self.type is ImageType.URL:
            return not self.url
        if self.type is ImageType.GRADIENT:
            return self.gradient.is_empty()
        return True