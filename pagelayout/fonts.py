"""Font descriptions used to request and cache fonts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .css_length import CssLength
from .enums import (
    CssUnits,
    FontStyle,
    TextDecorationLine,
    TextDecorationStyle,
    TextEmphasisPosition,
)

CURRENT_COLOR = "currentcolor"


def _length_text(length):
    if length.is_predefined():
        return str(length.predef())
    suffix = "" if length.units() == CssUnits.NONE else length.units().keyword()
    return f"{length.val():g}{suffix}"


def _color_text(color):
    return CURRENT_COLOR if color is None else str(color)


@dataclass
class FontDescription:
    """Everything that selects a font: family, size, style, weight and decoration.

    A colour of ``None`` stands for the current text colour.
    """

    family: str = ""
    size: int = 0
    style: FontStyle = FontStyle.NORMAL
    weight: int = 400
    decoration_line: TextDecorationLine = TextDecorationLine.NONE
    decoration_thickness: CssLength = field(default_factory=CssLength)
    decoration_style: TextDecorationStyle = TextDecorationStyle.SOLID
    decoration_color: Any = None
    emphasis_style: str = ""
    emphasis_color: Any = None
    emphasis_position: TextEmphasisPosition = TextEmphasisPosition.OVER

    def hash(self):
        """A string key that is equal for descriptions selecting the same font."""
        return "".join(
            (
                self.family,
                f":sz={int(self.size)}",
                f":st={int(self.style)}",
                f":w={int(self.weight)}",
                f":dl={int(self.decoration_line)}",
                f":dt={_length_text(self.decoration_thickness)}",
                f":ds={int(self.decoration_style)}",
                f":dc={_color_text(self.decoration_color)}",
                f":ephs={self.emphasis_style}",
                f":ephc={_color_text(self.emphasis_color)}",
                f":ephp={int(self.emphasis_position)}",
            )
        )