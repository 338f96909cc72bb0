"""CSS length values and box offsets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import CssUnits


class CssLength:
    """A CSS length, percentage or number, or a predefined keyword index.

    ``CssLength()`` is a unitless zero; ``CssLength(value)`` is in pixels.
    """

    __slots__ = ("_value", "_units", "_predefined")

    def __init__(self, value=None, units=None):
        if units is None:
            units = CssUnits.NONE if value is None else CssUnits.PX
        self._value = 0.0 if value is None else float(value)
        self._units = CssUnits(units)
        self._predefined = False

    @classmethod
    def predef_value(cls, value=0):
        """A length holding the predefined keyword index ``value``."""
        length = cls()
        length.set_predef(value)
        return length

    def is_predefined(self):
        return self._predefined

    def predef(self):
        """The predefined keyword index, or 0 for a numeric length."""
        return int(self._value) if self._predefined else 0

    def set_predef(self, value):
        self._value = int(value)
        self._predefined = True

    def set_value(self, value, units):
        self._value = float(value)
        self._units = CssUnits(units)
        self._predefined = False

    def val(self):
        """The numeric value, or 0 for a predefined keyword."""
        return 0.0 if self._predefined else self._value

    def units(self):
        return self._units

    def calc_percent(self, width):
        """Resolve against ``width`` when a percentage; truncated to int."""
        if self._predefined:
            return 0
        if self._units == CssUnits.PERCENTAGE:
            return int(float(width) * self._value / 100.0)
        return int(self._value)

    def __eq__(self, other):
        if not isinstance(other, CssLength):
            return NotImplemented
        return (self._predefined, self._value, self._units) == (
            other._predefined,
            other._value,
            other._units,
        )

    __hash__ = None

    def __repr__(self):
        if self._predefined:
            return f"CssLength.predef_value({int(self._value)})"
        return f"CssLength({self._value!r}, {self._units!r})"


@dataclass
class CssOffsets:
    """The left, top, right and bottom offsets of a positioned box."""

    left: CssLength = field(default_factory=CssLength)
    top: CssLength = field(default_factory=CssLength)
    right: CssLength = field(default_factory=CssLength)
    bottom: CssLength = field(default_factory=CssLength)