"""Keyword enumerations for CSS property values and related constants."""

from __future__ import annotations

from enum import IntEnum, IntFlag

SPLIT_DELIMS_SPACES = " \t\r\n\f\v"

VOID_ELEMENTS = frozenset(
    "area;base;br;col;command;embed;hr;img;input;keygen;link;meta;param;source;track;wbr".split(";")
)


class KeywordEnum(IntEnum):
    """Integer enumeration whose members map to CSS keywords.

    A member's keyword is its name in lower case with underscores turned into
    hyphens, unless the member is declared as ``(value, keyword)``.
    """

    def __new__(cls, value, keyword=None):
        member = int.__new__(cls, value)
        member._value_ = value
        member._keyword = keyword
        return member

    @classmethod
    def from_keyword(cls, keyword):
        """Return the member spelled by ``keyword``; raise ValueError if none is."""
        wanted = keyword.strip().lower()
        for member in cls:
            if member.keyword() == wanted:
                return member
        raise ValueError(f"unknown {cls.__name__} keyword: {keyword!r}")

    def keyword(self):
        """The CSS keyword for this member."""
        if self._keyword is not None:
            return self._keyword
        return self.name.lower().replace("_", "-")


class DocumentMode(KeywordEnum):
    NO_QUIRKS = 0
    QUIRKS = 1
    LIMITED_QUIRKS = 2


class TextDecorationLine(IntFlag):
    NONE = 0x00
    UNDERLINE = 0x01
    OVERLINE = 0x02
    LINE_THROUGH = 0x04


class TextDecorationStyle(KeywordEnum):
    SOLID = 0
    DOUBLE = 1
    DOTTED = 2
    DASHED = 3
    WAVY = 4


class TextDecorationThickness(KeywordEnum):
    AUTO = 0
    FROM_FONT = 1


class TextEmphasisPosition(IntFlag):
    OVER = 0x00
    UNDER = 0x01
    LEFT = 0x02
    RIGHT = 0x04


class StyleDisplay(KeywordEnum):
    NONE = 0
    BLOCK = 1
    INLINE = 2
    INLINE_BLOCK = 3
    INLINE_TABLE = 4
    LIST_ITEM = 5
    TABLE = 6
    TABLE_CAPTION = 7
    TABLE_CELL = 8
    TABLE_COLUMN = 9
    TABLE_COLUMN_GROUP = 10
    TABLE_FOOTER_GROUP = 11
    TABLE_HEADER_GROUP = 12
    TABLE_ROW = 13
    TABLE_ROW_GROUP = 14
    INLINE_TEXT = 15
    FLEX = 16
    INLINE_FLEX = 17


class FontSize(KeywordEnum):
    XX_SMALL = 0
    X_SMALL = 1
    SMALL = 2
    MEDIUM = 3
    LARGE = 4
    X_LARGE = 5
    XX_LARGE = 6
    SMALLER = 7
    LARGER = 8


class FontStyle(KeywordEnum):
    NORMAL = 0
    ITALIC = 1


class FontVariant(KeywordEnum):
    NORMAL = 0
    SMALL_CAPS = 1


class FontWeight(KeywordEnum):
    NORMAL = 0
    BOLD = 1
    BOLDER = 2
    LIGHTER = 3


class ListStyleType(KeywordEnum):
    NONE = 0
    CIRCLE = 1
    DISC = 2
    SQUARE = 3
    ARMENIAN = 4
    CJK_IDEOGRAPHIC = 5
    DECIMAL = 6
    DECIMAL_LEADING_ZERO = 7
    GEORGIAN = 8
    HEBREW = 9
    HIRAGANA = 10
    HIRAGANA_IROHA = 11
    KATAKANA = 12
    KATAKANA_IROHA = 13
    LOWER_ALPHA = 14
    LOWER_GREEK = 15
    LOWER_LATIN = 16
    LOWER_ROMAN = 17
    UPPER_ALPHA = 18
    UPPER_LATIN = 19
    UPPER_ROMAN = 20


class ListStylePosition(KeywordEnum):
    INSIDE = 0
    OUTSIDE = 1


class VerticalAlign(KeywordEnum):
    BASELINE = 0
    SUB = 1
    SUPER = 2
    TOP = 3
    TEXT_TOP = 4
    MIDDLE = 5
    BOTTOM = 6
    TEXT_BOTTOM = 7


class BorderWidth(KeywordEnum):
    THIN = 0
    MEDIUM = 1
    THICK = 2


class BorderStyle(KeywordEnum):
    NONE = 0
    HIDDEN = 1
    DOTTED = 2
    DASHED = 3
    SOLID = 4
    DOUBLE = 5
    GROOVE = 6
    RIDGE = 7
    INSET = 8
    OUTSET = 9


class ElementFloat(KeywordEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2


class ElementClear(KeywordEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    BOTH = 3


class CssUnits(KeywordEnum):
    NONE = 0
    PERCENTAGE = 1, "%"
    IN = 2
    CM = 3
    MM = 4
    EM = 5
    EX = 6
    PT = 7
    PC = 8
    PX = 9
    VW = 10
    VH = 11
    VMIN = 12
    VMAX = 13
    REM = 14
    CH = 15


class BackgroundAttachment(KeywordEnum):
    SCROLL = 0
    FIXED = 1


class BackgroundRepeat(KeywordEnum):
    REPEAT = 0
    REPEAT_X = 1
    REPEAT_Y = 2
    NO_REPEAT = 3


class BackgroundBox(KeywordEnum):
    BORDER = 0, "border-box"
    PADDING = 1, "padding-box"
    CONTENT = 2, "content-box"


class BackgroundPosition(KeywordEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    CENTER = 4


class ElementPosition(KeywordEnum):
    STATIC = 0
    RELATIVE = 1
    ABSOLUTE = 2
    FIXED = 3


class TextAlign(KeywordEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    JUSTIFY = 3


class TextTransform(KeywordEnum):
    NONE = 0
    CAPITALIZE = 1
    UPPERCASE = 2
    LOWERCASE = 3


class WhiteSpace(KeywordEnum):
    NORMAL = 0
    NOWRAP = 1
    PRE = 2
    PRE_LINE = 3
    PRE_WRAP = 4


class Overflow(KeywordEnum):
    VISIBLE = 0
    HIDDEN = 1
    SCROLL = 2
    AUTO = 3
    NO_DISPLAY = 4
    NO_CONTENT = 5


class BackgroundSize(KeywordEnum):
    AUTO = 0
    COVER = 1
    CONTAIN = 2


class Visibility(KeywordEnum):
    VISIBLE = 0
    HIDDEN = 1
    COLLAPSE = 2


class BorderCollapse(KeywordEnum):
    COLLAPSE = 0
    SEPARATE = 1


class ContentProperty(KeywordEnum):
    NONE = 0
    NORMAL = 1
    OPEN_QUOTE = 2
    CLOSE_QUOTE = 3
    NO_OPEN_QUOTE = 4
    NO_CLOSE_QUOTE = 5


class Appearance(KeywordEnum):
    NONE = 0
    AUTO = 1
    MENULIST_BUTTON = 2
    TEXTFIELD = 3
    BUTTON = 4
    CHECKBOX = 5
    LISTBOX = 6
    MENULIST = 7
    METER = 8
    PROGRESS_BAR = 9
    PUSH_BUTTON = 10
    RADIO = 11
    SEARCHFIELD = 12
    SLIDER_HORIZONTAL = 13
    SQUARE_BUTTON = 14
    TEXTAREA = 15


class BoxSizing(KeywordEnum):
    CONTENT_BOX = 0
    BORDER_BOX = 1


class MediaType(KeywordEnum):
    UNKNOWN = 0
    ALL = 1
    PRINT = 2
    SCREEN = 3
    FIRST_DEPRECATED = 4


class RenderType(KeywordEnum):
    ALL = 0
    NO_FIXED = 1
    FIXED_ONLY = 2


class DrawFlag(KeywordEnum):
    ROOT = 0
    BLOCK = 1
    FLOATS = 2
    INLINES = 3
    POSITIONED = 4


class SelectResult(IntFlag):
    NO_MATCH = 0x00
    MATCH = 0x01
    MATCH_PSEUDO_CLASS = 0x02
    MATCH_WITH_BEFORE = 0x10
    MATCH_WITH_AFTER = 0x20


class FlexDirection(KeywordEnum):
    ROW = 0
    ROW_REVERSE = 1
    COLUMN = 2
    COLUMN_REVERSE = 3


class FlexWrap(KeywordEnum):
    NOWRAP = 0
    WRAP = 1
    WRAP_REVERSE = 2


class FlexJustifyContent(KeywordEnum):
    NORMAL = 0
    FLEX_START = 1
    FLEX_END = 2
    CENTER = 3
    SPACE_BETWEEN = 4
    SPACE_AROUND = 5
    START = 6
    END = 7
    LEFT = 8
    RIGHT = 9
    SPACE_EVENLY = 10
    STRETCH = 11


class FlexAlignItems(KeywordEnum):
    AUTO = 0
    NORMAL = 1
    STRETCH = 2
    BASELINE = 3
    CENTER = 4
    START = 5
    END = 6
    SELF_START = 7
    SELF_END = 8
    FLEX_START = 9
    FLEX_END = 10
    FIRST = 0x100
    LAST = 0x200
    UNSAFE = 0x400
    SAFE = 0x800


class FlexAlignContent(KeywordEnum):
    FLEX_START = 0
    START = 1
    FLEX_END = 2
    END = 3
    CENTER = 4
    SPACE_BETWEEN = 5
    SPACE_AROUND = 6
    STRETCH = 7


class FlexBasis(KeywordEnum):
    AUTO = 0
    CONTENT = 1
    FIT_CONTENT = 2
    MIN_CONTENT = 3
    MAX_CONTENT = 4


class CaptionSide(KeywordEnum):
    TOP = 0
    BOTTOM = 1


_BORDER_WIDTH_VALUES = {
    BorderWidth.THIN: 1.0,
    BorderWidth.MEDIUM: 3.0,
    BorderWidth.THICK: 5.0,
}

_BACKGROUND_POSITION_PERCENTAGES = {
    BackgroundPosition.LEFT: 0.0,
    BackgroundPosition.RIGHT: 100.0,
    BackgroundPosition.TOP: 0.0,
    BackgroundPosition.BOTTOM: 100.0,
    BackgroundPosition.CENTER: 50.0,
}


def border_width_value(width):
    """Pixel width of a ``thin``/``medium``/``thick`` border keyword."""
    return _BORDER_WIDTH_VALUES[BorderWidth(width)]


def background_position_percentage(position):
    """Percentage that a background-position keyword stands for."""
    return _BACKGROUND_POSITION_PERCENTAGES[BackgroundPosition(position)]


def is_void_element(tag):
    """True if ``tag`` names an HTML element that cannot have content."""
    return tag.lower() in VOID_ELEMENTS