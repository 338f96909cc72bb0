import pytest

from pagelayout.enums import (
    Appearance,
    BackgroundBox,
    BackgroundPosition,
    BorderStyle,
    BorderWidth,
    CssUnits,
    FlexAlignItems,
    FlexJustifyContent,
    ListStyleType,
    Overflow,
    StyleDisplay,
    TextDecorationLine,
    VerticalAlign,
    WhiteSpace,
    background_position_percentage,
    border_width_value,
    is_void_element,
)


@pytest.mark.parametrize(
    "enum_cls, keywords",
    [
        (
            StyleDisplay,
            "none;block;inline;inline-block;inline-table;list-item;table;table-caption;"
            "table-cell;table-column;table-column-group;table-footer-group;"
            "table-header-group;table-row;table-row-group;inline-text;flex;inline-flex",
        ),
        (CssUnits, "none;%;in;cm;mm;em;ex;pt;pc;px;vw;vh;vmin;vmax;rem;ch"),
        (
            ListStyleType,
            "none;circle;disc;square;armenian;cjk-ideographic;decimal;"
            "decimal-leading-zero;georgian;hebrew;hiragana;hiragana-iroha;katakana;"
            "katakana-iroha;lower-alpha;lower-greek;lower-latin;lower-roman;"
            "upper-alpha;upper-latin;upper-roman",
        ),
        (VerticalAlign, "baseline;sub;super;top;text-top;middle;bottom;text-bottom"),
        (BorderStyle, "none;hidden;dotted;dashed;solid;double;groove;ridge;inset;outset"),
        (BackgroundBox, "border-box;padding-box;content-box"),
        (Overflow, "visible;hidden;scroll;auto;no-display;no-content"),
        (WhiteSpace, "normal;nowrap;pre;pre-line;pre-wrap"),
        (
            FlexJustifyContent,
            "normal;flex-start;flex-end;center;space-between;space-around;start;end;"
            "left;right;space-evenly;stretch",
        ),
        (
            Appearance,
            "none;auto;menulist-button;textfield;button;checkbox;listbox;menulist;meter;"
            "progress-bar;push-button;radio;searchfield;slider-horizontal;square-button;textarea",
        ),
    ],
)
def test_keywords_follow_value_order(enum_cls, keywords):
    assert [member.keyword() for member in enum_cls] == keywords.split(";")
    assert [int(member) for member in enum_cls] == list(range(len(keywords.split(";"))))


def test_flex_align_items_keywords():
    expected = "auto;normal;stretch;baseline;center;start;end;self-start;self-end;flex-start;flex-end"
    members = [member for member in FlexAlignItems if member < FlexAlignItems.FIRST]
    assert [member.keyword() for member in members] == expected.split(";")
    assert [FlexAlignItems.from_keyword(k) for k in expected.split(";")] == members


def test_flex_align_items_modifier_flags():
    assert FlexAlignItems(0x100) is FlexAlignItems.FIRST
    assert FlexAlignItems(0x200) is FlexAlignItems.LAST
    assert FlexAlignItems(0x400) is FlexAlignItems.UNSAFE
    assert FlexAlignItems(0x800) is FlexAlignItems.SAFE


@pytest.mark.parametrize("enum_cls", [StyleDisplay, CssUnits, BackgroundBox, Appearance, FlexAlignItems])
def test_from_keyword_round_trip(enum_cls):
    for member in enum_cls:
        assert enum_cls.from_keyword(member.keyword()) is member


def test_from_keyword_ignores_case_and_spaces():
    assert StyleDisplay.from_keyword("  Inline-Block ") is StyleDisplay.INLINE_BLOCK
    assert CssUnits.from_keyword("%") is CssUnits.PERCENTAGE


def test_from_keyword_unknown_raises():
    with pytest.raises(ValueError):
        StyleDisplay.from_keyword("grid")


def test_border_width_values():
    assert border_width_value(BorderWidth.THIN) == 1
    assert border_width_value(BorderWidth.MEDIUM) == 3
    assert border_width_value(BorderWidth.THICK) == 5


def test_background_position_percentages():
    assert [background_position_percentage(p) for p in BackgroundPosition] == [0, 100, 0, 100, 50]


@pytest.mark.parametrize("tag", ["br", "IMG", "input", "wbr", "hr"])
def test_void_elements(tag):
    assert is_void_element(tag) is True


@pytest.mark.parametrize("tag", ["div", "span", "p", ""])
def test_non_void_elements(tag):
    assert is_void_element(tag) is False


def test_text_decoration_flags_combine():
    combined = TextDecorationLine(TextDecorationLine.UNDERLINE | TextDecorationLine.LINE_THROUGH)
    assert combined == 5
    assert TextDecorationLine.UNDERLINE in combined
    assert TextDecorationLine.OVERLINE not in combined