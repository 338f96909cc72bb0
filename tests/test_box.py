import pytest

from pagelayout.box import RenderBox
from pagelayout.css_properties import CssProperties
from pagelayout.enums import BoxSizing, StyleDisplay, Visibility
from pagelayout.geometry import Margins, Position


def make_box(box_sizing=BoxSizing.CONTENT_BOX):
    box = RenderBox(CssProperties(box_sizing=box_sizing))
    box.pos = Position(100, 200, 50, 30)
    box.margins = Margins(left=1, right=2, top=3, bottom=4)
    box.padding = Margins(left=5, right=6, top=7, bottom=8)
    box.borders = Margins(left=9, right=10, top=11, bottom=12)
    return box


def test_outer_extents_surround_content():
    box = make_box()
    assert box.left() + box.content_offset_left() == box.pos.x
    assert box.top() + box.content_offset_top() == box.pos.y
    assert box.right() - box.left() == box.width()
    assert box.bottom() - box.top() == box.height()
    assert box.width() == box.pos.width + box.content_offset_width()
    assert box.height() == box.pos.height + box.content_offset_height()


def test_content_offsets_sum_layers():
    box = make_box()
    assert box.content_offset_left() == 1 + 5 + 9
    assert box.content_offset_right() == box.margins.right + box.padding.right + box.borders.right
    assert box.content_offset_width() == box.content_offset_left() + box.content_offset_right()
    assert box.content_offset_height() == box.content_offset_top() + box.content_offset_bottom()


def test_empty_box_has_content_size_only():
    box = RenderBox()
    box.pos = Position(10, 20, 30, 40)
    assert (box.left(), box.top(), box.width(), box.height()) == (10, 20, 30, 40)
    assert box.right() == box.pos.right()
    assert box.bottom() == box.pos.bottom()


@pytest.mark.parametrize("side", ["left", "right", "top", "bottom"])
def test_content_box_render_offsets_include_everything(side):
    box = make_box(BoxSizing.CONTENT_BOX)
    assert getattr(box, f"render_offset_{side}")() == getattr(box, f"content_offset_{side}")()
    assert getattr(box, f"box_sizing_{side}")() == 0


@pytest.mark.parametrize("side", ["left", "right", "top", "bottom"])
def test_border_box_render_offsets_are_margins(side):
    box = make_box(BoxSizing.BORDER_BOX)
    assert getattr(box, f"render_offset_{side}")() == getattr(box.margins, side)
    assert getattr(box, f"box_sizing_{side}")() == getattr(box.padding, side) + getattr(box.borders, side)


@pytest.mark.parametrize("sizing", [BoxSizing.CONTENT_BOX, BoxSizing.BORDER_BOX])
def test_render_and_box_sizing_totals(sizing):
    box = make_box(sizing)
    assert box.render_offset_width() == box.render_offset_left() + box.render_offset_right()
    assert box.render_offset_height() == box.render_offset_top() + box.render_offset_bottom()
    assert box.box_sizing_width() == box.box_sizing_left() + box.box_sizing_right()
    assert box.box_sizing_height() == box.box_sizing_top() + box.box_sizing_bottom()
    assert box.render_offset_width() + box.box_sizing_width() == box.content_offset_width()
    assert box.render_offset_height() + box.box_sizing_height() == box.content_offset_height()


def test_add_child_sets_parent_and_root():
    parent = RenderBox()
    child = RenderBox()
    parent.add_child(child)
    assert parent.children == [child]
    assert child.parent is parent
    assert parent.is_root()
    assert not child.is_root()


def test_parent_is_held_weakly():
    child = RenderBox()
    parent = RenderBox()
    parent.add_child(child)
    del parent
    assert child.parent is None
    assert child.is_root()


@pytest.mark.parametrize(
    "display,expected",
    [
        (StyleDisplay.FLEX, True),
        (StyleDisplay.INLINE_FLEX, True),
        (StyleDisplay.BLOCK, False),
        (StyleDisplay.INLINE, False),
    ],
)
def test_is_flex_item_follows_parent_display(display, expected):
    parent = RenderBox(CssProperties(display=display))
    child = RenderBox()
    parent.add_child(child)
    assert child.is_flex_item() is expected


def test_root_is_not_flex_item():
    assert RenderBox(CssProperties(display=StyleDisplay.FLEX)).is_flex_item() is False


def test_visibility_rules():
    assert RenderBox(CssProperties(display=StyleDisplay.BLOCK)).is_visible() is True
    assert RenderBox(CssProperties(display=StyleDisplay.NONE)).is_visible() is False
    assert RenderBox(CssProperties(visibility=Visibility.HIDDEN)).is_visible() is False
    assert RenderBox(CssProperties(visibility=Visibility.COLLAPSE)).is_visible() is False
    skipped = RenderBox()
    skipped.skip = True
    assert skipped.is_visible() is False


def test_baselines_default_to_bottom_without_margin():
    box = make_box()
    assert box.get_first_baseline() == box.height() - box.margins.bottom
    assert box.get_last_baseline() == box.get_first_baseline()


def test_clone_shares_style_but_not_layout():
    box = make_box()
    box.add_child(RenderBox())
    copy = box.clone()
    assert copy.css is box.css
    assert copy.children == []
    assert copy.pos == Position()
    assert copy.margins == Margins()