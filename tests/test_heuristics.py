import pytest

from decor_planner.evaluator import evaluate
from decor_planner.heuristics import (
    compute_penalties, item_bounds, items_outside_room, move_item, rect_overlap, rotate_item,
)
from decor_planner.models import PlacedItem, Point2D, RoomDescriptor


def _item(x=0.0, y=0.0, w=2.0, h=1.0, rotation=0.0, kind="sofa", id="0-sofa"):
    return PlacedItem(id=id, item_kind=kind, layer="furniture", room="Living Room",
                      center=Point2D(x=x, y=y), width=w, height=h, rotation=rotation, color="#fff")


def test_bounds_swap_on_quarter_turn():
    x1, y1, x2, y2 = item_bounds(_item(rotation=90))
    assert x2 - x1 == pytest.approx(1.0)
    assert y2 - y1 == pytest.approx(2.0)


def test_bounds_grow_on_diagonal():
    x1, _, x2, _ = item_bounds(_item(w=1, h=1, rotation=45))
    assert x2 - x1 == pytest.approx(2 ** 0.5)


def test_rect_overlap():
    assert rect_overlap((0, 0, 2, 2), (1, 1, 3, 3)) == pytest.approx(1.0)
    assert rect_overlap((0, 0, 1, 1), (1, 0, 2, 1)) == 0


def test_default_kitchen_stays_inside(kitchen, design):
    items = evaluate(kitchen, design, "furniture")
    assert items_outside_room(kitchen, items) == []


def test_item_pushed_out_is_reported(kitchen):
    stray = _item(x=10, y=10, id="0-stray")
    assert items_outside_room(kitchen, [stray]) == ["0-stray"]


def test_tiny_room_reports_without_moving(design):
    closet = RoomDescriptor(name="Kitchen", width=0.5, depth=0.5)
    items = evaluate(closet, design, "furniture")
    before = [it.center for it in items]
    pens = compute_penalties(closet, items)
    assert pens["outside_count"] > 0
    assert [it.center for it in items] == before


def test_rotate_wraps_and_copies():
    item = _item(rotation=315)
    turned = rotate_item(item)
    assert turned.rotation == 0
    assert item.rotation == 315


def test_move_item():
    moved = move_item(_item(), 4.5, -1)
    assert (moved.center.x, moved.center.y) == (4.5, -1)
