import pytest

from decor_planner.classifier import classify
from decor_planner.evaluator import evaluate, evaluate_plan
from decor_planner.models import DesignConfiguration, RoomDescriptor
from decor_planner.rules.table import rules_for
from decor_planner.styles import FALLBACK_ACCENT


def test_kitchen_scenario(kitchen, design):
    items = evaluate(kitchen, design, "furniture")
    kinds = [it.item_kind for it in items]

    assert kinds.count("chair") == 4
    order = [kinds.index(k) for k in ("kitchen_counter", "refrigerator", "dining_table")]
    assert order == sorted(order)
    assert kinds.index("dining_table") < kinds.index("chair")

    counter = items[kinds.index("kitchen_counter")]
    assert counter.center.x == pytest.approx(3)
    assert counter.center.y == pytest.approx(2 - 4 * 0.3)
    assert counter.width == pytest.approx(4 * 0.7)
    assert counter.height == pytest.approx(4 * 0.18)


def test_entrance_scenario(entrance, design):
    assert [it.item_kind for it in evaluate(entrance, design, "furniture")] == ["shoe_rack", "coat_rack"]
    assert [it.item_kind for it in evaluate(entrance, design, "decor")] == ["mirror"]


def test_output_mirrors_rule_table(rooms, design):
    for room in rooms:
        for layer in ("furniture", "decor"):
            items = evaluate(room, design, layer)
            rules = rules_for(classify(room.name), layer)
            assert [it.item_kind for it in items] == [r.item_kind for r in rules]


def test_deterministic(rooms, design):
    for room in rooms:
        assert evaluate(room, design, "furniture") == evaluate(room, design, "furniture")


def test_short_palette_uses_fallback_accent(rooms):
    cfg = DesignConfiguration(style="luxury", color_palette=["#ffffff"])
    living = rooms[0]
    items = evaluate(living, cfg, "furniture")
    rug = next(it for it in items if it.item_kind == "rug")
    assert rug.color == FALLBACK_ACCENT


def test_accent_and_wood_tone_resolution(rooms):
    cfg = DesignConfiguration(style="rustic", color_palette=["#000", "#111", "#abcdef"])
    items = {it.item_kind: it for it in evaluate(rooms[0], cfg, "furniture")}
    assert items["sofa"].color == "#abcdef"
    assert items["coffee_table"].color == "#8b4513"
    assert items["plant"].color == "#22c55e"


def test_unknown_style_gets_mid_brown(entrance):
    cfg = DesignConfiguration(style="art-deco")
    shoe_rack = evaluate(entrance, cfg, "furniture")[0]
    assert shoe_rack.color == "#5c4033"


def test_room_without_decor_rules_yields_nothing(design):
    office = RoomDescriptor(name="Office", width=3, depth=3, center=(0, 0, 0))
    assert evaluate(office, design, "decor") == []


def test_missing_config_uses_defaults(kitchen):
    assert len(evaluate(kitchen, None, "furniture")) == 7


def test_radial_items_scale_with_short_side(entrance, design):
    coat_rack = evaluate(entrance, design, "furniture")[1]
    assert coat_rack.radius == pytest.approx(0.05 * 2)
    assert coat_rack.width == coat_rack.height == pytest.approx(0.2)


def test_fixed_items_ignore_room_size(design):
    big = RoomDescriptor(name="Kitchen", width=10, depth=8)
    chairs = [it for it in evaluate(big, design, "furniture") if it.item_kind == "chair"]
    assert all(c.width == pytest.approx(0.22) for c in chairs)
    assert [c.rotation for c in chairs] == [0, 180, 90, -90]


def test_plot_frame_shifts_by_half_plot(kitchen, design):
    local = evaluate(kitchen, design, "furniture")
    on_plot = evaluate(kitchen, design, "furniture", plot=(20, 16))
    for a, b in zip(local, on_plot):
        assert b.center.x == pytest.approx(a.center.x + 10)
        assert b.center.y == pytest.approx(a.center.y + 8)


def test_item_ids_carry_room_index(kitchen, design):
    ids = [it.id for it in evaluate(kitchen, design, "furniture", room_index=3)]
    assert ids[:3] == ["3-counter", "3-fridge", "3-table"]


def test_evaluate_plan_collects_both_layers(rooms, design):
    layout = evaluate_plan(rooms, design, plot=(20, 16))
    expected_furniture = sum(len(rules_for(classify(r.name), "furniture")) for r in rooms)
    expected_decor = sum(len(rules_for(classify(r.name), "decor")) for r in rooms)
    assert len(layout.furniture) == expected_furniture
    assert len(layout.decor) == expected_decor
    assert layout.plot_width == 20 and layout.plot_depth == 16
    assert layout.furniture[0].id.startswith("0-")


def test_evaluate_plan_respects_disabled_layers(rooms):
    cfg = DesignConfiguration(furniture_enabled=False)
    layout = evaluate_plan(rooms, cfg)
    assert layout.furniture == []
    assert layout.decor


def test_missing_config_uses_modern_palette(kitchen):
    living = RoomDescriptor(name="Living Room", width=6, depth=5)
    painting = next(it for it in evaluate(living, None, "decor") if it.item_kind == "painting")
    table = next(it for it in evaluate(kitchen, None, "furniture") if it.item_kind == "dining_table")
    assert painting.color == "#808080"
    assert table.color == "#2a2a2a"
