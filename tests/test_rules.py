import pytest
from pydantic import ValidationError

from decor_planner.models import LAYERS, ROOM_TYPE_TAGS, PlacementRule
from decor_planner.rules.table import registered_pairs, rules_for


def test_every_registered_pair_uses_known_tags():
    for tag, layer in registered_pairs():
        assert tag in ROOM_TYPE_TAGS
        assert layer in LAYERS


def test_unknown_pair_is_empty():
    assert rules_for("garage", "furniture") == ()
    assert rules_for("kitchen", "ceiling") == ()


def test_office_has_no_decor_entry():
    assert rules_for("office", "decor") == ()
    assert len(rules_for("office", "furniture")) > 0


def test_living_room_rug_precedes_sofa():
    kinds = [r.item_kind for r in rules_for("living room", "furniture")]
    assert kinds.index("rug") < kinds.index("sofa")


def test_entrance_tables():
    assert [r.item_kind for r in rules_for("entrance", "furniture")] == ["shoe_rack", "coat_rack"]
    assert [r.item_kind for r in rules_for("entrance", "decor")] == ["mirror"]


def test_rotations_are_quarter_turns():
    for pair in registered_pairs():
        for rule in rules_for(*pair):
            assert rule.rotation in (0, 90, 180, -90)


def test_slots_are_unique_within_a_rule_set():
    for pair in registered_pairs():
        slots = [r.slot for r in rules_for(*pair)]
        assert len(slots) == len(set(slots)), pair


def test_fixed_color_source_requires_color():
    with pytest.raises(ValidationError):
        PlacementRule(item_kind="lamp", size=(0.2, 0.2), color_source="fixed")
