from __future__ import annotations
from .registry import register_furniture, rel, radial, fixed

# Offsets are fractions of (width, depth) from the room center in the
# top-down frame; negative y is north. Listed in paint order.


@register_furniture("living room")
def living_room():
    return [
        rel("rug", (0, 0), 0.6, 0.5, "accent"),
        rel("sofa", (0, 0.15), 0.5, 0.22, "accent"),
        rel("coffee_table", (0, -0.08), 0.25, 0.12),
        rel("tv_unit", (0, -0.35), 0.4, 0.1),
        radial("plant", (0.35, 0.35), 0.024, "#22c55e"),
    ]


@register_furniture("master bedroom")
def master_bedroom():
    return [
        rel("bed", (0, 0), 0.5, 0.55, "accent"),
        fixed("nightstand", (-0.35, -0.15), 0.25, label="nightstand1"),
        fixed("nightstand", (0.35, -0.15), 0.25, label="nightstand2"),
        rel("wardrobe", (0.35, 0.3), 0.25, 0.15),
        rel("rug", (0, 0.15), 0.4, 0.25, "accent"),
    ]


@register_furniture("bedroom")
def bedroom():
    return [
        rel("small_bed", (0, 0), 0.4, 0.5, "accent"),
        fixed("nightstand", (-0.3, -0.1), 0.2),
        rel("wardrobe", (0.3, 0.25), 0.22, 0.12),
    ]


@register_furniture("kitchen")
def kitchen():
    return [
        rel("kitchen_counter", (0, -0.3), 0.7, 0.18, "#f5f5f5", label="counter"),
        rel("refrigerator", (0.35, -0.25), 0.12, 0.15, "#e8e8e8", label="fridge"),
        rel("dining_table", (0, 0.2), 0.35, 0.25, label="table"),
        fixed("chair", (-0.12, 0.2), 0.22, rotation=0, label="chair1"),
        fixed("chair", (0.12, 0.2), 0.22, rotation=180, label="chair2"),
        fixed("chair", (0, 0.32), 0.22, rotation=90, label="chair3"),
        fixed("chair", (0, 0.08), 0.22, rotation=-90, label="chair4"),
    ]


@register_furniture("bathroom")
def bathroom():
    return [
        rel("toilet", (-0.25, -0.2), 0.15, 0.2, "#f5f5f5"),
        rel("bathtub", (0.2, 0), 0.25, 0.5, "#f5f5f5"),
        rel("sink", (-0.25, 0.25), 0.2, 0.15, "#f0f0f0"),
    ]


@register_furniture("entrance")
def entrance():
    return [
        rel("shoe_rack", (0, -0.2), 0.5, 0.2),
        radial("coat_rack", (0.25, 0.2), 0.05, "#4a3328"),
    ]


@register_furniture("dining room")
def dining_room():
    return [
        rel("dining_table", (0, 0), 0.4, 0.3, label="table"),
        fixed("chair", (-0.15, -0.15), 0.22, rotation=0, label="chair1"),
        fixed("chair", (0.15, -0.15), 0.22, rotation=0, label="chair2"),
        fixed("chair", (-0.15, 0.15), 0.22, rotation=180, label="chair3"),
        fixed("chair", (0.15, 0.15), 0.22, rotation=180, label="chair4"),
    ]


@register_furniture("office")
def office():
    return [
        rel("desk", (0, 0), 0.35, 0.2),
        fixed("office_chair", (0, 0.15), 0.25, color="#333333", rotation=180),
        radial("plant", (0.35, -0.35), 0.024, "#22c55e"),
    ]
