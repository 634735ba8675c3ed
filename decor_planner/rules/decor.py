from __future__ import annotations
from .registry import register_decor, rel, radial, fixed

MIRROR = "#c4b5fd"
SHELF = "#5c4033"

# Wall-mounted items, drawn below the furniture layer. Offsets near +-0.4..0.45
# put the item against the matching wall.


@register_decor("living room")
def living_room():
    return [
        rel("wall_tv", (0, -0.45), 0.35, 0.12, "#1a1a1a"),
        fixed("painting", (-0.35, 0), 0.25, 0.18, "accent"),
        fixed("shelf", (0.35, 0), 0.35, 0.06, SHELF),
    ]


@register_decor("master bedroom")
def master_bedroom():
    return [
        fixed("painting", (0, -0.42), 0.4, 0.25, "accent"),
        fixed("mirror", (0.4, 0), 0.15, 0.35, MIRROR),
    ]


@register_decor("bedroom")
def bedroom():
    return [
        fixed("painting", (0, -0.4), 0.25, 0.18, "accent"),
        radial("clock", (0.35, -0.25), 0.023, "#f5f5f5"),
    ]


@register_decor("kitchen")
def kitchen():
    return [radial("clock", (-0.35, -0.35), 0.025, "#f5f5f5")]


@register_decor("bathroom")
def bathroom():
    return [fixed("mirror", (-0.25, 0.4), 0.2, 0.15, MIRROR)]


@register_decor("entrance")
def entrance():
    return [fixed("mirror", (-0.3, 0), 0.2, 0.3, MIRROR)]


@register_decor("dining room")
def dining_room():
    return [
        fixed("painting", (0, -0.45), 0.4, 0.25, "accent"),
        fixed("shelf", (-0.45, 0), 0.35, 0.06, SHELF),
    ]
