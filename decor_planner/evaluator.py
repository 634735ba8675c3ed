from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .classifier import classify
from .models import (
    DesignConfiguration, Layer, PlacedItem, PlacementRule, PlanLayout, Point2D, RoomDescriptor,
)
from .projection import project_room_center, project_to_plot
from .rules.table import rules_for
from .styles import accent_color, wood_tone

Plot = Tuple[float, float]


def _anchor(room: RoomDescriptor, plot: Optional[Plot]) -> Point2D:
    if plot is None:
        return project_room_center(room)
    return project_to_plot(room, plot[0], plot[1])


def _size(rule: PlacementRule, room: RoomDescriptor) -> Tuple[float, float, Optional[float]]:
    a, b = rule.size
    if rule.size_mode == "radial":
        r = a * min(room.width, room.depth)
        return 2 * r, 2 * r, r
    if rule.size_mode == "fixed":
        return a, b, None
    return a * room.width, b * room.depth, None


def _color(rule: PlacementRule, accent: str, wood: str) -> str:
    if rule.color_source == "accent":
        return accent
    if rule.color_source == "wood":
        return wood
    return rule.color


def evaluate(
    room: RoomDescriptor,
    config: Optional[DesignConfiguration],
    layer: Layer,
    room_index: int = 0,
    plot: Optional[Plot] = None,
) -> List[PlacedItem]:
    """
    Place the authored items for one room and layer.

    Centers are in the room-center top-down frame, or in the plot frame when
    `plot=(plot_width, plot_depth)` is given. Output order is rule order,
    which is also paint order.

    With no config the modern style is assumed (accent #808080, wood #2a2a2a),
    not the bare #7c9eb2 / #5c4033 fallbacks.
    """
    config = config or DesignConfiguration()
    tag = classify(room.name)
    accent = accent_color(config.color_palette)
    wood = wood_tone(config.style)
    origin = _anchor(room, plot)

    rules = rules_for(tag, layer)
    if not rules:
        return []

    out: List[PlacedItem] = []
    for rule in rules:
        fx, fy = rule.offset
        w, h, radius = _size(rule, room)
        out.append(PlacedItem(
            id=f"{room_index}-{rule.slot}",
            item_kind=rule.item_kind,
            layer=layer,
            room=room.name,
            center=Point2D(x=origin.x + fx * room.width, y=origin.y + fy * room.depth),
            width=w,
            height=h,
            radius=radius,
            rotation=float(rule.rotation),
            color=_color(rule, accent, wood),
        ))
    return out


def evaluate_plan(
    rooms: Sequence[RoomDescriptor],
    config: Optional[DesignConfiguration] = None,
    plot: Optional[Plot] = None,
) -> PlanLayout:
    """Both layers for every room; disabled layers come back empty."""
    config = config or DesignConfiguration()
    furniture: List[PlacedItem] = []
    decor: List[PlacedItem] = []
    for idx, room in enumerate(rooms):
        if config.furniture_enabled:
            furniture.extend(evaluate(room, config, "furniture", room_index=idx, plot=plot))
        if config.decor_enabled:
            decor.extend(evaluate(room, config, "decor", room_index=idx, plot=plot))
    return PlanLayout(
        plot_width=plot[0] if plot else None,
        plot_depth=plot[1] if plot else None,
        rooms=list(rooms),
        furniture=furniture,
        decor=decor,
    )
