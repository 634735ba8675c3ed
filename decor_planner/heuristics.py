# decor_planner/heuristics.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import math

from .models import PlacedItem, Point2D, RoomDescriptor
from .projection import project_room_center, project_to_plot

Box = Tuple[float, float, float, float]  # x1, y1, x2, y2

# ------------- geometry helpers -------------
def item_bounds(item: PlacedItem) -> Box:
    """Axis-aligned box of the item after rotation about its center."""
    a = math.radians(item.rotation % 360)
    c, s = abs(math.cos(a)), abs(math.sin(a))
    ew = item.width * c + item.height * s
    eh = item.width * s + item.height * c
    cx, cy = item.center.x, item.center.y
    return cx - ew / 2.0, cy - eh / 2.0, cx + ew / 2.0, cy + eh / 2.0

def rect_overlap(a: Box, b: Box) -> float:
    ox = max(0.0, min(a[2], b[2]) - max(a[0], b[0]))
    oy = max(0.0, min(a[3], b[3]) - max(a[1], b[1]))
    return ox * oy

def room_bounds(room: RoomDescriptor, plot: Optional[Tuple[float, float]] = None) -> Box:
    c = project_room_center(room) if plot is None else project_to_plot(room, plot[0], plot[1])
    return (c.x - room.width / 2.0, c.y - room.depth / 2.0,
            c.x + room.width / 2.0, c.y + room.depth / 2.0)

# ---------- penalties helpers ----------
def overlap_area_sum(items: List[PlacedItem]) -> float:
    boxes = [item_bounds(it) for it in items]
    n = len(boxes); s = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            s += rect_overlap(boxes[i], boxes[j])
    return s

def items_outside_room(room: RoomDescriptor, items: List[PlacedItem],
                       plot: Optional[Tuple[float, float]] = None, eps: float = 1e-9) -> List[str]:
    rx1, ry1, rx2, ry2 = room_bounds(room, plot)
    out = []
    for it in items:
        x1, y1, x2, y2 = item_bounds(it)
        if x1 < rx1 - eps or y1 < ry1 - eps or x2 > rx2 + eps or y2 > ry2 + eps:
            out.append(it.id)
    return out

def compute_penalties(room: RoomDescriptor, items: List[PlacedItem],
                      plot: Optional[Tuple[float, float]] = None) -> Dict[str, float]:
    """Report-only diagnostics for one room's items; nothing is moved.

    Rugs sit under other furniture by design, so they are left out of the
    overlap sum.
    """
    solid = [it for it in items if it.item_kind != "rug"]
    return {
        "overlap_area": round(overlap_area_sum(solid), 6),
        "outside_count": float(len(items_outside_room(room, items, plot))),
    }

# ------------- editing -------------
def rotate_item(item: PlacedItem, step: float = 45.0) -> PlacedItem:
    return item.model_copy(update={"rotation": (item.rotation + step) % 360})

def move_item(item: PlacedItem, x: float, y: float) -> PlacedItem:
    return item.model_copy(update={"center": Point2D(x=x, y=y)})
