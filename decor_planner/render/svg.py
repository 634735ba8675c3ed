# SVG top-down renderer (plot frame, 1 unit = 1 meter)
from __future__ import annotations
from html import escape
from typing import Callable, Dict, List, Optional, Sequence

from ..evaluator import evaluate_plan
from ..models import DesignConfiguration, PlacedItem, RoomDescriptor
from ..projection import room_rect_on_plot
from ..styles import accent_color

STROKE = "#333"
STROKE_W = 0.03
ROOM_STROKE = "#1e3a5f"
LABEL = "#64748b"


def _n(v: float) -> str:
    return f"{round(v, 4):g}"


def _attr(value: str) -> str:
    return escape(str(value), quote=True)


def _rect(x, y, w, h, fill, rx=0.0, extra="") -> str:
    return (f'<rect x="{_n(x)}" y="{_n(y)}" width="{_n(w)}" height="{_n(h)}" rx="{_n(rx)}" '
            f'fill="{_attr(fill)}"{extra}/>')


def _circle(cx, cy, r, fill, extra="") -> str:
    return f'<circle cx="{_n(cx)}" cy="{_n(cy)}" r="{_n(r)}" fill="{_attr(fill)}"{extra}/>'


def _outline() -> str:
    return f' stroke="{STROKE}" stroke-width="{STROKE_W}"'


# ---- shape routines: local coordinates, item centered on (0, 0) ----
def _sofa(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.08, _outline()),
            _rect(-w / 2 + 0.05, -h / 2 + 0.05, w - 0.1, h * 0.6, f"{c}dd", 0.05),
            _circle(-w / 4, 0, 0.08, f"{c}aa"), _circle(w / 4, 0, 0.08, f"{c}aa")]


def _coffee_table(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.03, _outline())]


def _bed(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, "#e8e0d8", 0.05, _outline()),
            _rect(-w / 2 + 0.05, -h / 2, w - 0.1, h * 0.15, "#4a3328", 0.02),
            _rect(-w / 3, -h / 2 + h * 0.18, w / 4, h * 0.12, "#f5f5f5", 0.02),
            _rect(w / 12, -h / 2 + h * 0.18, w / 4, h * 0.12, "#f5f5f5", 0.02),
            _rect(-w / 2 + 0.03, -h / 2 + h * 0.35, w - 0.06, h * 0.62, c, 0.03)]


def _small_bed(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, "#e8e0d8", 0.04, _outline()),
            _rect(-w / 2 + 0.03, -h / 2, w - 0.06, h * 0.12, "#4a3328", 0.02),
            _rect(-w / 6, -h / 2 + h * 0.15, w / 3, h * 0.1, "#f5f5f5", 0.02),
            _rect(-w / 2 + 0.03, -h / 2 + h * 0.3, w - 0.06, h * 0.67, c, 0.03)]


def _nightstand(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()), _circle(0, 0, w * 0.15, "#8b7355")]


def _wardrobe(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            f'<line x1="0" y1="{_n(-h / 2 + 0.03)}" x2="0" y2="{_n(h / 2 - 0.03)}" stroke="#3a2718" stroke-width="0.02"/>',
            _circle(-0.08, 0, 0.03, "#a0a0a0"), _circle(0.08, 0, 0.03, "#a0a0a0")]


def _dining_table(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.04, _outline())]


def _chair(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            _rect(-w / 2 + 0.02, -h / 2, w - 0.04, h * 0.25, "#3a2718", 0.01)]


def _kitchen_counter(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.0, _outline()),
            _circle(-w / 3, 0, 0.1, "#333"), _circle(-w / 3 + 0.25, 0, 0.1, "#333"),
            _rect(w / 6, -h / 4, w / 4, h / 2, "#c0c0c0", 0.03)]


def _refrigerator(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            f'<line x1="{_n(-w / 2 + 0.02)}" y1="{_n(h / 6)}" x2="{_n(w / 2 - 0.02)}" y2="{_n(h / 6)}" stroke="#ccc" stroke-width="0.02"/>']


def _toilet(w, h, c):
    return [f'<ellipse cx="0" cy="{_n(h / 6)}" rx="{_n(w / 2.2)}" ry="{_n(h / 3)}" fill="{_attr(c)}"{_outline()}/>',
            _rect(-w / 3, -h / 2, w / 1.5, h / 3, "#f0f0f0", 0.02)]


def _bathtub(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.1, _outline()),
            _rect(-w / 2 + 0.06, -h / 2 + 0.06, w - 0.12, h - 0.12, "#e0e8f0", 0.08),
            _circle(0, -h / 2 + 0.15, 0.04, "#c0c0c0")]


def _sink(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            f'<ellipse cx="0" cy="0" rx="{_n(w / 3)}" ry="{_n(h / 3)}" fill="#f5f5f5"/>']


def _shoe_rack(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            f'<line x1="{_n(-w / 2 + 0.03)}" y1="0" x2="{_n(w / 2 - 0.03)}" y2="0" stroke="#3a2718" stroke-width="0.01"/>']


def _round(inner: str):
    def draw(w, h, c):
        return [_circle(0, 0, w / 2, c, _outline()), _circle(0, 0, w * 0.2, inner)]
    return draw


def _rug(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.05, f' fill-opacity="0.7" stroke="{_attr(c)}" stroke-width="{STROKE_W}"')]


def _tv_unit(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            _rect(-w / 2 + 0.1, -h / 2 + 0.02, w - 0.2, h * 0.4, "#1a1a1a", 0.01)]


def _desk(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, _outline()),
            _rect(-w / 6, -h / 2 + 0.03, w / 3, h * 0.2, "#1a1a1a", 0.01)]


# ---- wall decor ----
def _painting(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, "#3a2718", 0.02),
            _rect(-w / 2 + 0.02, -h / 2 + 0.02, w - 0.04, h - 0.04, c, 0.01)]


def _mirror(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, ' fill-opacity="0.6" stroke="#d4af37" stroke-width="0.03"')]


def _clock(w, h, c):
    r = w / 2
    return [_circle(0, 0, r, c, ' stroke="#333" stroke-width="0.02"'),
            f'<line x1="0" y1="0" x2="0" y2="{_n(-r * 0.6)}" stroke="#333" stroke-width="0.02"/>',
            f'<line x1="0" y1="0" x2="{_n(r * 0.4)}" y2="0" stroke="#333" stroke-width="0.015"/>']


def _shelf(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.0, ' stroke="#4a3328" stroke-width="0.01"'),
            _rect(-w / 2 + 0.05, -h / 2 - 0.05, 0.08, 0.05, "#22c55e", 0.01),
            _rect(w / 2 - 0.13, -h / 2 - 0.07, 0.08, 0.07, "#3b82f6", 0.01)]


def _wall_tv(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.02, ' stroke="#333" stroke-width="0.02"'),
            _rect(-w / 2 + 0.02, -h / 2 + 0.02, w - 0.04, h - 0.04, "#2a2a3a", 0.01)]


def _fallback(w, h, c):
    return [_rect(-w / 2, -h / 2, w, h, c, 0.0, _outline())]


SHAPES: Dict[str, Callable[[float, float, str], List[str]]] = {
    "sofa": _sofa,
    "coffee_table": _coffee_table,
    "bed": _bed,
    "small_bed": _small_bed,
    "nightstand": _nightstand,
    "wardrobe": _wardrobe,
    "dining_table": _dining_table,
    "chair": _chair,
    "office_chair": _chair,
    "kitchen_counter": _kitchen_counter,
    "refrigerator": _refrigerator,
    "toilet": _toilet,
    "bathtub": _bathtub,
    "sink": _sink,
    "shoe_rack": _shoe_rack,
    "coat_rack": _round("#5c4a3d"),
    "plant": _round("#8b4513"),
    "rug": _rug,
    "tv_unit": _tv_unit,
    "desk": _desk,
    "painting": _painting,
    "mirror": _mirror,
    "clock": _clock,
    "shelf": _shelf,
    "wall_tv": _wall_tv,
}


def render_item(item: PlacedItem) -> str:
    draw = SHAPES.get(item.item_kind, _fallback)
    parts = draw(item.width, item.height, item.color)
    transform = f"translate({_n(item.center.x)}, {_n(item.center.y)})"
    if item.rotation:
        transform += f" rotate({_n(item.rotation)})"
    return (f'<g id="{_attr(item.id)}" class="item {_attr(item.item_kind)}" transform="{transform}">'
            + "".join(parts) + "</g>")


def render_plan_svg(
    rooms: Sequence[RoomDescriptor],
    config: Optional[DesignConfiguration],
    plot_width: float,
    plot_depth: float,
    show_furniture: bool = True,
    show_decor: bool = True,
) -> str:
    config = config or DesignConfiguration()
    accent = _attr(accent_color(config.color_palette))
    layout = evaluate_plan(rooms, config, plot=(plot_width, plot_depth))

    svg: List[str] = []
    svg.append(f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="-2 -2 {_n(plot_width + 4)} {_n(plot_depth + 4)}">')
    svg.append('<defs>'
               '<pattern id="grid" width="1" height="1" patternUnits="userSpaceOnUse">'
               '<path d="M 1 0 L 0 0 0 1" fill="none" stroke="#cbd5e1" stroke-width="0.02"/></pattern>'
               '<pattern id="grid-large" width="5" height="5" patternUnits="userSpaceOnUse">'
               '<path d="M 5 0 L 0 0 0 5" fill="none" stroke="#94a3b8" stroke-width="0.05"/></pattern>'
               '</defs>')
    svg.append(_rect(0, 0, plot_width, plot_depth, "url(#grid)"))
    svg.append(_rect(0, 0, plot_width, plot_depth, "url(#grid-large)"))

    # --- rooms ---
    svg.append('<g class="rooms">')
    for room in rooms:
        x, y, w, d = room_rect_on_plot(room, plot_width, plot_depth)
        svg.append(_rect(x, y, w, d, room.fill_color, 0.1,
                         f' fill-opacity="0.6" stroke="{ROOM_STROKE}" stroke-width="0.08"'))
        svg.append(f'<text x="{_n(x + w / 2)}" y="{_n(y + 0.5)}" text-anchor="middle" font-size="0.4" '
                   f'font-weight="600" fill="{ROOM_STROKE}">{escape(room.name)}</text>')
        svg.append(f'<text x="{_n(x + w / 2)}" y="{_n(y + d - 0.3)}" text-anchor="middle" font-size="0.28" '
                   f'fill="{LABEL}">{room.width:.1f}m × {room.depth:.1f}m</text>')
    svg.append("</g>")

    # decor under furniture
    if show_decor:
        svg.append('<g class="decor-layer">' + "".join(render_item(i) for i in layout.decor) + "</g>")
    if show_furniture:
        svg.append('<g class="furniture-layer">' + "".join(render_item(i) for i in layout.furniture) + "</g>")

    # --- compass + scale ---
    svg.append(f'<g transform="translate({_n(plot_width - 1)}, 1)">'
               f'<circle r="0.6" fill="white" fill-opacity="0.95" stroke="{accent}" stroke-width="0.05"/>'
               f'<text x="0" y="0.15" text-anchor="middle" font-size="0.5" font-weight="bold" fill="{accent}">N</text>'
               '</g>')
    svg.append(f'<g transform="translate(0.5, {_n(plot_depth + 1)})">'
               f'<line x1="0" y1="0" x2="5" y2="0" stroke="{LABEL}" stroke-width="0.08"/>'
               f'<text x="2.5" y="0.5" text-anchor="middle" font-size="0.35" fill="{LABEL}">5 meters</text>'
               '</g>')
    svg.append("</svg>")
    return "".join(svg)
