"""
Raster schematic of a plot: rooms, labels, grid, scale bar and north marker.

Only rooms are drawn; furniture and decor items stay in the SVG view.
"""
from __future__ import annotations
import io
import math
from typing import Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from ..models import RoomDescriptor
from ..projection import room_rect_on_plot

BACKGROUND = "#1a1f2e"
GRID = "#2a3142"
ACCENT = "#4a90d9"
MUTED = "#94a3b8"
PADDING = 40
MIN_GRID_PX = 4


def _rgba(color: str, alpha: int) -> Tuple[int, int, int, int]:
    try:
        r, g, b = ImageColor.getrgb(color)[:3]
    except ValueError:
        r, g, b = ImageColor.getrgb(MUTED)
    return r, g, b, alpha


def _centered(draw: ImageDraw.ImageDraw, xy: Tuple[float, float], text: str, fill, font) -> None:
    x1, y1, x2, y2 = draw.textbbox((0, 0), text, font=font)
    draw.text((xy[0] - (x2 - x1) / 2.0, xy[1] - (y2 - y1) / 2.0), text, fill=fill, font=font)


def render_schematic(
    rooms: Sequence[RoomDescriptor],
    plot_width: float,
    plot_depth: float,
    size: Tuple[int, int] = (800, 600),
) -> Image.Image:
    img_w, img_h = size
    scale = min((img_w - PADDING * 2) / plot_width, (img_h - PADDING * 2) / plot_depth)
    off_x = (img_w - plot_width * scale) / 2.0
    off_y = (img_h - plot_depth * scale) / 2.0

    img = Image.new("RGBA", (img_w, img_h), BACKGROUND)
    overlay = Image.new("RGBA", (img_w, img_h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    fill_draw = ImageDraw.Draw(overlay)
    font = ImageFont.load_default()

    # 1 m grid, thinned so lines stay at least MIN_GRID_PX apart
    step = max(1, math.ceil(MIN_GRID_PX / scale))
    x = 0
    while x <= plot_width:
        draw.line([(off_x + x * scale, off_y), (off_x + x * scale, off_y + plot_depth * scale)], fill=GRID, width=1)
        x += step
    y = 0
    while y <= plot_depth:
        draw.line([(off_x, off_y + y * scale), (off_x + plot_width * scale, off_y + y * scale)], fill=GRID, width=1)
        y += step

    draw.rectangle([off_x, off_y, off_x + plot_width * scale, off_y + plot_depth * scale], outline=ACCENT, width=2)

    boxes = []
    for room in rooms:
        left, top, w, d = room_rect_on_plot(room, plot_width, plot_depth)
        box = [off_x + left * scale, off_y + top * scale,
               off_x + (left + w) * scale, off_y + (top + d) * scale]
        fill_draw.rectangle(box, fill=_rgba(room.fill_color, 0x40))
        boxes.append((room, box))

    img = Image.alpha_composite(img, overlay)
    draw = ImageDraw.Draw(img)

    for room, box in boxes:
        draw.rectangle(box, outline=_rgba(room.fill_color, 255), width=2)
        cx, cy = (box[0] + box[2]) / 2.0, (box[1] + box[3]) / 2.0
        _centered(draw, (cx, cy - 8), room.name, "#ffffff", font)
        _centered(draw, (cx, cy + 8), f"{room.width:.1f}m x {room.depth:.1f}m", MUTED, font)
        _centered(draw, (cx, cy + 20), f"{room.width * room.depth:.1f} m2", MUTED, font)

    # scale bar (1 m)
    draw.text((PADDING, img_h - 22), "Scale: 1m", fill="#ffffff", font=font)
    draw.line([(PADDING + 60, img_h - 16), (PADDING + 60 + scale, img_h - 16)], fill="#ffffff", width=2)

    _centered(draw, (img_w / 2.0, 16), f"Floor Plan ({plot_width:.1f}m x {plot_depth:.1f}m)", ACCENT, font)

    # north marker
    nx, ny = img_w - 45, 45
    draw.ellipse([nx - 20, ny - 20, nx + 20, ny + 20], outline=ACCENT, width=1)
    draw.polygon([(nx, ny - 15), (nx - 5, ny), (nx + 5, ny)], fill=ACCENT)
    _centered(draw, (nx, ny + 8), "N", ACCENT, font)

    return img.convert("RGB")


def schematic_png(rooms: Sequence[RoomDescriptor], plot_width: float, plot_depth: float,
                  size: Tuple[int, int] = (800, 600)) -> bytes:
    buf = io.BytesIO()
    render_schematic(rooms, plot_width, plot_depth, size).save(buf, format="PNG")
    return buf.getvalue()
