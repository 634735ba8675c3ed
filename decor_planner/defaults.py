from __future__ import annotations
import os
from typing import List, Tuple

from .models import DesignConfiguration, RoomDescriptor
from .styles import style_palette

DEFAULT_PLOT: Tuple[float, float] = (
    float(os.getenv("PLANNER_PLOT_WIDTH", "20")),
    float(os.getenv("PLANNER_PLOT_DEPTH", "16")),
)


def default_rooms() -> List[RoomDescriptor]:
    return [
        RoomDescriptor(name="Living Room", width=6, depth=5, height=3, center=(-3, 1.5, 0), fill_color="#93c5fd"),
        RoomDescriptor(name="Kitchen", width=4, depth=4, height=3, center=(3, 1.5, -2), fill_color="#fcd34d"),
        RoomDescriptor(name="Master Bedroom", width=5, depth=4, height=3, center=(-2, 1.5, -5), fill_color="#a5b4fc"),
        RoomDescriptor(name="Bedroom 2", width=4, depth=3.5, height=3, center=(3.5, 1.5, 2.5), fill_color="#c4b5fd"),
        RoomDescriptor(name="Bathroom", width=3, depth=2.5, height=3, center=(4, 1.5, -6), fill_color="#67e8f9"),
        RoomDescriptor(name="Entrance", width=2, depth=2, height=3, center=(-6, 1.5, 3), fill_color="#86efac"),
    ]


def default_design(style: str = "modern") -> DesignConfiguration:
    return DesignConfiguration(style=style, color_palette=style_palette(style))
