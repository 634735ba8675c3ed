"""
World <-> top-down screen transforms.

World space is y-up with the floor in the x/z plane. The top-down view keeps
world x as screen x and puts world -z at the top of the screen, so every
conversion of world z to screen y goes through `world_z_to_screen_y`.
"""
from __future__ import annotations
from typing import Tuple

from .models import Point2D, RoomDescriptor


def world_z_to_screen_y(z: float) -> float:
    return -z


def project_room_center(room: RoomDescriptor) -> Point2D:
    x, _, z = room.center
    return Point2D(x=x, y=world_z_to_screen_y(z))


def project_to_plot(room: RoomDescriptor, plot_width: float, plot_depth: float) -> Point2D:
    """Room center in a frame whose (0, 0) is the plot's top-left corner."""
    c = project_room_center(room)
    return Point2D(x=c.x + plot_width / 2.0, y=c.y + plot_depth / 2.0)


def room_rect_on_plot(room: RoomDescriptor, plot_width: float, plot_depth: float) -> Tuple[float, float, float, float]:
    """(left, top, width, depth) of the room footprint in plot coordinates."""
    c = project_to_plot(room, plot_width, plot_depth)
    return c.x - room.width / 2.0, c.y - room.depth / 2.0, room.width, room.depth
