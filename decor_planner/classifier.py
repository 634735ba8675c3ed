from __future__ import annotations
from typing import Optional, Tuple

from .models import RoomTypeTag

DEFAULT_ROOM_TYPE: RoomTypeTag = "living room"

# Order matters: "master bedroom" also contains "bedroom".
KEYWORDS: Tuple[Tuple[Tuple[str, ...], RoomTypeTag], ...] = (
    (("living",), "living room"),
    (("master bedroom",), "master bedroom"),
    (("bedroom",), "bedroom"),
    (("kitchen",), "kitchen"),
    (("dining",), "dining room"),
    (("bathroom",), "bathroom"),
    (("entrance", "foyer"), "entrance"),
    (("office", "study"), "office"),
)


def classify(name: Optional[str]) -> RoomTypeTag:
    """Map a free-text room name to a room-type tag (living room if nothing matches)."""
    lowered = (name or "").lower()
    for needles, tag in KEYWORDS:
        if any(n in lowered for n in needles):
            return tag
    return DEFAULT_ROOM_TYPE
