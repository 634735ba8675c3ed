from typing import Callable, Dict, Iterable, Optional, Tuple

from ..models import PlacementRule

# Rule-set function signature:
#   fn() -> iterable of PlacementRule, in paint order
RuleSetFn = Callable[[], Iterable[PlacementRule]]

RULE_REGISTRY: Dict[Tuple[str, str], Tuple[PlacementRule, ...]] = {}


def register_rules(room_type: str, layer: str):
    def deco(fn: RuleSetFn):
        RULE_REGISTRY[(room_type, layer)] = tuple(fn())
        return fn
    return deco


def register_furniture(room_type: str):
    return register_rules(room_type, "furniture")


def register_decor(room_type: str):
    return register_rules(room_type, "decor")


# ---- compact constructors used by the authored tables ----
def rel(kind: str, at: Tuple[float, float], w: float, d: float, color: str = "wood",
        rotation: int = 0, label: Optional[str] = None) -> PlacementRule:
    """Size scales with the room: (w * width, d * depth)."""
    return _rule(kind, at, (w, d), "relative", color, rotation, label)


def radial(kind: str, at: Tuple[float, float], r: float, color: str = "wood",
           label: Optional[str] = None) -> PlacementRule:
    """Radius scales with min(width, depth)."""
    return _rule(kind, at, (r, r), "radial", color, 0, label)


def fixed(kind: str, at: Tuple[float, float], w: float, d: Optional[float] = None, color: str = "wood",
          rotation: int = 0, label: Optional[str] = None) -> PlacementRule:
    """Size in meters, independent of the room."""
    return _rule(kind, at, (w, w if d is None else d), "fixed", color, rotation, label)


def _rule(kind, at, size, mode, color, rotation, label) -> PlacementRule:
    # "accent" / "wood" name a colour source, anything else is a literal colour
    if color in ("accent", "wood"):
        source, value = color, None
    else:
        source, value = "fixed", color
    return PlacementRule(
        item_kind=kind,
        offset=at,
        size=size,
        size_mode=mode,
        rotation=rotation,
        color_source=source,
        color=value,
        label=label,
    )
