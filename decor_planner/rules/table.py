from __future__ import annotations
from typing import List, Tuple

from ..models import PlacementRule
from .registry import RULE_REGISTRY
# importing the tables populates RULE_REGISTRY
from . import decor, furniture  # noqa: F401


def rules_for(room_type: str, layer: str) -> Tuple[PlacementRule, ...]:
    """Authored rules for (room type, layer) in paint order; () when there is no entry."""
    return RULE_REGISTRY.get((room_type, layer), ())


def registered_pairs() -> List[Tuple[str, str]]:
    return sorted(RULE_REGISTRY.keys())
