from __future__ import annotations
from typing import Dict, List, Optional, Sequence

FALLBACK_ACCENT = "#7c9eb2"

# style -> wood tone; everything not listed falls back to mid brown
WOOD_TONES: Dict[str, str] = {
    "rustic": "#8b4513",
    "modern": "#2a2a2a",
}
DEFAULT_WOOD_TONE = "#5c4033"

DESIGN_STYLES: List[Dict[str, str]] = [
    {"id": "modern", "name": "Modern", "description": "Clean lines, neutral colors, contemporary feel"},
    {"id": "minimal", "name": "Minimalist", "description": "Simple, functional, clutter-free spaces"},
    {"id": "luxury", "name": "Luxury", "description": "Premium materials, rich textures, opulent finishes"},
    {"id": "rustic", "name": "Rustic", "description": "Natural wood, warm earth tones, cozy farmhouse"},
    {"id": "scandinavian", "name": "Scandinavian", "description": "Light woods, functional beauty, hygge comfort"},
    {"id": "industrial", "name": "Industrial", "description": "Raw metal, exposed elements, urban loft"},
    {"id": "bohemian", "name": "Bohemian", "description": "Eclectic patterns, global influences, artistic"},
    {"id": "contemporary", "name": "Contemporary", "description": "Current trends, balanced proportions"},
]

STYLE_PALETTES: Dict[str, List[str]] = {
    "modern": ["#1a1a1a", "#ffffff", "#808080", "#4a90d9"],
    "minimal": ["#ffffff", "#f5f5f5", "#e0e0e0", "#1a1a1a"],
    "luxury": ["#1a1a2e", "#d4af37", "#8b0000", "#4a0080"],
    "rustic": ["#8b4513", "#deb887", "#2e8b57", "#d2691e"],
    "scandinavian": ["#f5f5f5", "#e8dcc8", "#87ceeb", "#2f4f4f"],
    "industrial": ["#374151", "#d97706", "#1f2937", "#9ca3af"],
    "bohemian": ["#7c3aed", "#ec4899", "#f59e0b", "#10b981"],
    "contemporary": ["#1e293b", "#3b82f6", "#f43f5e", "#22d3ee"],
}


def wood_tone(style: Optional[str]) -> str:
    """Wood-textured fallback colour for a design style. Never fails."""
    return WOOD_TONES.get((style or "").lower(), DEFAULT_WOOD_TONE)


def accent_color(palette: Optional[Sequence[str]]) -> str:
    """Third palette entry, or the fixed fallback accent for short palettes."""
    if palette and len(palette) > 2 and palette[2]:
        return palette[2]
    return FALLBACK_ACCENT


def style_palette(style: Optional[str]) -> List[str]:
    return list(STYLE_PALETTES.get((style or "").lower(), STYLE_PALETTES["modern"]))


def styles_with_palettes() -> List[Dict[str, object]]:
    return [{**s, "palette": style_palette(s["id"])} for s in DESIGN_STYLES]
