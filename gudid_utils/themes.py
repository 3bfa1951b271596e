# themes.py
"""
Painter styles: named color palettes for the dashboard, charts, and graph.

Presentation only. Nothing in the data pipeline reads these.
"""

import random
from typing import Dict, List, Optional

PAINTER_STYLES: List[Dict] = [
    {
        "name": "Van Gogh",
        "colors": {"primary": "#1E3A8A", "secondary": "#F59E0B", "accent": "#FACC15",
                   "bg": "#F8F4E3", "text": "#1F2937", "card": "#FFFDF5"},
    },
    {
        "name": "Monet",
        "colors": {"primary": "#6B8E9E", "secondary": "#A7C4A0", "accent": "#E8A1B0",
                   "bg": "#F3F7F6", "text": "#2F3E46", "card": "#FFFFFF"},
    },
    {
        "name": "Klimt",
        "colors": {"primary": "#B8860B", "secondary": "#8B5E3C", "accent": "#DAA520",
                   "bg": "#FBF6E9", "text": "#3B2F2F", "card": "#FFFBF0"},
    },
    {
        "name": "Hokusai",
        "colors": {"primary": "#1D4E89", "secondary": "#7FA7C9", "accent": "#E4572E",
                   "bg": "#F4F1EA", "text": "#14213D", "card": "#FFFFFF"},
    },
    {
        "name": "Mondrian",
        "colors": {"primary": "#D62828", "secondary": "#1D3557", "accent": "#FCBF49",
                   "bg": "#FFFFFF", "text": "#111111", "card": "#F8F8F8"},
    },
    {
        "name": "Frida Kahlo",
        "colors": {"primary": "#C2185B", "secondary": "#2E7D32", "accent": "#FF8F00",
                   "bg": "#FFF8F0", "text": "#3E2723", "card": "#FFFFFF"},
    },
    {
        "name": "Picasso Blue",
        "colors": {"primary": "#1B3B6F", "secondary": "#4B6C8F", "accent": "#9DB4C0",
                   "bg": "#EEF2F6", "text": "#0B1D33", "card": "#F9FBFD"},
    },
    {
        "name": "Turner",
        "colors": {"primary": "#C8553D", "secondary": "#F28F3B", "accent": "#FFD5C2",
                   "bg": "#FFF9F2", "text": "#3A2E2A", "card": "#FFFFFF"},
    },
]

DARK_OVERRIDES = {"bg": "#1a1a1a", "text": "#f0f0f0", "card": "#2d2d2d"}

STYLE_NAMES = [s["name"] for s in PAINTER_STYLES]


def get_style(name: str) -> Dict:
    """Look up a style by name; unknown names fall back to the first style."""
    for style in PAINTER_STYLES:
        if style["name"] == name:
            return style
    return PAINTER_STYLES[0]


def resolve_colors(style: Dict, dark: bool = False) -> Dict[str, str]:
    """Palette with dark-mode background/text/card overrides applied."""
    colors = dict(style["colors"])
    if dark:
        colors.update(DARK_OVERRIDES)
    return colors


def spin_jackpot(rng: Optional[random.Random] = None) -> Dict:
    """Pick a random style (the sidebar "jackpot" button)."""
    rng = rng or random.Random()
    return rng.choice(PAINTER_STYLES)
