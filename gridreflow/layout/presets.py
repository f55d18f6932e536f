"""
Widget Size Presets

Named widget footprints on the canonical grid. New widgets pick their
initial width/height and resize minimums from one of these presets.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class SizePreset:
    """Footprint and resize minimums for a named widget size."""
    name: str
    w: int
    h: int
    min_w: int
    min_h: int


SMALL = SizePreset(name="small", w=1, h=2, min_w=1, min_h=2)
MEDIUM = SizePreset(name="medium", w=2, h=3, min_w=1, min_h=2)
LARGE = SizePreset(name="large", w=2, h=4, min_w=2, min_h=3)
WIDE = SizePreset(name="wide", w=3, h=2, min_w=2, min_h=2)
TALL = SizePreset(name="tall", w=1, h=4, min_w=1, min_h=3)

# Preset registry
SIZE_PRESETS: Dict[str, SizePreset] = {
    "small": SMALL,
    "medium": MEDIUM,
    "large": LARGE,
    "wide": WIDE,
    "tall": TALL,
}


def get_size_preset(name: str) -> SizePreset:
    """
    Get a size preset by name.

    Raises:
        ValueError: If the preset name is not found
    """
    if name not in SIZE_PRESETS:
        available = ", ".join(sorted(SIZE_PRESETS.keys()))
        raise ValueError(f"Unknown size preset '{name}'. Available: {available}")
    return SIZE_PRESETS[name]


def list_size_presets() -> List[str]:
    """List all available size preset names."""
    return sorted(SIZE_PRESETS.keys())


def size_from_dimensions(w: int, h: int) -> str:
    """Find the preset name closest to the given footprint."""
    if w == 1 and h <= 2:
        return "small"
    if w == 1 and h >= 4:
        return "tall"
    if w >= 3 and h <= 2:
        return "wide"
    if w >= 2 and h >= 4:
        return "large"
    return "medium"
