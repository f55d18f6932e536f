"""
Auto-Organizer

Rearranges a whole arrangement into evenly sized slots. The slot sizes
depend only on how many widgets there are: fixed patterns for up to twelve
widgets, rows of even width beyond that. Slots are handed out in order and
each one is packed top-left on a fresh occupancy grid.

Slot patterns are laid out for a 12-column grid; on narrower grids a slot
is clamped to the column count.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..layout.abstraction import GridArrangement, WidgetPlacement
from ..layout.presets import get_size_preset
from .occupancy import DEFAULT_MAX_ROWS, OccupancyGrid
from .search import fallback_position, scan_top_left

logger = logging.getLogger(__name__)

PATTERN_COLUMNS = 12


@dataclass(frozen=True)
class OrganizeSlot:
    """Footprint and size preset assigned to one organized widget."""
    w: int
    h: int
    size: str


_LARGE = OrganizeSlot(6, 4, "large")
_WIDE = OrganizeSlot(6, 3, "wide")
_SHORT_WIDE = OrganizeSlot(6, 2, "wide")
_THIRD = OrganizeSlot(4, 3, "medium")
_QUARTER = OrganizeSlot(3, 3, "medium")

SLOT_PATTERNS: Dict[int, List[OrganizeSlot]] = {
    1: [_LARGE],
    2: [_WIDE] * 2,
    3: [_THIRD] * 3,
    4: [_WIDE] * 4,
    5: [_THIRD] * 3 + [_WIDE] * 2,
    6: [_THIRD] * 6,
    7: [_THIRD] * 3 + [_QUARTER] * 4,
    8: [_QUARTER] * 8,
    9: [_THIRD] * 9,
    10: [_THIRD] * 6 + [_QUARTER] * 4,
    11: [_THIRD] * 9 + [_SHORT_WIDE] * 2,
    12: [_QUARTER] * 12,
}


def organize_slots(count: int, columns: int = PATTERN_COLUMNS) -> List[OrganizeSlot]:
    """
    Slot sizes for a given number of widgets.

    Counts with a fixed pattern use it; larger counts get rows of at most
    four widgets sharing the columns evenly.
    """
    if count <= 0:
        return []

    if count in SLOT_PATTERNS:
        slots = SLOT_PATTERNS[count]
    else:
        rows = math.ceil(count / 4)
        per_row = math.ceil(count / rows)
        slots = [OrganizeSlot(PATTERN_COLUMNS // per_row, 3, "medium")] * count

    if columns == PATTERN_COLUMNS:
        return list(slots)
    return [OrganizeSlot(max(1, min(s.w, columns)), s.h, s.size) for s in slots]


def _ordered(arrangement: GridArrangement,
             order: Optional[Sequence[str]]) -> List[WidgetPlacement]:
    """Widgets named in order first, the rest in reading order."""
    if order is None:
        return arrangement.sorted_by_position()

    first = []
    for widget_id in order:
        item = arrangement.get(widget_id)
        if item is None:
            raise KeyError(f"Unknown widget '{widget_id}'")
        first.append(item)

    named = set(order)
    rest = [item for item in arrangement.sorted_by_position() if item.id not in named]
    return first + rest


def organize_arrangement(
    arrangement: GridArrangement,
    order: Optional[Sequence[str]] = None,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> GridArrangement:
    """
    Rebuild an arrangement with harmonious slot sizes, packed top-left.

    Args:
        arrangement: Arrangement to organize (not modified)
        order: Widget ids that should get the first slots. Widgets not
               listed follow in reading order.
        max_rows: Occupancy grid height

    Returns:
        New arrangement. Every widget gets its slot's footprint and the
        minimum size of the slot's preset; lock flags are kept.

    Raises:
        KeyError: If order names an unknown widget
    """
    columns = arrangement.columns
    widgets = _ordered(arrangement, order)
    slots = organize_slots(len(widgets), columns)

    grid = OccupancyGrid(columns=columns, max_rows=max_rows)
    placed = []

    for item, slot in zip(widgets, slots):
        found = scan_top_left(grid, slot.w, slot.h)
        if found is None:
            found = fallback_position(grid)
            logger.warning(
                "Grid exhausted organizing %s (%dx%d); falling back to row %d",
                item.id, slot.w, slot.h, found[1],
            )
        x, y = found
        grid.occupy(x, y, slot.w, slot.h)

        preset = get_size_preset(slot.size)
        placed.append(item.copy(
            x=x, y=y, w=slot.w, h=slot.h,
            min_w=min(preset.min_w, slot.w), min_h=min(preset.min_h, slot.h),
        ))

    logger.debug("Organized %d widgets on %d columns", len(placed), columns)
    return GridArrangement(columns=columns, items=placed)
