"""
Vertical Compactor

Closes vertical gaps in an arrangement, like a dashboard's "vertical"
compaction mode. Widgets are processed in reading order; each one floats
up as far as it can at its own column, and only if its column is blocked
all the way down to its current row does it get a top-left scan that may
change its column.
"""

import logging
from typing import List, Optional

from ..layout.abstraction import GridArrangement, WidgetPlacement
from .occupancy import DEFAULT_MAX_ROWS, OccupancyGrid
from .search import fallback_position, scan_top_left

logger = logging.getLogger(__name__)


def _float_up(grid: OccupancyGrid, item: WidgetPlacement) -> Optional[int]:
    """Highest free row at the item's own column, no lower than its current row."""
    for y in range(0, item.y + 1):
        if grid.can_place(item.x, y, item.w, item.h):
            return y
    return None


def compact_items(items: List[WidgetPlacement], columns: int,
                  max_rows: int = DEFAULT_MAX_ROWS) -> List[WidgetPlacement]:
    """
    Compact placements vertically.

    Returns new placement copies sorted by their compacted (y, x) position;
    inputs are not modified.
    """
    grid = OccupancyGrid(columns=columns, max_rows=max_rows)
    compacted: List[WidgetPlacement] = []

    for item in sorted(items, key=lambda i: i.position_key):
        x = item.x
        y = _float_up(grid, item)

        if y is None:
            found = scan_top_left(grid, item.w, item.h)
            if found is None:
                found = fallback_position(grid)
                logger.warning(
                    "Grid exhausted compacting %s (%dx%d); falling back to row %d",
                    item.id, item.w, item.h, found[1],
                )
            x, y = found

        if logger.isEnabledFor(logging.DEBUG) and (x, y) != (item.x, item.y):
            logger.debug("Compact %s: (%d, %d) -> (%d, %d)", item.id, item.x, item.y, x, y)

        grid.occupy(x, y, item.w, item.h)
        compacted.append(item.copy(x=x, y=y))

    compacted.sort(key=lambda i: i.position_key)
    return compacted


def compact_layout(arrangement: GridArrangement,
                   max_rows: int = DEFAULT_MAX_ROWS) -> GridArrangement:
    """
    Compact an arrangement vertically, removing empty rows and gaps.

    An arrangement that is already gap-free comes back unchanged.
    """
    return GridArrangement(
        columns=arrangement.columns,
        items=compact_items(arrangement.items, arrangement.columns, max_rows),
    )
