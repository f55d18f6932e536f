"""
Best-Position Search

Finds a free spot for a widget footprint on an occupancy grid, in order of
preference:

1. the preferred cell itself
2. the same row, scanning columns from the left
3. every cell in row-major order (top-left priority)
4. grid exhausted: the first completely empty row, or row 0

The last step can overlap existing widgets. It is a soft degradation for
pathological inputs and is reported through the returned strategy.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .occupancy import OccupancyGrid

logger = logging.getLogger(__name__)


class SearchStrategy(Enum):
    """Which step of the search produced a position."""
    PREFERRED = "preferred"
    SAME_ROW = "same_row"
    SCAN = "scan"
    FALLBACK = "fallback"


@dataclass
class SearchResult:
    """Resolved position for one footprint."""
    x: int
    y: int
    strategy: SearchStrategy

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def displaced(self) -> bool:
        """True if the widget could not stay at its preferred cell."""
        return self.strategy != SearchStrategy.PREFERRED


def scan_top_left(grid: OccupancyGrid, w: int, h: int) -> Optional[Tuple[int, int]]:
    """Return the first free (x, y) in row-major order, or None if the grid is full."""
    for y in range(grid.max_rows):
        for x in range(grid.columns - w + 1):
            if grid.can_place(x, y, w, h):
                return (x, y)
    return None


def fallback_position(grid: OccupancyGrid) -> Tuple[int, int]:
    """Position used when no free footprint exists: first empty row, else row 0."""
    row = grid.first_empty_row()
    return (0, row if row is not None else 0)


def find_best_position(grid: OccupancyGrid, preferred_x: int, preferred_y: int,
                       w: int, h: int, widget_id: str = "") -> SearchResult:
    """
    Find the best free position for a w x h footprint.

    Args:
        grid: Occupancy grid of already placed widgets (not modified)
        preferred_x: Column the widget would like to keep
        preferred_y: Row the widget would like to keep
        w: Footprint width
        h: Footprint height
        widget_id: Used for log messages only

    Returns:
        SearchResult with the chosen position and the strategy that found it
    """
    if grid.can_place(preferred_x, preferred_y, w, h):
        return SearchResult(preferred_x, preferred_y, SearchStrategy.PREFERRED)

    for x in range(grid.columns - w + 1):
        if grid.can_place(x, preferred_y, w, h):
            return SearchResult(x, preferred_y, SearchStrategy.SAME_ROW)

    found = scan_top_left(grid, w, h)
    if found is not None:
        return SearchResult(found[0], found[1], SearchStrategy.SCAN)

    x, y = fallback_position(grid)
    logger.warning(
        "Grid exhausted placing %s (%dx%d) on %d columns x %d rows; "
        "falling back to row %d, overlap possible",
        widget_id or "<widget>", w, h, grid.columns, grid.max_rows, y,
    )
    return SearchResult(x, y, SearchStrategy.FALLBACK)
