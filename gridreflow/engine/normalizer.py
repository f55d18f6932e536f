"""
Reverse Normalizer

Maps an arrangement edited at a smaller breakpoint back onto the canonical
grid so the edit can be stored. Columns and widths are scaled; rows and
heights pass through because row height does not depend on the breakpoint.
"""

import logging
from typing import Optional

from ..breakpoints.profiles import BreakpointSet, get_breakpoints
from ..layout.abstraction import GridArrangement
from .occupancy import DEFAULT_MAX_ROWS, OccupancyGrid
from .scaler import round_half_up
from .search import find_best_position

logger = logging.getLogger(__name__)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def normalize_columns(arrangement: GridArrangement, canonical_columns: int) -> GridArrangement:
    """
    Rescale an arrangement's columns to canonical_columns.

    No collision resolution is performed: two widgets that sat side by side
    on the small grid can overlap after rounding on the canonical grid.
    """
    source_columns = arrangement.columns
    if source_columns == canonical_columns:
        return arrangement.copy()

    normalized = GridArrangement(columns=canonical_columns)
    for item in arrangement:
        new_w = round_half_up(item.w / source_columns * canonical_columns)
        new_w = _clamp(new_w, 1, canonical_columns)

        new_x = round_half_up(item.x / source_columns * canonical_columns)
        new_x = _clamp(new_x, 0, canonical_columns - new_w)

        normalized.add(item.copy(x=new_x, w=new_w))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Normalized %d widgets: columns %d -> %d",
            len(normalized), source_columns, canonical_columns,
        )
    return normalized


def normalize_to_canonical(
    arrangement: GridArrangement,
    source_breakpoint: Optional[str] = None,
    breakpoints: Optional[BreakpointSet] = None,
) -> GridArrangement:
    """
    Convert an arrangement edited at a breakpoint back to canonical columns.

    Args:
        arrangement: The edited arrangement
        source_breakpoint: Name of the breakpoint the edit was made at. If
                           None, the arrangement's own column count is used.
        breakpoints: Breakpoint set (defaults to the configured set)

    Raises:
        ValueError: If source_breakpoint is not a known breakpoint
    """
    breakpoints = breakpoints or get_breakpoints()

    if source_breakpoint is not None:
        source_columns = breakpoints.columns_for(source_breakpoint)
        if source_columns != arrangement.columns:
            arrangement = GridArrangement(columns=source_columns, items=arrangement.items)

    return normalize_columns(arrangement, breakpoints.canonical.columns)


def normalize_and_resolve(
    arrangement: GridArrangement,
    source_breakpoint: Optional[str] = None,
    breakpoints: Optional[BreakpointSet] = None,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> GridArrangement:
    """
    Normalize to canonical columns, then move only the widgets that collide.

    This is the form to persist. Without overlap the normalized arrangement
    is returned as is, vertical gaps included. Otherwise widgets are placed
    on an occupancy grid in reading order: one whose normalized footprint is
    still free keeps it, one that would overlap an earlier widget goes
    through the best-position search.
    """
    normalized = normalize_to_canonical(arrangement, source_breakpoint, breakpoints)
    overlaps = normalized.find_overlaps()
    if not overlaps:
        return normalized

    logger.debug("Normalization produced %d overlap(s); resolving", len(overlaps))

    grid = OccupancyGrid(columns=normalized.columns, max_rows=max_rows)
    placed = []
    for item in normalized.sorted_by_position():
        found = find_best_position(grid, item.x, item.y, item.w, item.h, widget_id=item.id)
        grid.occupy(found.x, found.y, item.w, item.h)
        if found.displaced:
            logger.debug("Resolve %s: (%d, %d) -> %s", item.id, item.x, item.y, found.position)
        x, y = found.position
        placed.append(item.copy(x=x, y=y))

    placed.sort(key=lambda i: i.position_key)
    return GridArrangement(columns=normalized.columns, items=placed)
