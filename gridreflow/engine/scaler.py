"""
Row-Proportional Scaler

Rescales an arrangement from one column count to another, one row at a
time. Widths are scaled proportionally and widgets are packed left to right
within their row. Two anchoring rules keep rows that touched the right edge
flush with the right edge of the target grid, so rounding never leaves a
gap or an overflow at the end of a full row.
"""

import logging
import math
from typing import Dict, List

from ..layout.abstraction import WidgetPlacement

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def group_rows(items: List[WidgetPlacement]) -> Dict[int, List[WidgetPlacement]]:
    """
    Group placements into rows keyed by identical y.

    Rows come back in ascending y order and each row is sorted by x.
    """
    rows: Dict[int, List[WidgetPlacement]] = {}
    for item in sorted(items, key=lambda i: i.position_key):
        rows.setdefault(item.y, []).append(item)
    return rows


def scale_rows(items: List[WidgetPlacement], source_columns: int,
               target_columns: int) -> List[WidgetPlacement]:
    """
    Scale placements from source_columns to target_columns row by row.

    For each row a cursor starts at column 0. Every widget gets a
    proportionally scaled width of at least one column and is placed at the
    cursor, which then advances by that width:

    - If the row spanned the whole source width, its last widget takes
      every remaining target column.
    - Otherwise, a widget that touched the right edge of the source grid
      takes every remaining target column.
    - Otherwise the width is clamped to the remaining columns.

    Args:
        items: Placements on the source grid
        source_columns: Column count of the source grid
        target_columns: Column count of the target grid

    Returns:
        New placement copies in (y, x) order; inputs are not modified.
    """
    if source_columns == target_columns:
        return [item.copy() for item in items]

    scaled: List[WidgetPlacement] = []

    for y, row in group_rows(items).items():
        first = row[0]
        last = row[-1]
        row_fills_width = first.x == 0 and last.right == source_columns

        cursor = 0
        for index, item in enumerate(row):
            is_last_in_row = index == len(row) - 1
            remaining = target_columns - cursor

            new_w = max(1, round_half_up(item.w / source_columns * target_columns))

            if row_fills_width and is_last_in_row:
                new_w = remaining
            elif item.right == source_columns:
                # Anchored to the right edge even though the row has gaps
                new_w = remaining
            else:
                new_w = min(new_w, remaining)

            # A crowded row can run out of columns; the widget keeps one
            # column and is pushed past the edge for the position search
            new_w = max(1, new_w)

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Scale %s row=%d: (x=%d w=%d)/%d -> (x=%d w=%d)/%d",
                    item.id, y, item.x, item.w, source_columns,
                    cursor, new_w, target_columns,
                )

            scaled.append(item.copy(x=cursor, y=y, w=new_w))
            cursor += new_w

    return scaled
