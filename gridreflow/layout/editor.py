"""
Canonical Arrangement Editing

User-driven mutations of the stored (canonical) arrangement: add, remove,
move, resize, lock and duplicate widgets. These operate in place on the
arrangement; derived breakpoints are regenerated from it afterwards.
"""

import logging
from typing import Optional, Tuple

from .abstraction import GridArrangement, WidgetPlacement
from .presets import get_size_preset

logger = logging.getLogger(__name__)


def _require(arrangement: GridArrangement, widget_id: str) -> WidgetPlacement:
    item = arrangement.get(widget_id)
    if item is None:
        raise KeyError(f"Unknown widget '{widget_id}'")
    return item


def next_position(arrangement: GridArrangement, w: int = 1) -> Tuple[int, int]:
    """
    Position for a newly added widget: column 0 of the first row below
    every existing widget.
    """
    if not arrangement.items:
        return (0, 0)
    y = arrangement.max_row()
    if w > arrangement.columns:
        y += 1
    return (0, y)


def add_widget(
    arrangement: GridArrangement,
    widget_id: str,
    size: str = "medium",
    x: Optional[int] = None,
    y: Optional[int] = None,
    locked: bool = False,
) -> WidgetPlacement:
    """
    Add a widget using a named size preset.

    The widget goes to the explicit (x, y) when given, otherwise below
    everything else.

    Raises:
        ValueError: If the id is already used or the size preset is unknown
    """
    if arrangement.get(widget_id) is not None:
        raise ValueError(f"Widget '{widget_id}' already exists")

    preset = get_size_preset(size)
    # A preset wider than the grid starts one row lower, then shrinks to fit
    default_x, default_y = next_position(arrangement, preset.w)
    w = min(preset.w, arrangement.columns)

    placement = WidgetPlacement(
        id=widget_id,
        x=default_x if x is None else x,
        y=default_y if y is None else y,
        w=w,
        h=preset.h,
        min_w=preset.min_w,
        min_h=preset.min_h,
        locked=locked,
        static=locked,
    )
    arrangement.add(placement)
    logger.debug("Added %s (%s) at (%d, %d)", widget_id, size, placement.x, placement.y)
    return placement


def remove_widget(arrangement: GridArrangement, widget_id: str) -> WidgetPlacement:
    """Remove a widget. Raises KeyError for unknown ids."""
    _require(arrangement, widget_id)
    return arrangement.remove(widget_id)


def move_widget(arrangement: GridArrangement, widget_id: str, x: int, y: int) -> WidgetPlacement:
    """Move a widget, clamping it inside the grid."""
    item = _require(arrangement, widget_id)
    item.x = max(0, min(x, arrangement.columns - item.w))
    item.y = max(0, y)
    return item


def resize_widget(arrangement: GridArrangement, widget_id: str, w: int, h: int) -> WidgetPlacement:
    """
    Resize a widget.

    The new size is clamped to the widget's minimums and to the grid
    width; the widget shifts left if it would overflow the right edge.
    """
    item = _require(arrangement, widget_id)
    item.w = max(item.min_w, 1, min(w, arrangement.columns))
    item.h = max(item.min_h, 1, h)
    if item.right > arrangement.columns:
        item.x = arrangement.columns - item.w
    return item


def set_locked(arrangement: GridArrangement, widget_id: str, locked: bool = True) -> WidgetPlacement:
    """Lock or unlock a widget."""
    item = _require(arrangement, widget_id)
    item.locked = locked
    item.static = locked
    return item


def duplicate_widget(arrangement: GridArrangement, widget_id: str, new_id: str) -> WidgetPlacement:
    """
    Copy a widget directly below its source. The copy is never locked.

    Raises:
        KeyError: If the source widget is unknown
        ValueError: If new_id is already used
    """
    source = _require(arrangement, widget_id)
    if arrangement.get(new_id) is not None:
        raise ValueError(f"Widget '{new_id}' already exists")

    copy = source.copy(id=new_id, y=source.bottom, locked=False, static=False)
    arrangement.add(copy)
    return copy
