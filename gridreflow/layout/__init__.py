"""Grid-cell data model, size presets, editing and arrangement persistence."""

from .abstraction import GridArrangement, WidgetPlacement, DEFAULT_MIN_W, DEFAULT_MIN_H
from .presets import SizePreset, SIZE_PRESETS, get_size_preset, list_size_presets, size_from_dimensions
from .editor import (
    next_position,
    add_widget,
    remove_widget,
    move_widget,
    resize_widget,
    set_locked,
    duplicate_widget,
)
from .arrangement_file import (
    ArrangementFile,
    parse_arrangement_file,
    write_arrangement_file,
)

__all__ = [
    # Core abstractions
    "GridArrangement",
    "WidgetPlacement",
    "DEFAULT_MIN_W",
    "DEFAULT_MIN_H",
    # Size presets
    "SizePreset",
    "SIZE_PRESETS",
    "get_size_preset",
    "list_size_presets",
    "size_from_dimensions",
    # Editing
    "next_position",
    "add_widget",
    "remove_widget",
    "move_widget",
    "resize_widget",
    "set_locked",
    "duplicate_widget",
    # Persistence
    "ArrangementFile",
    "parse_arrangement_file",
    "write_arrangement_file",
]
