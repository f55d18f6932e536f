"""Layout engine: occupancy, scaling, position search, breakpoint derivation and packing."""

from .occupancy import OccupancyGrid, DEFAULT_MAX_ROWS
from .scaler import scale_rows, group_rows, round_half_up
from .search import SearchStrategy, SearchResult, find_best_position
from .generator import (
    BreakpointLayoutGenerator,
    GeneratorConfig,
    GenerationResult,
    generate_breakpoint_layout,
)
from .responsive import ResponsiveLayouts, generate_responsive_layouts
from .normalizer import normalize_columns, normalize_to_canonical, normalize_and_resolve
from .compactor import compact_items, compact_layout
from .organizer import OrganizeSlot, organize_slots, organize_arrangement

__all__ = [
    "OccupancyGrid",
    "DEFAULT_MAX_ROWS",
    "scale_rows",
    "group_rows",
    "round_half_up",
    "SearchStrategy",
    "SearchResult",
    "find_best_position",
    "BreakpointLayoutGenerator",
    "GeneratorConfig",
    "GenerationResult",
    "generate_breakpoint_layout",
    "ResponsiveLayouts",
    "generate_responsive_layouts",
    "normalize_columns",
    "normalize_to_canonical",
    "normalize_and_resolve",
    "compact_items",
    "compact_layout",
    "OrganizeSlot",
    "organize_slots",
    "organize_arrangement",
]
