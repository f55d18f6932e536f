"""
gridreflow - Responsive Grid Layout Engine

Derives non-overlapping dashboard arrangements for every viewport
breakpoint from a single stored (canonical) arrangement, and maps edits
made at smaller breakpoints back onto the canonical grid.
"""

__version__ = "0.1.0"

from .layout.abstraction import GridArrangement, WidgetPlacement
from .breakpoints.profiles import BreakpointProfile, BreakpointSet, get_breakpoints
from .engine.responsive import ResponsiveLayouts, generate_responsive_layouts
from .engine.normalizer import normalize_to_canonical, normalize_and_resolve
from .engine.compactor import compact_layout
from .engine.organizer import organize_arrangement
from .validation.checker import LayoutViolation, validate_arrangement

__all__ = [
    "GridArrangement",
    "WidgetPlacement",
    "BreakpointProfile",
    "BreakpointSet",
    "get_breakpoints",
    "ResponsiveLayouts",
    "generate_responsive_layouts",
    "normalize_to_canonical",
    "normalize_and_resolve",
    "compact_layout",
    "organize_arrangement",
    "LayoutViolation",
    "validate_arrangement",
]
