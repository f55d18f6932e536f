"""Breakpoint profiles and their YAML configuration."""

from .profiles import (
    BreakpointProfile,
    BreakpointSet,
    DEFAULT_BREAKPOINTS,
    COMPACT_BREAKPOINTS,
    load_breakpoints,
    get_breakpoints,
    reload_breakpoints,
    get_breakpoint_set,
    list_breakpoint_sets,
)

__all__ = [
    "BreakpointProfile",
    "BreakpointSet",
    "DEFAULT_BREAKPOINTS",
    "COMPACT_BREAKPOINTS",
    "load_breakpoints",
    "get_breakpoints",
    "reload_breakpoints",
    "get_breakpoint_set",
    "list_breakpoint_sets",
]
