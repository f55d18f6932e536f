"""
Multi-Breakpoint Orchestrator

Builds the full set of derived arrangements for a dashboard. The canonical
breakpoint passes through untouched; every other breakpoint is generated
straight from the canonical arrangement, never from another derived one.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..breakpoints.profiles import BreakpointProfile, BreakpointSet, get_breakpoints
from ..layout.abstraction import GridArrangement
from .generator import BreakpointLayoutGenerator, GenerationResult, GeneratorConfig

logger = logging.getLogger(__name__)


@dataclass
class ResponsiveLayouts:
    """Derived arrangements keyed by breakpoint name."""
    breakpoints: BreakpointSet
    layouts: Dict[str, GridArrangement] = field(default_factory=dict)
    results: Dict[str, GenerationResult] = field(default_factory=dict)

    def __getitem__(self, name: str) -> GridArrangement:
        return self.layouts[name]

    def __contains__(self, name: str) -> bool:
        return name in self.layouts

    def __iter__(self) -> Iterator[str]:
        return iter(self.layouts)

    def __len__(self) -> int:
        return len(self.layouts)

    def get(self, name: str) -> Optional[GridArrangement]:
        return self.layouts.get(name)

    def for_width(self, viewport_width: float) -> GridArrangement:
        """Arrangement for the breakpoint active at a viewport width."""
        return self.layouts[self.breakpoints.for_width(viewport_width).name]

    @property
    def fallbacks(self) -> Dict[str, List[str]]:
        """Widget ids that hit the exhaustion fallback, per breakpoint."""
        return {name: r.fallbacks for name, r in self.results.items() if r.fallbacks}

    def to_dict(self) -> Dict[str, List[dict]]:
        """Convert to the react-grid-layout ``layouts`` shape."""
        return {name: layout.to_dicts() for name, layout in self.layouts.items()}


def _canonical_view(canonical: GridArrangement) -> GridArrangement:
    view = canonical.copy()
    for item in view:
        item.static = item.locked
    return view


def generate_responsive_layouts(
    canonical: GridArrangement,
    breakpoints: Optional[BreakpointSet] = None,
    config: Optional[GeneratorConfig] = None,
) -> ResponsiveLayouts:
    """
    Generate arrangements for every configured breakpoint.

    Args:
        canonical: Stored arrangement at the canonical (widest) breakpoint
        breakpoints: Breakpoint set to generate for (defaults to the
                     configured set)
        config: Generator configuration shared by every breakpoint

    Returns:
        ResponsiveLayouts mapping each breakpoint name to its arrangement.
        Every placement has ``static`` set from the canonical ``locked`` flag.
    """
    breakpoints = breakpoints or get_breakpoints()
    lock_state = canonical.lock_map()
    responsive = ResponsiveLayouts(breakpoints=breakpoints)

    if canonical.columns != breakpoints.canonical.columns:
        logger.debug(
            "Canonical arrangement has %d columns but breakpoint '%s' has %d",
            canonical.columns, breakpoints.canonical.name, breakpoints.canonical.columns,
        )

    for profile in breakpoints:
        responsive.layouts[profile.name] = _derive(canonical, profile, lock_state,
                                                   config, responsive)

    return responsive


def _derive(canonical: GridArrangement, profile: BreakpointProfile, lock_state: Dict[str, bool],
            config: Optional[GeneratorConfig], responsive: ResponsiveLayouts) -> GridArrangement:
    if profile.columns == canonical.columns:
        return _canonical_view(canonical)

    generator = BreakpointLayoutGenerator(profile.columns, config=config, lock_state=lock_state)
    result = generator.generate(canonical)
    responsive.results[profile.name] = result

    if result.exhausted:
        logger.warning(
            "Breakpoint '%s' ran out of grid rows for %d widget(s): %s",
            profile.name, len(result.fallbacks), ", ".join(result.fallbacks),
        )
    return result.arrangement
