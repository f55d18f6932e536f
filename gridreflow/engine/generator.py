"""
Breakpoint Layout Generator

Derives one breakpoint's arrangement from a source arrangement:

1. Row scaling - proportional widths with right-edge anchoring
2. Re-sort - reading order (y, then x) on the target grid
3. Collision resolution - best-position search on a fresh occupancy grid

Widgets earlier in reading order keep priority: each resolved placement is
occupied before the next widget is searched.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from ..layout.abstraction import GridArrangement, WidgetPlacement
from .occupancy import DEFAULT_MAX_ROWS, OccupancyGrid
from .scaler import scale_rows
from .search import SearchStrategy, find_best_position

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for breakpoint generation."""
    max_rows: int = DEFAULT_MAX_ROWS  # occupancy grid height


@dataclass
class GenerationResult:
    """Result of one breakpoint generation pass."""
    arrangement: GridArrangement
    displaced: int = 0  # widgets moved away from their scaled position
    fallbacks: List[str] = field(default_factory=list)  # widget ids placed by the exhaustion fallback

    @property
    def exhausted(self) -> bool:
        """True if any widget had to use the overlap-prone fallback."""
        return bool(self.fallbacks)


class BreakpointLayoutGenerator:
    """
    Generates a collision-free arrangement for a target column count.

    Lock state is passed in explicitly and stamped onto every generated
    placement, so derived views never depend on geometry carrying the flag.
    """

    def __init__(self, target_columns: int, config: Optional[GeneratorConfig] = None,
                 lock_state: Optional[Mapping[str, bool]] = None):
        """
        Initialize the generator.

        Args:
            target_columns: Column count of the breakpoint being generated
            config: Generator configuration
            lock_state: Map of widget id to locked flag. Widgets missing from
                        the map are treated as unlocked.
        """
        self.target_columns = target_columns
        self.config = config or GeneratorConfig()
        self.lock_state = dict(lock_state) if lock_state is not None else {}

    def generate(self, source: GridArrangement) -> GenerationResult:
        """
        Run scaling and collision resolution against a source arrangement.

        The source is not modified.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generate start: widgets=%d columns %d -> %d max_rows=%d locked=%d",
                len(source),
                source.columns,
                self.target_columns,
                self.config.max_rows,
                sum(1 for locked in self.lock_state.values() if locked),
            )

        scaled = scale_rows(source.items, source.columns, self.target_columns)
        scaled.sort(key=lambda item: item.position_key)

        grid = OccupancyGrid(columns=self.target_columns, max_rows=self.config.max_rows)
        result = GenerationResult(arrangement=GridArrangement(columns=self.target_columns))

        for item in scaled:
            placed = self._resolve(grid, item, result)
            result.arrangement.add(placed)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generate done: columns=%d displaced=%d fallbacks=%d",
                self.target_columns,
                result.displaced,
                len(result.fallbacks),
            )
        return result

    def _resolve(self, grid: OccupancyGrid, item: WidgetPlacement,
                 result: GenerationResult) -> WidgetPlacement:
        """Find, occupy and stamp the final placement for one scaled widget."""
        found = find_best_position(grid, item.x, item.y, item.w, item.h, widget_id=item.id)
        grid.occupy(found.x, found.y, item.w, item.h)

        if found.displaced:
            result.displaced += 1
            if found.strategy == SearchStrategy.FALLBACK:
                result.fallbacks.append(item.id)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Displace %s: (%d, %d) -> (%d, %d) via %s",
                    item.id, item.x, item.y, found.x, found.y, found.strategy.value,
                )

        locked = self.lock_state.get(item.id, False)
        return item.copy(x=found.x, y=found.y, locked=locked, static=locked)


def generate_breakpoint_layout(
    source: GridArrangement,
    target_columns: int,
    lock_state: Optional[Mapping[str, bool]] = None,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> GridArrangement:
    """
    Convenience function to derive one breakpoint's arrangement.

    Args:
        source: Arrangement to derive from (usually the canonical one)
        target_columns: Column count of the target breakpoint
        lock_state: Map of widget id to locked flag (defaults to the
                    source's own locked flags)
        max_rows: Occupancy grid height

    Returns:
        The derived GridArrangement
    """
    if lock_state is None:
        lock_state = source.lock_map()
    generator = BreakpointLayoutGenerator(
        target_columns,
        config=GeneratorConfig(max_rows=max_rows),
        lock_state=lock_state,
    )
    return generator.generate(source).arrangement
