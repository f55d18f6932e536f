"""Occupancy grid for cell-level collision detection.

A dense boolean matrix of ``max_rows x columns`` cells. Layout passes mark
cells as they place widgets and query footprints before placing the next
one. There is deliberately no way to free a cell: one grid serves exactly
one pass and is thrown away afterwards.
"""

from dataclasses import dataclass, field
from typing import List, Optional

# Practical ceiling on grid height, not an architectural limit
DEFAULT_MAX_ROWS = 100


@dataclass
class OccupancyGrid:
    """Boolean occupancy matrix for one layout pass.

    Rows are indexed first: ``cells[y][x]``.
    """
    columns: int
    max_rows: int = DEFAULT_MAX_ROWS
    cells: List[List[bool]] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.cells:
            self.cells = [[False] * self.columns for _ in range(self.max_rows)]

    def in_bounds(self, x: int, y: int, w: int, h: int) -> bool:
        """Check if a footprint lies entirely inside the grid."""
        if x < 0 or x + w > self.columns:
            return False
        if y < 0 or y + h > self.max_rows:
            return False
        return True

    def can_place(self, x: int, y: int, w: int, h: int) -> bool:
        """Check if a footprint is inside the grid and touches no taken cell."""
        if not self.in_bounds(x, y, w, h):
            return False
        for row in self.cells[y:y + h]:
            if any(row[x:x + w]):
                return False
        return True

    def occupy(self, x: int, y: int, w: int, h: int):
        """Mark every in-bounds cell of a footprint as taken."""
        for cy in range(max(y, 0), min(y + h, self.max_rows)):
            row = self.cells[cy]
            for cx in range(max(x, 0), min(x + w, self.columns)):
                row[cx] = True

    def is_occupied(self, x: int, y: int) -> bool:
        """Check a single cell (out-of-bounds cells read as free)."""
        if 0 <= y < self.max_rows and 0 <= x < self.columns:
            return self.cells[y][x]
        return False

    def first_empty_row(self) -> Optional[int]:
        """Index of the first row with no taken cell, or None if every row is used."""
        for y, row in enumerate(self.cells):
            if not any(row):
                return y
        return None

    @property
    def occupied_count(self) -> int:
        """Number of taken cells."""
        return sum(sum(row) for row in self.cells)
