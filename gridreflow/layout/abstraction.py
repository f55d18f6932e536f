"""
Layout Abstraction Layer

Provides the grid-cell data model shared by every part of the engine:
individual widget placements and the ordered arrangement that holds them
for one breakpoint. Everything here is expressed in abstract grid cells,
never pixels.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

# Defaults used by the dashboard when a widget carries no explicit minimums
DEFAULT_MIN_W = 1
DEFAULT_MIN_H = 2


@dataclass
class WidgetPlacement:
    """Represents one widget rectangle on the grid."""
    id: str
    x: int = 0  # column of the left edge
    y: int = 0  # row of the top edge
    w: int = 1  # width in columns
    h: int = 1  # height in rows

    min_w: int = DEFAULT_MIN_W
    min_h: int = DEFAULT_MIN_H

    # locked is the persisted user flag, static is what derived views expose
    locked: bool = False
    static: bool = False

    @property
    def right(self) -> int:
        """Column just past the right edge (x + w)."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge (y + h)."""
        return self.y + self.h

    @property
    def position_key(self) -> Tuple[int, int]:
        """Reading-order sort key (row first, then column)."""
        return (self.y, self.x)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate the (x, y) cells covered by this placement."""
        for cy in range(self.y, self.bottom):
            for cx in range(self.x, self.right):
                yield (cx, cy)

    def overlaps(self, other: "WidgetPlacement") -> bool:
        """Check if the cell rectangles of two placements intersect."""
        return not (self.right <= other.x or other.right <= self.x or
                    self.bottom <= other.y or other.bottom <= self.y)

    def fits(self, columns: int) -> bool:
        """Check if the placement lies inside a grid with the given columns."""
        return self.x >= 0 and self.y >= 0 and self.right <= columns

    def copy(self, **changes) -> "WidgetPlacement":
        """Return a shallow copy with optional field overrides."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the react-grid-layout item shape."""
        return {
            "i": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "minW": self.min_w,
            "minH": self.min_h,
            "static": self.static,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WidgetPlacement":
        """
        Create from a dictionary.

        Accepts both the react-grid-layout shape (``i``, ``minW``, ``static``)
        and the stored widget shape (``id``, ``min_w``, ``locked``).
        """
        widget_id = data.get("id", data.get("i"))
        if widget_id is None:
            raise ValueError(f"Widget placement has no id: {data!r}")

        locked = bool(data.get("locked", data.get("isLocked", data.get("static", False))))
        return cls(
            id=str(widget_id),
            x=int(data.get("x", 0)),
            y=int(data.get("y", 0)),
            w=int(data.get("w", 1)),
            h=int(data.get("h", 1)),
            min_w=int(data.get("min_w", data.get("minW", DEFAULT_MIN_W))),
            min_h=int(data.get("min_h", data.get("minH", DEFAULT_MIN_H))),
            locked=locked,
            static=bool(data.get("static", locked)),
        )


@dataclass
class GridArrangement:
    """
    Ordered collection of widget placements for one breakpoint.

    The arrangement owns its column count so that every routine working on
    it knows the grid extents without a separate argument.
    """
    columns: int
    items: List[WidgetPlacement] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WidgetPlacement]:
        return iter(self.items)

    # --- Item Management ---

    def get(self, widget_id: str) -> Optional[WidgetPlacement]:
        """Get a placement by widget id."""
        for item in self.items:
            if item.id == widget_id:
                return item
        return None

    def add(self, placement: WidgetPlacement):
        """Append a placement."""
        self.items.append(placement)

    def remove(self, widget_id: str) -> Optional[WidgetPlacement]:
        """Remove and return a placement."""
        for i, item in enumerate(self.items):
            if item.id == widget_id:
                return self.items.pop(i)
        return None

    def ids(self) -> List[str]:
        """Widget ids in arrangement order."""
        return [item.id for item in self.items]

    def copy(self) -> "GridArrangement":
        """Copy the arrangement and each of its placements."""
        return GridArrangement(
            columns=self.columns,
            items=[item.copy() for item in self.items],
        )

    # --- Queries ---

    def sorted_by_position(self) -> List[WidgetPlacement]:
        """Placements in reading order: y ascending, then x ascending."""
        return sorted(self.items, key=lambda item: item.position_key)

    def lock_map(self) -> Dict[str, bool]:
        """Map of widget id to its locked flag."""
        return {item.id: item.locked for item in self.items}

    def max_row(self) -> int:
        """First row below every placement (0 for an empty arrangement)."""
        if not self.items:
            return 0
        return max(item.bottom for item in self.items)

    def find_overlaps(self) -> List[Tuple[str, str]]:
        """Find all pairs of placements whose cell rectangles intersect."""
        overlaps = []
        for i, first in enumerate(self.items):
            for second in self.items[i + 1:]:
                if first.overlaps(second):
                    overlaps.append((first.id, second.id))
        return overlaps

    # --- Conversion ---

    def to_dicts(self) -> List[Dict[str, Any]]:
        """Convert every placement to the react-grid-layout item shape."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_dicts(cls, columns: int,
                   data: Iterable[Dict[str, Any]]) -> "GridArrangement":
        """Build an arrangement from a list of item dictionaries."""
        return cls(columns=columns,
                   items=[WidgetPlacement.from_dict(d) for d in data])

    def __repr__(self) -> str:
        return f"GridArrangement(columns={self.columns}, items={len(self.items)})"
