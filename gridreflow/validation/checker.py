"""
Arrangement Validation

Checks an arrangement against the grid invariants the engine relies on
but never enforces itself: widgets stay inside the grid, have a usable
size, and do not overlap.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..layout.abstraction import GridArrangement


@dataclass
class LayoutViolation:
    """A broken arrangement invariant."""
    rule: str  # "overlap", "bounds", "size", "min_size", "duplicate_id"
    severity: str  # "error", "warning"
    message: str
    items: List[str] = field(default_factory=list)  # Affected widget ids


class ArrangementChecker:
    """Rule checker for one arrangement."""

    def __init__(self, arrangement: GridArrangement):
        self.arrangement = arrangement
        self.violations: List[LayoutViolation] = []

    def run_checks(self) -> Tuple[bool, List[LayoutViolation]]:
        """
        Run all checks.

        Returns:
            (passed, violations) - passed is True if no errors
        """
        self.violations = []

        self._check_duplicate_ids()
        self._check_sizes()
        self._check_bounds()
        self._check_overlaps()

        passed = not any(v.severity == "error" for v in self.violations)
        return (passed, self.violations)

    def _check_duplicate_ids(self):
        seen = set()
        for item in self.arrangement:
            if item.id in seen:
                self.violations.append(LayoutViolation(
                    rule="duplicate_id",
                    severity="error",
                    message=f"Widget id '{item.id}' appears more than once",
                    items=[item.id],
                ))
            seen.add(item.id)

    def _check_sizes(self):
        """Zero or negative sizes are errors, sizes under the widget minimum are warnings."""
        for item in self.arrangement:
            if item.w < 1 or item.h < 1:
                self.violations.append(LayoutViolation(
                    rule="size",
                    severity="error",
                    message=f"{item.id} has invalid size {item.w}x{item.h}",
                    items=[item.id],
                ))
            elif item.w < item.min_w or item.h < item.min_h:
                self.violations.append(LayoutViolation(
                    rule="min_size",
                    severity="warning",
                    message=(f"{item.id} is {item.w}x{item.h}, below its minimum "
                             f"{item.min_w}x{item.min_h}"),
                    items=[item.id],
                ))

    def _check_bounds(self):
        columns = self.arrangement.columns
        for item in self.arrangement:
            if not item.fits(columns):
                self.violations.append(LayoutViolation(
                    rule="bounds",
                    severity="error",
                    message=(f"{item.id} at x={item.x} y={item.y} w={item.w} "
                             f"is outside the {columns}-column grid"),
                    items=[item.id],
                ))

    def _check_overlaps(self):
        for first, second in self.arrangement.find_overlaps():
            self.violations.append(LayoutViolation(
                rule="overlap",
                severity="error",
                message=f"{first} overlaps {second}",
                items=[first, second],
            ))


def validate_arrangement(arrangement: GridArrangement) -> Tuple[bool, List[LayoutViolation]]:
    """Convenience function to run every arrangement check."""
    return ArrangementChecker(arrangement).run_checks()
