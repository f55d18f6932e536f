"""Arrangement invariant checks."""

from .checker import ArrangementChecker, LayoutViolation, validate_arrangement

__all__ = ["ArrangementChecker", "LayoutViolation", "validate_arrangement"]
