"""
Shared test fixtures for gridreflow tests.

Provides reusable canonical arrangements and breakpoint sets for testing
the scaler, generator, orchestrator, normalizer and compactor.
"""

import pytest

from gridreflow.breakpoints.profiles import BreakpointProfile, BreakpointSet
from gridreflow.layout.abstraction import GridArrangement, WidgetPlacement


@pytest.fixture
def breakpoints() -> BreakpointSet:
    """The reference lg/md/sm breakpoint set."""
    return BreakpointSet(profiles=[
        BreakpointProfile(name="lg", columns=12, min_width=1200),
        BreakpointProfile(name="md", columns=10, min_width=996),
        BreakpointProfile(name="sm", columns=6, min_width=768),
    ])


@pytest.fixture
def two_halves() -> GridArrangement:
    """Two half-width widgets sharing the first row."""
    return GridArrangement(columns=12, items=[
        WidgetPlacement(id="A", x=0, y=0, w=6, h=2),
        WidgetPlacement(id="B", x=6, y=0, w=6, h=2),
    ])


@pytest.fixture
def banner_layout() -> GridArrangement:
    """A full-width banner above a 4/8 split row."""
    return GridArrangement(columns=12, items=[
        WidgetPlacement(id="A", x=0, y=0, w=12, h=1),
        WidgetPlacement(id="B", x=0, y=1, w=4, h=3),
        WidgetPlacement(id="C", x=4, y=1, w=8, h=3),
    ])


@pytest.fixture
def stacked_layout() -> GridArrangement:
    """A tall widget beside two stacked widgets, one of them locked."""
    return GridArrangement(columns=12, items=[
        WidgetPlacement(id="tall", x=0, y=0, w=6, h=4),
        WidgetPlacement(id="top", x=6, y=0, w=6, h=2, locked=True),
        WidgetPlacement(id="bottom", x=6, y=2, w=6, h=2),
    ])


@pytest.fixture
def dashboard() -> GridArrangement:
    """A realistic dashboard mixing full rows, gaps and locked widgets."""
    return GridArrangement(columns=12, items=[
        WidgetPlacement(id="clock", x=0, y=0, w=3, h=2, locked=True),
        WidgetPlacement(id="weather", x=3, y=0, w=3, h=2),
        WidgetPlacement(id="notes", x=6, y=0, w=6, h=4),
        WidgetPlacement(id="links", x=0, y=2, w=4, h=3),
        WidgetPlacement(id="github", x=4, y=2, w=2, h=2),
        WidgetPlacement(id="kanban", x=0, y=5, w=12, h=3, locked=True),
        WidgetPlacement(id="stocks", x=2, y=8, w=5, h=2),
        WidgetPlacement(id="status", x=9, y=8, w=3, h=2),
        WidgetPlacement(id="tags", x=0, y=10, w=1, h=2),
    ])
