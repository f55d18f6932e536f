"""Tests for the breakpoint layout generator."""

import pytest

from gridreflow.engine.generator import (
    BreakpointLayoutGenerator,
    GeneratorConfig,
    generate_breakpoint_layout,
)
from gridreflow.layout.abstraction import GridArrangement, WidgetPlacement


def _geometry(arrangement):
    return [(i.id, i.x, i.y, i.w, i.h) for i in arrangement]


def _assert_valid(arrangement):
    assert arrangement.find_overlaps() == []
    for item in arrangement:
        assert item.x >= 0 and item.y >= 0
        assert item.right <= arrangement.columns


class TestScenarios:
    """Reference derivations."""

    def test_two_halves_at_six_columns(self, two_halves):
        derived = generate_breakpoint_layout(two_halves, 6)

        assert derived.columns == 6
        assert _geometry(derived) == [("A", 0, 0, 3, 2), ("B", 3, 0, 3, 2)]

    def test_banner_at_ten_columns(self, banner_layout):
        derived = generate_breakpoint_layout(banner_layout, 10)
        by_id = {i.id: i for i in derived}

        assert (by_id["A"].x, by_id["A"].w) == (0, 10)
        assert by_id["B"].w + by_id["C"].w == 10
        _assert_valid(derived)


class TestCollisionResolution:
    """Tests for overlaps created by row-local scaling."""

    def test_inter_row_collision_moves_widget_down(self, stacked_layout):
        """The right-anchored lower widget widens into the tall one and is pushed below it."""
        generator = BreakpointLayoutGenerator(6)
        result = generator.generate(stacked_layout)

        assert _geometry(result.arrangement) == [
            ("tall", 0, 0, 3, 4),
            ("top", 3, 0, 3, 2),
            ("bottom", 0, 4, 6, 2),
        ]
        assert result.displaced == 1
        assert not result.exhausted
        _assert_valid(result.arrangement)

    def test_earlier_widgets_keep_priority(self):
        """Of two colliding widgets the one first in reading order stays put."""
        source = GridArrangement(columns=12, items=[
            WidgetPlacement(id="second", x=0, y=1, w=12, h=1),
            WidgetPlacement(id="first", x=0, y=0, w=6, h=2),
        ])
        derived = generate_breakpoint_layout(source, 6)
        by_id = {i.id: i for i in derived}

        assert (by_id["first"].x, by_id["first"].y) == (0, 0)
        assert by_id["second"].y >= 2
        _assert_valid(derived)

    def test_crowded_row_spills_to_free_cells(self):
        source = GridArrangement(columns=12, items=[
            WidgetPlacement(id=f"w{i}", x=i, y=0, w=1, h=2) for i in range(12)
        ])
        derived = generate_breakpoint_layout(source, 6)

        assert len(derived) == 12
        assert max(i.bottom for i in derived) == 4
        _assert_valid(derived)

    @pytest.mark.parametrize("columns", [10, 8, 6, 4, 2, 1])
    def test_dashboard_valid_at_any_width(self, dashboard, columns):
        derived = generate_breakpoint_layout(dashboard, columns)

        assert sorted(derived.ids()) == sorted(dashboard.ids())
        _assert_valid(derived)

    def test_source_not_modified(self, dashboard):
        before = _geometry(dashboard)
        generate_breakpoint_layout(dashboard, 6)
        assert _geometry(dashboard) == before

    def test_output_in_reading_order(self, dashboard):
        derived = generate_breakpoint_layout(dashboard, 10)
        ids = derived.ids()
        assert ids.index("clock") < ids.index("links") < ids.index("kanban")


class TestLockStamping:
    """Lock state is applied by the generator itself."""

    def test_explicit_lock_state(self, two_halves):
        generator = BreakpointLayoutGenerator(6, lock_state={"B": True})
        derived = generator.generate(two_halves).arrangement
        by_id = {i.id: i for i in derived}

        assert by_id["B"].static and by_id["B"].locked
        assert not by_id["A"].static and not by_id["A"].locked

    def test_missing_ids_are_unlocked(self, stacked_layout):
        """Widgets absent from the lock map come out unlocked whatever their input flag."""
        generator = BreakpointLayoutGenerator(6, lock_state={})
        derived = generator.generate(stacked_layout).arrangement
        assert not any(i.static for i in derived)

    def test_convenience_defaults_to_source_locks(self, stacked_layout):
        derived = generate_breakpoint_layout(stacked_layout, 6)
        static = {i.id for i in derived if i.static}
        assert static == {"top"}


class TestExhaustion:
    """Tests for the grid-exhaustion fallback."""

    def test_fallback_reported(self):
        source = GridArrangement(columns=12, items=[
            WidgetPlacement(id="A", x=0, y=0, w=12, h=2),
            WidgetPlacement(id="B", x=0, y=2, w=12, h=2),
        ])
        generator = BreakpointLayoutGenerator(6, config=GeneratorConfig(max_rows=2))
        result = generator.generate(source)

        assert result.exhausted
        assert result.fallbacks == ["B"]
        by_id = {i.id: i for i in result.arrangement}
        assert (by_id["B"].x, by_id["B"].y) == (0, 0)

    def test_larger_grid_avoids_fallback(self):
        source = GridArrangement(columns=12, items=[
            WidgetPlacement(id=f"w{i}", x=0, y=i * 10, w=12, h=10) for i in range(12)
        ])
        result = BreakpointLayoutGenerator(6, config=GeneratorConfig(max_rows=200)).generate(source)

        assert not result.exhausted
        _assert_valid(result.arrangement)
