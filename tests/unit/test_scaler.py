"""
Tests for row-proportional scaling.

Tests cover:
- Identity fast path
- Full-span rows filling the target width exactly
- Right-edge anchoring in rows with gaps
- Minimum width and crowded rows
"""

import pytest

from gridreflow.engine.scaler import group_rows, round_half_up, scale_rows
from gridreflow.layout.abstraction import WidgetPlacement


def _geometry(items):
    return [(i.id, i.x, i.y, i.w, i.h) for i in items]


class TestRoundHalfUp:
    """Halves must round up, not to even."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (3.333, 3),
        (3.6, 4),
        (0.0, 0),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestGroupRows:

    def test_groups_by_identical_y_in_order(self):
        items = [
            WidgetPlacement(id="c", x=4, y=1, w=2, h=1),
            WidgetPlacement(id="a", x=3, y=0, w=2, h=1),
            WidgetPlacement(id="b", x=0, y=1, w=2, h=1),
            WidgetPlacement(id="d", x=0, y=0, w=2, h=1),
        ]
        rows = group_rows(items)

        assert list(rows.keys()) == [0, 1]
        assert [i.id for i in rows[0]] == ["d", "a"]
        assert [i.id for i in rows[1]] == ["b", "c"]


class TestScaleRows:
    """Tests for the per-row scaling rules."""

    def test_identity_returns_copies(self, two_halves):
        """Same column count returns equal but distinct placements."""
        scaled = scale_rows(two_halves.items, 12, 12)

        assert _geometry(scaled) == _geometry(two_halves.items)
        assert all(s is not o for s, o in zip(scaled, two_halves.items))

    def test_half_split_to_six_columns(self, two_halves):
        scaled = scale_rows(two_halves.items, 12, 6)
        assert _geometry(scaled) == [("A", 0, 0, 3, 2), ("B", 3, 0, 3, 2)]

    def test_full_span_row_fills_target(self, banner_layout):
        """Rounding inside a full row is absorbed by its last widget."""
        scaled = {i.id: i for i in scale_rows(banner_layout.items, 12, 10)}

        assert (scaled["A"].x, scaled["A"].w) == (0, 10)
        assert (scaled["B"].x, scaled["B"].w) == (0, 3)
        assert (scaled["C"].x, scaled["C"].w) == (3, 7)

    @pytest.mark.parametrize("target", [10, 8, 6, 5, 4, 3])
    def test_full_span_preserved_for_any_target(self, target):
        items = [
            WidgetPlacement(id="a", x=0, y=0, w=5, h=1),
            WidgetPlacement(id="b", x=5, y=0, w=4, h=1),
            WidgetPlacement(id="c", x=9, y=0, w=3, h=1),
        ]
        scaled = scale_rows(items, 12, target)

        assert scaled[0].x == 0
        assert scaled[-1].right == target
        assert sum(i.w for i in scaled) == target

    def test_right_edge_anchor_in_gapped_row(self):
        """A widget touching the right edge stays flush with it."""
        items = [
            WidgetPlacement(id="left", x=2, y=0, w=4, h=2),
            WidgetPlacement(id="right", x=8, y=0, w=4, h=2),
        ]
        scaled = scale_rows(items, 12, 6)

        assert _geometry(scaled) == [("left", 0, 0, 2, 2), ("right", 2, 0, 4, 2)]
        assert scaled[-1].right == 6

    def test_gapped_row_packs_left(self):
        """Rows that do not reach the right edge keep proportional widths."""
        items = [
            WidgetPlacement(id="a", x=0, y=0, w=4, h=2),
            WidgetPlacement(id="b", x=6, y=0, w=2, h=2),
        ]
        scaled = scale_rows(items, 12, 6)
        assert _geometry(scaled) == [("a", 0, 0, 2, 2), ("b", 2, 0, 1, 2)]

    def test_minimum_width_is_one(self):
        items = [WidgetPlacement(id="tiny", x=0, y=0, w=1, h=2)]
        scaled = scale_rows(items, 12, 4)
        assert scaled[0].w == 1

    def test_crowded_row_never_loses_a_widget(self):
        """More widgets than target columns: every widget still has width."""
        items = [WidgetPlacement(id=f"w{i}", x=i, y=0, w=1, h=2) for i in range(12)]
        scaled = scale_rows(items, 12, 6)

        assert len(scaled) == 12
        assert all(i.w >= 1 for i in scaled)

    def test_rows_keep_their_y(self, banner_layout):
        scaled = scale_rows(banner_layout.items, 12, 6)
        assert [i.y for i in scaled] == [0, 1, 1]

    def test_other_fields_carried(self):
        items = [WidgetPlacement(id="a", x=0, y=0, w=6, h=3, min_w=2, min_h=3, locked=True)]
        scaled = scale_rows(items, 12, 6)[0]

        assert (scaled.min_w, scaled.min_h, scaled.locked) == (2, 3, True)

    def test_inputs_not_modified(self, banner_layout):
        before = _geometry(banner_layout.items)
        scale_rows(banner_layout.items, 12, 6)
        assert _geometry(banner_layout.items) == before
