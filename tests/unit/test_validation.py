"""Tests for arrangement validation."""

from gridreflow.engine.responsive import generate_responsive_layouts
from gridreflow.layout.abstraction import GridArrangement, WidgetPlacement
from gridreflow.validation.checker import ArrangementChecker, validate_arrangement


def _rules(violations):
    return sorted(v.rule for v in violations)


class TestArrangementChecker:

    def test_valid_arrangement_passes(self, dashboard):
        passed, violations = validate_arrangement(dashboard)
        assert passed
        assert violations == []

    def test_derived_layouts_pass(self, dashboard, breakpoints):
        layouts = generate_responsive_layouts(dashboard, breakpoints)
        for name in layouts:
            passed, violations = validate_arrangement(layouts[name])
            assert passed, violations

    def test_overlap_reported(self):
        arrangement = GridArrangement(columns=12, items=[
            WidgetPlacement(id="a", x=0, y=0, w=4, h=2),
            WidgetPlacement(id="b", x=2, y=1, w=4, h=2),
        ])
        passed, violations = validate_arrangement(arrangement)

        assert not passed
        assert _rules(violations) == ["overlap"]
        assert violations[0].items == ["a", "b"]
        assert violations[0].severity == "error"

    def test_out_of_bounds_reported(self):
        arrangement = GridArrangement(columns=6, items=[
            WidgetPlacement(id="a", x=4, y=0, w=4, h=2),
            WidgetPlacement(id="b", x=-1, y=3, w=1, h=2),
        ])
        passed, violations = validate_arrangement(arrangement)

        assert not passed
        assert _rules(violations) == ["bounds", "bounds"]

    def test_invalid_size_is_error(self):
        arrangement = GridArrangement(columns=6, items=[
            WidgetPlacement(id="a", x=0, y=0, w=0, h=2),
        ])
        passed, violations = validate_arrangement(arrangement)

        assert not passed
        assert "size" in _rules(violations)

    def test_below_minimum_is_warning(self):
        arrangement = GridArrangement(columns=6, items=[
            WidgetPlacement(id="a", x=0, y=0, w=1, h=1, min_h=2),
        ])
        passed, violations = validate_arrangement(arrangement)

        assert passed
        assert _rules(violations) == ["min_size"]
        assert violations[0].severity == "warning"

    def test_duplicate_ids(self):
        arrangement = GridArrangement(columns=6, items=[
            WidgetPlacement(id="a", x=0, y=0, w=2, h=2),
            WidgetPlacement(id="a", x=2, y=0, w=2, h=2),
        ])
        passed, violations = validate_arrangement(arrangement)

        assert not passed
        assert _rules(violations) == ["duplicate_id"]

    def test_checks_reset_between_runs(self):
        arrangement = GridArrangement(columns=6, items=[
            WidgetPlacement(id="a", x=5, y=0, w=2, h=2),
        ])
        checker = ArrangementChecker(arrangement)
        checker.run_checks()
        _, violations = checker.run_checks()
        assert len(violations) == 1
