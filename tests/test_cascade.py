"""Test cascading error filtering logic."""

import pytest

from gridpath.maze import parse_maze
from gridpath.maze.cascade import filter_cascading_errors, FATAL, CRITICAL, HIGH, MEDIUM
from gridpath.maze.models import ParseError


class TestCascadeLevelConstants:
    """Test that cascade level constants are correctly defined."""

    def test_cascade_levels_defined(self):
        """Cascade levels should have correct values."""
        assert FATAL == 0
        assert CRITICAL == 1
        assert HIGH == 2
        assert MEDIUM == 3


class TestCascadeFiltering:
    """Test error cascade hierarchy."""

    def test_empty_list(self):
        """No errors in, no errors out."""
        assert filter_cascading_errors([]) == []

    def test_empty_maze_is_fatal(self):
        """Empty input shows only EMPTY_MAZE."""
        _, errors = parse_maze("")
        filtered = filter_cascading_errors(errors)
        assert len(filtered) == 1
        assert filtered[0].code == "EMPTY_MAZE"
        assert filtered[0].cascade_level == FATAL

    def test_ragged_grid_hides_character_noise(self):
        """A ragged grid hides INVALID_CHARACTER but keeps start/goal errors."""
        _, errors = parse_maze("...\n.x\n..")
        codes = {e.code for e in errors}
        assert {"RAGGED_GRID", "INVALID_CHARACTER", "MISSING_START", "MISSING_GOAL"} <= codes

        filtered = filter_cascading_errors(errors)
        filtered_codes = {e.code for e in filtered}
        assert "INVALID_CHARACTER" not in filtered_codes
        assert "RAGGED_GRID" in filtered_codes
        assert "MISSING_START" in filtered_codes

    def test_invalid_character_keeps_start_goal_errors(self):
        """Character errors are shown with start/goal errors."""
        _, errors = parse_maze("S?.")
        filtered = filter_cascading_errors(errors)
        assert [e.code for e in filtered] == ["INVALID_CHARACTER", "MISSING_GOAL"]

    def test_medium_only_shows_all(self):
        """With only start/goal errors everything is shown."""
        _, errors = parse_maze("...")
        filtered = filter_cascading_errors(errors)
        assert filtered == errors


class TestMaxErrors:
    """Test truncation of long error lists."""

    def _errors(self, n, level=HIGH):
        return [
            ParseError(code="INVALID_CHARACTER", message=f"bad {i}", cascade_level=level)
            for i in range(n)
        ]

    def test_under_limit_untouched(self):
        """Lists at or below the limit pass through."""
        errors = self._errors(5)
        assert filter_cascading_errors(errors, max_errors=5) == errors

    def test_over_limit_summarised(self):
        """Extra errors collapse into an ADDITIONAL_ERRORS summary."""
        filtered = filter_cascading_errors(self._errors(8), max_errors=5)
        assert len(filtered) == 5
        assert filtered[-1].code == "ADDITIONAL_ERRORS"
        assert "4 more errors" in filtered[-1].message
        assert filtered[-1].cascade_level == HIGH

    def test_summary_keeps_leading_errors(self):
        """The first max_errors - 1 errors are kept in order."""
        filtered = filter_cascading_errors(self._errors(3), max_errors=2)
        assert filtered[0].message == "bad 0"
        assert filtered[-1].message == "... and 2 more errors"

    @pytest.mark.parametrize("max_errors", [1, 3, 10])
    def test_never_exceeds_limit(self, max_errors):
        """The filtered list never exceeds max_errors."""
        filtered = filter_cascading_errors(self._errors(12), max_errors=max_errors)
        assert len(filtered) <= max_errors
