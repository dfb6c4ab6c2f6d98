"""Test suite for the race track solver."""

import pytest

from gridpath.maze import Position, parse_maze_or_raise
from gridpath.search import NO_PATH, RaceConfig, RaceTrack


def track_for(text):
    return RaceTrack(maze=parse_maze_or_raise(text))


SHORT_CUT = """\
#######
#S#...#
#.#.#.#
#...#E#
#######
"""


class TestDistances:
    """Test cases for BFS distances."""

    def test_distances_from_start(self):
        """Distances grow by one per step along open cells."""
        track = track_for("S..E")
        assert track.distances_from([Position(0, 0)]) == {
            Position(0, 0): 0,
            Position(0, 1): 1,
            Position(0, 2): 2,
            Position(0, 3): 3,
        }

    def test_walls_not_visited(self):
        """Wall cells never appear in the distance map."""
        track = track_for("S#E\n...")
        dist = track.distances_from([Position(0, 0)])
        assert Position(0, 1) not in dist
        assert dist[Position(0, 2)] == 4

    def test_multiple_origins(self):
        """Several origins measure to the nearest one."""
        track = track_for("E.S.E")
        dist = track.distances_from(track.maze.goals)
        assert dist[Position(0, 2)] == 2


class TestShortestPath:
    """Test cases for the uniform-cost shortest path."""

    def test_reference_track(self, race_track_text):
        """Reference track is 84 steps long."""
        assert track_for(race_track_text).shortest_path() == 84

    def test_turns_are_free(self):
        """Only steps count on the race track."""
        assert track_for(SHORT_CUT).shortest_path() == 10

    def test_unreachable(self):
        """A walled-off goal gives NO_PATH."""
        assert track_for("S#E").shortest_path() == NO_PATH


class TestShortcuts:
    """Test cases for the shortcut tally."""

    def test_reference_two_step_tally(self, race_track_text):
        """Two-step shortcuts on the reference track."""
        tally = track_for(race_track_text).tally_shortcuts(2)
        assert tally == {
            2: 14, 4: 14, 6: 2, 8: 4, 10: 2, 12: 3,
            20: 1, 36: 1, 38: 1, 40: 1, 64: 1,
        }

    def test_reference_long_shortcuts(self, race_track_text):
        """Twenty-step shortcuts saving at least 50 on the reference track."""
        track = track_for(race_track_text)
        tally = track.tally_shortcuts(20)
        assert tally[76] == 3
        assert tally[74] == 4
        assert tally[50] == 32
        assert track.count_shortcuts(20, 50) == 285

    def test_count_threshold(self, race_track_text):
        """count_shortcuts filters by minimum saving."""
        track = track_for(race_track_text)
        assert track.count_shortcuts(2, 20) == 5
        assert track.count_shortcuts(2, 65) == 0

    def test_single_wall_jump(self):
        """Jumping the wall next to the start saves the detour."""
        tally = track_for(SHORT_CUT).tally_shortcuts(2)
        # (1,1) -> (1,3) skips the 6-step loop down and back up
        assert tally.get(4, 0) >= 1
        assert all(saving > 0 for saving in tally)

    @pytest.mark.parametrize("duration", [0, 1])
    def test_too_short_to_cross_walls(self, race_track_text, duration):
        """Durations below two cannot pass through a wall."""
        assert track_for(race_track_text).tally_shortcuts(duration) == {}

    def test_unreachable_has_no_shortcuts(self):
        """No base path means nothing to improve on."""
        assert track_for("S#E").tally_shortcuts(2) == {}


class TestSolve:
    """Test cases for the packaged RaceResult."""

    def test_solve_reference(self, race_track_text):
        """solve() applies the configured duration and threshold."""
        result = track_for(race_track_text).solve(RaceConfig(cheat_duration=2, min_saving=20))
        assert result.reachable is True
        assert result.shortest_path == 84
        assert result.shortcuts == 5
        assert result.savings[64] == 1

    def test_solve_unreachable(self):
        """Unreachable tracks report no shortcuts."""
        result = track_for("S#E").solve()
        assert result.reachable is False
        assert result.shortest_path == NO_PATH
        assert result.shortcuts == 0
        assert result.savings == {}
