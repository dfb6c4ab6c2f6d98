"""Shared maze fixtures."""

import pytest


REFERENCE_MAZE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

LARGER_REFERENCE_MAZE = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""

RACE_TRACK = """\
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


@pytest.fixture
def reference_maze_text():
    return REFERENCE_MAZE


@pytest.fixture
def larger_maze_text():
    return LARGER_REFERENCE_MAZE


@pytest.fixture
def race_track_text():
    return RACE_TRACK


@pytest.fixture
def write_maze(tmp_path):
    """Write maze text to a file under tmp_path and return its path."""
    def _write(text, name="maze.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
