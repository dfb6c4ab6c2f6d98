"""Maze parsing and rendering for gridpath."""

from .models import Cell, Position, Maze, ParseError, ParseResult
from .parsing import (
    MazeError,
    parse_maze,
    parse_result,
    parse_maze_or_raise,
    load_maze,
    extract_maze_lines,
)
from .cascade import filter_cascading_errors
from .grid import render_maze, visualize

__all__ = [
    # Models
    "Cell",
    "Position",
    "Maze",
    "ParseError",
    "ParseResult",
    # Parsing
    "MazeError",
    "parse_maze",
    "parse_result",
    "parse_maze_or_raise",
    "load_maze",
    "extract_maze_lines",
    # Error reporting
    "filter_cascading_errors",
    # Rendering
    "render_maze",
    "visualize",
]
