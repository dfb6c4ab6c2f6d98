"""Data models for maze parsing."""

from enum import Enum
from typing import List, Optional, NamedTuple
from pydantic import BaseModel, Field


class Cell(str, Enum):
    """A single maze cell, keyed by its input character."""
    OPEN = '.'
    WALL = '#'
    START = 'S'
    GOAL = 'E'


class Position(NamedTuple):
    """A cell address on the grid, 0-indexed and row-major."""
    row: int
    col: int


class Maze(BaseModel):
    """
    A rectangular grid of cells with exactly one start and at least one goal.

    Built by the parser; treat it as read-only.
    """
    cells: List[List[Cell]]
    start: Position
    goals: List[Position] = Field(..., min_length=1)

    @property
    def nrows(self) -> int:
        return len(self.cells)

    @property
    def ncols(self) -> int:
        return len(self.cells[0])

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.nrows and 0 <= pos.col < self.ncols

    def cell_at(self, pos: Position) -> Cell:
        return self.cells[pos.row][pos.col]

    def is_open(self, pos: Position) -> bool:
        """True if `pos` is inside the grid and not a wall."""
        return self.in_bounds(pos) and self.cell_at(pos) != Cell.WALL

    def neighbors(self, pos: Position) -> List[Position]:
        """Open 4-connected neighbours of `pos`."""
        candidates = [
            Position(pos.row - 1, pos.col),
            Position(pos.row, pos.col + 1),
            Position(pos.row + 1, pos.col),
            Position(pos.row, pos.col - 1),
        ]
        return [p for p in candidates if self.is_open(p)]


class ParseError(BaseModel):
    """A single maze parsing error."""
    code: str
    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    cascade_level: int = 0  # 0=FATAL, 1=CRITICAL, 2=HIGH, 3=MEDIUM


class ParseResult(BaseModel):
    """Result of parsing a maze description."""
    valid: bool
    errors: List[ParseError] = Field(default_factory=list)
    maze: Optional[Maze] = None
