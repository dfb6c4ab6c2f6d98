"""Maze parsing utilities."""

from pathlib import Path
from typing import List, Optional, Tuple

from .models import Cell, Maze, Position, ParseError, ParseResult
from .cascade import FATAL, CRITICAL, HIGH, MEDIUM, filter_cascading_errors


VALID_CHARACTERS = frozenset(cell.value for cell in Cell)


class MazeError(ValueError):
    """Raised when a maze description cannot be turned into a Maze."""

    def __init__(self, errors: List[ParseError], max_errors: int = 5):
        self.errors = errors
        shown = filter_cascading_errors(errors, max_errors=max_errors)
        super().__init__("; ".join(e.message for e in shown))


def extract_maze_lines(text: str) -> List[str]:
    """Split the text into rows, dropping blank lines around the block."""
    lines = [line.rstrip('\r') for line in text.split('\n')]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_maze(text: str) -> Tuple[Optional[Maze], List[ParseError]]:
    """
    Parse a maze description with error collection.

    Returns a tuple of (maze, errors). `maze` is None whenever any error
    was found.
    """
    lines = extract_maze_lines(text)
    errors: List[ParseError] = []

    if not lines:
        errors.append(ParseError(
            code="EMPTY_MAZE",
            message="Maze description is empty",
            cascade_level=FATAL
        ))
        return None, errors

    width = len(lines[0])
    cells: List[List[Cell]] = []
    starts: List[Position] = []
    goals: List[Position] = []

    for r, line in enumerate(lines):
        if len(line) != width:
            errors.append(ParseError(
                code="RAGGED_GRID",
                message=f"Row {r + 1} has length {len(line)}, expected {width}",
                line=r + 1,
                cascade_level=CRITICAL
            ))

        row: List[Cell] = []
        for c, char in enumerate(line):
            if char not in VALID_CHARACTERS:
                errors.append(ParseError(
                    code="INVALID_CHARACTER",
                    message=f"Invalid character '{char}' at line {r + 1}, column {c + 1}",
                    line=r + 1,
                    column=c + 1,
                    cascade_level=HIGH
                ))
                row.append(Cell.WALL)
                continue

            cell = Cell(char)
            if cell == Cell.START:
                starts.append(Position(r, c))
            elif cell == Cell.GOAL:
                goals.append(Position(r, c))
            row.append(cell)
        cells.append(row)

    if not starts:
        errors.append(ParseError(
            code="MISSING_START",
            message="Maze has no start cell 'S'",
            cascade_level=MEDIUM
        ))
    elif len(starts) > 1:
        first = starts[1]
        errors.append(ParseError(
            code="MULTIPLE_START",
            message=f"Maze has {len(starts)} start cells, expected exactly one",
            line=first.row + 1,
            column=first.col + 1,
            cascade_level=MEDIUM
        ))

    if not goals:
        errors.append(ParseError(
            code="MISSING_GOAL",
            message="Maze has no goal cell 'E'",
            cascade_level=MEDIUM
        ))

    if errors:
        return None, errors

    return Maze(cells=cells, start=starts[0], goals=goals), errors


def parse_result(text: str) -> ParseResult:
    """Parse a maze description into a ParseResult."""
    maze, errors = parse_maze(text)
    return ParseResult(valid=maze is not None, errors=errors, maze=maze)


def parse_maze_or_raise(text: str, max_errors: int = 5) -> Maze:
    """Parse a maze description, raising MazeError on any error."""
    maze, errors = parse_maze(text)
    if maze is None:
        raise MazeError(errors, max_errors=max_errors)
    return maze


def load_maze(path: str | Path, max_errors: int = 5) -> Maze:
    """Read and parse a maze file."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Maze file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MazeError([ParseError(
            code="INVALID_ENCODING",
            message=f"Maze file is not valid UTF-8 text: {e.reason} at byte {e.start}",
            cascade_level=FATAL
        )], max_errors=max_errors)

    return parse_maze_or_raise(text, max_errors=max_errors)
