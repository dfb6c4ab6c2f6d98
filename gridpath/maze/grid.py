"""Maze rendering utilities."""

from typing import Iterable, Optional

from .models import Cell, Maze, Position


PATH_MARK = 'O'


def render_maze(maze: Maze, highlight: Optional[Iterable[Position]] = None) -> str:
    """
    Render the maze back to its text form.

    Open cells listed in `highlight` are drawn with PATH_MARK; start and
    goal cells keep their own characters.
    """
    marked = set(highlight or ())

    lines = []
    for r, row in enumerate(maze.cells):
        chars = []
        for c, cell in enumerate(row):
            if cell == Cell.OPEN and Position(r, c) in marked:
                chars.append(PATH_MARK)
            else:
                chars.append(cell.value)
        lines.append(''.join(chars))

    return '\n'.join(lines)


def visualize(text: str, highlight: Optional[Iterable[Position]] = None) -> str:
    """
    Quick visualization of a maze description.

    Parses the maze and returns the rendered grid string.
    Raises MazeError if parsing fails.
    """
    from .parsing import parse_maze_or_raise

    return render_maze(parse_maze_or_raise(text), highlight)
