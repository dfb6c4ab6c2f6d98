"""
Pydantic models and value types for the search layer.

Holds the facing/state types the pathfinder searches over, the solver
configuration, and the result records written by the CLI.
"""

import sys
from enum import Enum
from typing import Literal, NamedTuple, Dict, Optional
from pydantic import BaseModel, Field

from ..maze.models import Position


# Cost reported when no goal state can be reached
NO_PATH: int = sys.maxsize

FacingCode = Literal["N", "E", "S", "W"]


class Facing(str, Enum):
    """Compass facing, in clockwise order."""
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def rotate_clockwise(self) -> "Facing":
        order = list(Facing)
        return order[(order.index(self) + 1) % 4]

    def rotate_counterclockwise(self) -> "Facing":
        return self.rotate_clockwise().rotate_clockwise().rotate_clockwise()

    def step(self, pos: Position) -> Position:
        """Move one cell; the caller checks bounds."""
        dr, dc = _DELTAS[self]
        return Position(pos.row + dr, pos.col + dc)


_DELTAS: Dict[Facing, tuple] = {
    Facing.NORTH: (-1, 0),
    Facing.EAST: (0, 1),
    Facing.SOUTH: (1, 0),
    Facing.WEST: (0, -1),
}


class State(NamedTuple):
    """Unit of search: where we are and which way we face."""
    position: Position
    facing: Facing


class MazeConfig(BaseModel):
    """Cost model for the weighted maze search."""
    step_cost: int = Field(default=1, ge=1)
    turn_penalty: int = Field(default=1000, ge=1)
    start_facing: FacingCode = "E"


class RaceConfig(BaseModel):
    """Parameters for the race track shortcut tally."""
    cheat_duration: int = Field(default=20, ge=0)
    min_saving: int = Field(default=100, ge=1)


class SolverConfig(BaseModel):
    """Top-level configuration, usually loaded from YAML."""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    max_errors: int = Field(default=5, ge=1)
    maze: MazeConfig = Field(default_factory=MazeConfig)
    race: RaceConfig = Field(default_factory=RaceConfig)


class MazeResult(BaseModel):
    """Result of a weighted maze search."""
    input: Optional[str] = None
    reachable: bool
    lowest_score: int
    optimal_tiles: int = 0
    optimal_paths: int = 0
    states_expanded: int = 0
    config: MazeConfig = Field(default_factory=MazeConfig)


class RaceResult(BaseModel):
    """Result of a race track run."""
    input: Optional[str] = None
    reachable: bool
    shortest_path: int
    cheat_duration: int
    min_saving: int
    shortcuts: int = 0
    savings: Dict[int, int] = Field(default_factory=dict)
