"""Maze searches for gridpath."""

from .models import (
    NO_PATH,
    Facing,
    State,
    MazeConfig,
    RaceConfig,
    SolverConfig,
    MazeResult,
    RaceResult,
)
from .pathfinder import WeightedPathfinder
from .track import RaceTrack

__all__ = [
    "NO_PATH",
    "Facing",
    "State",
    "MazeConfig",
    "RaceConfig",
    "SolverConfig",
    "MazeResult",
    "RaceResult",
    "WeightedPathfinder",
    "RaceTrack",
]
