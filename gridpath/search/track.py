"""
Race track solver.

Uniform-cost shortest path over the same maze format, plus a tally of
shortcuts: short spans during which walls may be crossed.
"""

import logging
from collections import deque, Counter
from typing import Dict, Iterable, Optional
from pydantic import BaseModel

from ..maze.models import Maze, Position
from .models import NO_PATH, RaceConfig, RaceResult


logger = logging.getLogger(__name__)


class RaceTrack(BaseModel):
    """
    Breadth-first search helpers over a maze with unit step cost.

    Attributes:
        maze: The track to race on
    """

    maze: Maze

    def distances_from(self, origins: Iterable[Position]) -> Dict[Position, int]:
        """BFS step counts from the nearest of `origins` to every reachable open cell."""
        dist: Dict[Position, int] = {}
        queue: deque = deque()
        for origin in origins:
            if origin not in dist:
                dist[origin] = 0
                queue.append(origin)

        while queue:
            current = queue.popleft()
            for neighbor in self.maze.neighbors(current):
                if neighbor not in dist:
                    dist[neighbor] = dist[current] + 1
                    queue.append(neighbor)

        return dist

    def shortest_path(self) -> int:
        """Steps from start to the nearest goal, or NO_PATH."""
        from_start = self.distances_from([self.maze.start])
        reached = [from_start[g] for g in self.maze.goals if g in from_start]
        return min(reached) if reached else NO_PATH

    def tally_shortcuts(self, max_duration: int) -> Dict[int, int]:
        """
        Count shortcuts by how many steps they save.

        A shortcut jumps from open cell p to open cell q, at Manhattan
        distance 2..max_duration, ignoring walls in between. Only positive
        savings are counted.
        """
        from_start = self.distances_from([self.maze.start])
        to_goal = self.distances_from(self.maze.goals)
        best = min((from_start[g] for g in self.maze.goals if g in from_start), default=NO_PATH)

        savings: Counter = Counter()
        if best == NO_PATH or max_duration < 2:
            return dict(savings)

        for p, head in from_start.items():
            for dr in range(-max_duration, max_duration + 1):
                span = max_duration - abs(dr)
                for dc in range(-span, span + 1):
                    d = abs(dr) + abs(dc)
                    if d < 2:
                        continue
                    q = Position(p.row + dr, p.col + dc)
                    tail = to_goal.get(q)
                    if tail is None:
                        continue
                    saving = best - (head + d + tail)
                    if saving > 0:
                        savings[saving] += 1

        logger.debug(f"Tallied {sum(savings.values())} shortcuts over {len(from_start)} cells")
        return dict(sorted(savings.items()))

    def count_shortcuts(self, max_duration: int, min_saving: int) -> int:
        """Number of shortcuts saving at least `min_saving` steps."""
        tally = self.tally_shortcuts(max_duration)
        return sum(n for saving, n in tally.items() if saving >= min_saving)

    def solve(self, config: Optional[RaceConfig] = None, source: Optional[str] = None) -> RaceResult:
        """Run the shortest path and shortcut tally and package a RaceResult."""
        config = config or RaceConfig()
        best = self.shortest_path()
        tally = self.tally_shortcuts(config.cheat_duration) if best != NO_PATH else {}

        return RaceResult(
            input=source,
            reachable=best != NO_PATH,
            shortest_path=best,
            cheat_duration=config.cheat_duration,
            min_saving=config.min_saving,
            shortcuts=sum(n for saving, n in tally.items() if saving >= config.min_saving),
            savings=tally,
        )
