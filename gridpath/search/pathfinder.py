"""
Weighted grid pathfinder.

Searches the (position, facing) state space of a maze where a forward step
and a 90 degree turn carry different costs, then recovers every cell that
lies on some minimum-cost path.
"""

import heapq
import logging
from itertools import count
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple
from pydantic import BaseModel, Field, PrivateAttr

from ..maze.models import Maze, Position
from .models import NO_PATH, Facing, State, MazeConfig, MazeResult


logger = logging.getLogger(__name__)


class WeightedPathfinder(BaseModel):
    """
    Dijkstra search over maze states with a turn penalty.

    Every state keeps the set of predecessors that reach it at its minimal
    distance, so all optimal paths can be walked back from the goal.

    Attributes:
        maze: The maze to search
        config: Step and turn costs plus the starting facing
    """

    maze: Maze
    config: MazeConfig = Field(default_factory=MazeConfig)

    _distances: Dict[State, int] = PrivateAttr(default_factory=dict)
    _predecessors: Dict[State, Set[State]] = PrivateAttr(default_factory=dict)
    _goal_states: List[State] = PrivateAttr(default_factory=list)
    _best_score: int = PrivateAttr(default=NO_PATH)
    _expanded: int = PrivateAttr(default=0)
    _searched: bool = PrivateAttr(default=False)

    @classmethod
    def create(cls, maze: Maze, config: Optional[MazeConfig] = None) -> "WeightedPathfinder":
        return cls(maze=maze, config=config or MazeConfig())

    @property
    def start(self) -> State:
        return State(self.maze.start, Facing(self.config.start_facing))

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def distances(self) -> Mapping[State, int]:
        """Read-only view of the distance table from the last search."""
        return MappingProxyType(self._distances)

    @property
    def predecessors(self) -> Mapping[State, Set[State]]:
        return MappingProxyType(self._predecessors)

    @property
    def expanded(self) -> int:
        """Number of states popped and expanded by the last search."""
        return self._expanded

    def transitions(self, state: State) -> List[Tuple[State, int]]:
        """Successor states of `state` with the cost of reaching each."""
        moves: List[Tuple[State, int]] = []

        ahead = state.facing.step(state.position)
        if self.maze.is_open(ahead):
            moves.append((State(ahead, state.facing), self.config.step_cost))

        moves.append((State(state.position, state.facing.rotate_clockwise()), self.config.turn_penalty))
        moves.append((State(state.position, state.facing.rotate_counterclockwise()), self.config.turn_penalty))

        return moves

    def _reset(self) -> None:
        self._distances = {}
        self._predecessors = {}
        self._goal_states = []
        self._best_score = NO_PATH
        self._expanded = 0

    def search(self) -> int:
        """
        Find the minimum cost from the start state to any goal position.

        Returns NO_PATH when no goal can be reached. Each call recomputes
        from scratch.
        """
        self._reset()
        goals = set(self.maze.goals)

        start = self.start
        self._distances[start] = 0
        self._predecessors[start] = set()

        tiebreak = count()
        queue: List[Tuple[int, int, State]] = [(0, next(tiebreak), start)]

        while queue:
            cost, _, state = heapq.heappop(queue)

            # Stale entry, a cheaper route was found after this was pushed
            if cost > self._distances[state]:
                continue

            if cost > self._best_score:
                break

            if state.position in goals:
                if cost < self._best_score:
                    logger.debug(f"New best score {cost} at {state}")
                    self._best_score = cost
                    self._goal_states = [state]
                else:
                    self._goal_states.append(state)
                continue

            self._expanded += 1

            for nxt, step_cost in self.transitions(state):
                new_cost = cost + step_cost
                if new_cost > self._best_score:
                    continue

                known = self._distances.get(nxt, NO_PATH)
                if new_cost < known:
                    self._distances[nxt] = new_cost
                    self._predecessors[nxt] = {state}
                    heapq.heappush(queue, (new_cost, next(tiebreak), nxt))
                elif new_cost == known:
                    self._predecessors[nxt].add(state)

        self._searched = True
        logger.debug(
            f"Search finished: best={self._best_score}, expanded={self._expanded}, "
            f"recorded={len(self._distances)}"
        )
        return self._best_score

    def _ensure_searched(self) -> None:
        if not self._searched:
            self.search()

    def optimal_states(self) -> Set[State]:
        """All states on at least one best-score path."""
        self._ensure_searched()

        seen: Set[State] = set(self._goal_states)
        stack = list(self._goal_states)
        while stack:
            state = stack.pop()
            for prev in self._predecessors.get(state, ()):
                if prev not in seen:
                    seen.add(prev)
                    stack.append(prev)

        return seen

    def reconstruct_optimal_cells(self) -> Set[Position]:
        """Distinct grid positions on at least one best-score path."""
        return {state.position for state in self.optimal_states()}

    def count_optimal_paths(self) -> int:
        """Number of distinct state sequences achieving the best score."""
        states = self.optimal_states()
        if not states:
            return 0

        # Predecessors always have a strictly lower distance, so increasing
        # distance is a topological order of the predecessor graph.
        ways: Dict[State, int] = {}
        for state in sorted(states, key=lambda s: self._distances[s]):
            preds = self._predecessors.get(state, set())
            ways[state] = sum(ways[p] for p in preds) if preds else 1

        return sum(ways[s] for s in self._goal_states)

    def solve(self, source: Optional[str] = None) -> MazeResult:
        """Run the search and package every answer as a MazeResult."""
        score = self.search()
        reachable = score != NO_PATH

        return MazeResult(
            input=source,
            reachable=reachable,
            lowest_score=score,
            optimal_tiles=len(self.reconstruct_optimal_cells()) if reachable else 0,
            optimal_paths=self.count_optimal_paths() if reachable else 0,
            states_expanded=self._expanded,
            config=self.config,
        )
