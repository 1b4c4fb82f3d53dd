"""
Breadth-first search over the whole liquid data space.

Starting from plain water, every action is applied to every state of the
current frontier in canonical order. The first path reaching a state is
kept; since the frontier is processed level by level, that path is a
shortest one, and among shortest paths the canonically first.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

import numpy as np
from tqdm import tqdm

from .actions import ACTIONS, Action
from .bitmath import STATE_COUNT
from .config import Config
from .liquid import WATER, LiquidState

Path = tuple[Action, ...]
StateKey = Union[int, LiquidState]


class SolutionTable:
    """
    Shortest known action path for each of the 32768 states.

    Entries are written once, on first discovery, and never changed.
    Unreached states hold None.
    """

    def __init__(self) -> None:
        self._paths: list[Optional[Path]] = [None] * STATE_COUNT

    @staticmethod
    def _index(state: StateKey) -> int:
        index = int(state)
        if not 0 <= index < STATE_COUNT:
            raise ValueError(f"state must be in [0, {STATE_COUNT - 1}], got {index}")
        return index

    def __len__(self) -> int:
        return STATE_COUNT

    def __getitem__(self, state: StateKey) -> Optional[Path]:
        return self._paths[self._index(state)]

    def is_reached(self, state: StateKey) -> bool:
        return self._paths[self._index(state)] is not None

    def record(self, state: StateKey, path: Sequence[Action]) -> None:
        """
        Store the path for a newly discovered state.

        Raises:
            ValueError: If the state is out of range or already has a path
        """
        index = self._index(state)
        if self._paths[index] is not None:
            raise ValueError(f"state {index:05d} already has a path")
        self._paths[index] = tuple(path)

    def reached(self) -> Iterator[tuple[int, Path]]:
        """Iterate (state, path) for reached states in ascending state order."""
        for state, path in enumerate(self._paths):
            if path is not None:
                yield state, path

    def unreached(self) -> list[int]:
        """States no action sequence reaches."""
        return [state for state, path in enumerate(self._paths) if path is None]

    @property
    def reached_count(self) -> int:
        return sum(1 for path in self._paths if path is not None)

    @property
    def max_path_length(self) -> int:
        """Longest recorded path, or -1 if nothing is reached."""
        return max((len(path) for path in self._paths if path is not None), default=-1)

    def depth_histogram(self) -> dict[int, int]:
        """Number of reached states per path length."""
        histogram: dict[int, int] = {}
        for _, path in self.reached():
            histogram[len(path)] = histogram.get(len(path), 0) + 1
        return dict(sorted(histogram.items()))


@dataclass(frozen=True)
class SearchRound:
    """Statistics of one BFS level."""

    depth: int
    frontier_size: int
    discovered: int


class Solver:
    """
    Level-synchronized BFS from plain water.

    Attributes:
        config: Run configuration
        actions: Actions tried at each state, in tie-breaking order
        rounds: Per-depth statistics of the last run
        table: Result of the last run, None before run()
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        actions: Sequence[Action] = ACTIONS,
    ):
        self.config = config if config is not None else Config()
        self.actions = tuple(actions)
        self.rounds: list[SearchRound] = []
        self.table: Optional[SolutionTable] = None

    def run(self, show_progress: Optional[bool] = None) -> SolutionTable:
        """
        Search the whole state space.

        Args:
            show_progress: Whether to show a progress bar (defaults to config)

        Returns:
            Table of shortest paths
        """
        if show_progress is None:
            show_progress = self.config.show_progress

        table = SolutionTable()
        table.record(WATER, ())
        frontier: list[tuple[Path, LiquidState]] = [((), WATER)]
        self.rounds = []

        with tqdm(total=STATE_COUNT, desc="Searching", unit="state", disable=not show_progress) as progress:
            progress.update(1)
            depth = 0
            while frontier:
                depth += 1
                next_frontier: list[tuple[Path, LiquidState]] = []

                for path, state in frontier:
                    for action in self.actions:
                        result = action.apply(state)
                        if not table.is_reached(result):
                            new_path = path + (action,)
                            table.record(result, new_path)
                            next_frontier.append((new_path, result))

                self.rounds.append(SearchRound(depth, len(frontier), len(next_frontier)))
                progress.update(len(next_frontier))
                frontier = next_frontier

        self.table = table
        return table


def run_search(show_progress: bool = False) -> SolutionTable:
    """Build the solution table for all states."""
    return Solver().run(show_progress=show_progress)


def shortest_distances(start: StateKey = 0, actions: Sequence[Action] = ACTIONS) -> np.ndarray:
    """
    Plain BFS distance from `start` to every state, without path bookkeeping.

    Args:
        start: Starting state
        actions: Edges of the state graph

    Returns:
        Array [32768] of distances, -1 where unreachable
    """
    distances = np.full(STATE_COUNT, -1, dtype=np.int64)
    start = LiquidState(int(start)).value
    distances[start] = 0
    queue = deque([start])

    while queue:
        state = queue.popleft()
        liquid = LiquidState(state)
        for action in actions:
            neighbour = int(action.apply(liquid))
            if distances[neighbour] < 0:
                distances[neighbour] = distances[state] + 1
                queue.append(neighbour)

    return distances
