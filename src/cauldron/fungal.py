"""
Fungal automaton driving the second stage of the catalyst transformation.

Fifteen boolean cells sit on a ring (cell 14 neighbours cell 0). Each
generation is computed from the previous one with a local rule looking two
cells either side:

    set cell   survives if (right set or right+2 clear) and (left set or left-2 clear)
    clear cell is born   if left and right are both set

Neighbour lookup wraps modulo 15 in both directions.
"""

from typing import Union

import numpy as np

from .bitmath import STATE_BITS, STATE_COUNT, wrap_index

_SHIFTS = np.arange(STATE_BITS, dtype=np.int64)


def cells_from_int(values: Union[int, np.ndarray]) -> np.ndarray:
    """
    Unpack 15-bit values into boolean cells.

    Args:
        values: Scalar or array of integers in [0, 32767]

    Returns:
        Boolean array of shape [..., 15], cell i holding bit i
    """
    values = np.asarray(values, dtype=np.int64)
    return ((values[..., None] >> _SHIFTS) & 1).astype(bool)


def cells_to_int(cells: np.ndarray) -> np.ndarray:
    """Pack boolean cells [..., 15] back into integers (cell i -> bit i)."""
    return (cells.astype(np.int64) << _SHIFTS).sum(axis=-1)


def next_cells(cells: np.ndarray) -> np.ndarray:
    """
    Apply the local rule once along the last axis.

    Works for a single ring [15] or a batch of rings [N, 15].

    Args:
        cells: Boolean cell array

    Returns:
        Next generation, same shape as cells
    """
    # np.roll is circular, so index -1 is cell 14 and index 15 is cell 0
    right = np.roll(cells, -1, axis=-1)
    right2 = np.roll(cells, -2, axis=-1)
    left = np.roll(cells, 1, axis=-1)
    left2 = np.roll(cells, 2, axis=-1)

    survive = (right | ~right2) & (left | ~left2)
    born = left & right

    return np.where(cells, survive, born)


class FungalAutomaton:
    """
    One generation of the 15-cell ring.

    Instances are immutable; next() returns a new automaton.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells) -> None:
        cells = np.array(cells, dtype=bool)
        if cells.shape != (STATE_BITS,):
            raise ValueError(f"expected {STATE_BITS} cells, got shape {cells.shape}")
        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def from_int(cls, value: int) -> "FungalAutomaton":
        """Create an automaton whose cell i is bit i of value."""
        if not 0 <= value < STATE_COUNT:
            raise ValueError(f"value must be in [0, {STATE_COUNT - 1}], got {value}")
        return cls(cells_from_int(value))

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cells."""
        return self._cells

    def __int__(self) -> int:
        return int(cells_to_int(self._cells))

    def __index__(self) -> int:
        return int(self)

    def __getitem__(self, index: int) -> bool:
        return bool(self._cells[wrap_index(index)])

    def __len__(self) -> int:
        return STATE_BITS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FungalAutomaton):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(int(self))

    def __repr__(self) -> str:
        # Highest cell first, like a binary literal
        pattern = "".join("1" if c else "0" for c in self._cells[::-1])
        return f"FungalAutomaton(0b{pattern})"

    def next(self) -> "FungalAutomaton":
        """Compute the following generation."""
        return FungalAutomaton(next_cells(self._cells))

    def converge(self, max_generations: int = STATE_COUNT) -> tuple["FungalAutomaton", int]:
        """
        Iterate next() until two successive generations are identical.

        Args:
            max_generations: Upper bound on pattern-changing generations.
                The default is the number of distinct patterns, past which
                the sequence can only be cycling.

        Returns:
            (fixed point, number of generations that changed the pattern)

        Raises:
            RuntimeError: If no fixed point is reached within the bound
        """
        current = self
        generations = 0
        while True:
            following = current.next()
            if following == current:
                return current, generations
            generations += 1
            if generations > max_generations:
                raise RuntimeError(
                    f"automaton starting at {int(self)} did not converge "
                    f"within {max_generations} generations"
                )
            current = following

    def history(self, max_generations: int = STATE_COUNT) -> list["FungalAutomaton"]:
        """
        All generations from this one up to and including the fixed point.

        Args:
            max_generations: Same bound as converge()

        Returns:
            List of automata; the last element is the fixed point
        """
        _, generations = self.converge(max_generations)
        generations_seen = [self]
        for _ in range(generations):
            generations_seen.append(generations_seen[-1].next())
        return generations_seen


def evolve_batch(
    values: Union[list[int], np.ndarray],
    max_generations: int = STATE_COUNT,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Run many automata to their fixed points at once.

    Rows that have settled drop out of the working set, so the cost is
    driven by the slowest-converging inputs only.

    Args:
        values: 1-D array of 15-bit starting patterns
        max_generations: Same bound as FungalAutomaton.converge()

    Returns:
        fixed_points: Converged pattern for each input [N]
        generations: Pattern-changing generations for each input [N]

    Raises:
        RuntimeError: If any input exceeds max_generations
    """
    values = np.asarray(values, dtype=np.int64)
    if values.ndim != 1:
        raise ValueError(f"values must be 1-D, got shape {values.shape}")
    if values.size and (values.min() < 0 or values.max() >= STATE_COUNT):
        raise ValueError(f"values must be in [0, {STATE_COUNT - 1}]")

    cells = cells_from_int(values)
    generations = np.zeros(values.shape, dtype=np.int64)
    active = np.ones(values.shape, dtype=bool)

    while active.any():
        idx = np.flatnonzero(active)
        current = cells[idx]
        following = next_cells(current)
        changed = np.any(following != current, axis=-1)

        cells[idx] = following
        generations[idx[changed]] += 1
        active[idx[~changed]] = False

        if np.any(generations[idx] > max_generations):
            raise RuntimeError(
                f"automaton did not converge within {max_generations} generations"
            )

    return cells_to_int(cells), generations
