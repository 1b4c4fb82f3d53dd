"""
Visualization utilities for cauldron searches.

Provides a depth histogram of the solution table and space-time diagrams
of the fungal automaton run by the catalyst.
"""

from pathlib import Path
from typing import Union

import numpy as np
import matplotlib.pyplot as plt

from .bitmath import highest_set_bit
from .fungal import FungalAutomaton
from .liquid import LiquidState


def automaton_history_array(value: int) -> np.ndarray:
    """
    Space-time diagram of the automaton starting at `value`.

    Rows are generations (first row is the start pattern, last row the
    fixed point); columns are cells with cell 14 on the left.

    Args:
        value: Starting 15-bit pattern

    Returns:
        Boolean array [generations + 1, 15]
    """
    history = FungalAutomaton.from_int(value).history()
    return np.stack([automaton.cells[::-1] for automaton in history])


def catalyst_trace(state: Union[int, LiquidState]) -> np.ndarray:
    """
    Space-time diagram of the automaton run when a catalyst is added.

    The residual pattern below the top bit, after the carry/shift step,
    is what the automaton evolves.
    """
    staged = LiquidState(int(state)).catalyst_stage_one().value
    top = highest_set_bit(staged)
    residual = staged & ~(1 << top) if top >= 0 else staged
    return automaton_history_array(residual)


def save_catalyst_trace(
    state: Union[int, LiquidState],
    path: Union[str, Path],
    scale: int = 16,
) -> None:
    """
    Save the catalyst space-time diagram as an image.

    Args:
        state: Liquid state the catalyst is added to
        path: Output image path
        scale: Pixels per cell
    """
    diagram = catalyst_trace(state).astype(np.uint8)
    # Nearest-neighbour upscale so single cells stay visible
    image = np.kron(diagram, np.ones((scale, scale), dtype=np.uint8))
    plt.imsave(path, image, cmap="binary", vmin=0, vmax=1)


def plot_depth_histogram(
    histogram: dict[int, int],
    path: Union[str, Path],
    title: str = "States by shortest path length",
) -> None:
    """
    Save a bar chart of reached states per path length.

    Args:
        histogram: Mapping from path length to state count
        path: Output image path
        title: Plot title
    """
    depths = sorted(histogram)
    counts = [histogram[d] for d in depths]

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(depths, counts, color="tab:purple")
    ax.set_xlabel("Path length")
    ax.set_ylabel("States")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
