"""
Metrics and analysis utilities for a solved cauldron.
"""

from typing import Optional

import numpy as np

from .actions import ACTIONS
from .bitmath import STATE_COUNT
from .fungal import evolve_batch
from .solver import SolutionTable


def table_statistics(table: SolutionTable) -> dict:
    """
    Summarize reachability and path lengths.

    Args:
        table: Solved table

    Returns:
        Dictionary with reached/unreached counts and path length statistics
    """
    lengths = [len(path) for _, path in table.reached()]

    return {
        "reached": len(lengths),
        "unreached": STATE_COUNT - len(lengths),
        "max_path_length": max(lengths, default=-1),
        "mean_path_length": float(np.mean(lengths)) if lengths else 0.0,
        "depth_histogram": table.depth_histogram(),
    }


def action_usage(table: SolutionTable) -> dict[str, int]:
    """
    Count how often each action appears across all recorded paths.

    Returns:
        Mapping from action code to count, in canonical order
    """
    counts = {action.code: 0 for action in ACTIONS}
    for _, path in table.reached():
        for action in path:
            counts[action.code] += 1
    return counts


def convergence_statistics(values: Optional[np.ndarray] = None) -> dict:
    """
    Measure how long the fungal automaton takes to settle.

    Args:
        values: Starting patterns (defaults to all 32768)

    Returns:
        Dictionary with generation count statistics
    """
    if values is None:
        values = np.arange(STATE_COUNT, dtype=np.int64)
    values = np.asarray(values, dtype=np.int64)

    fixed_points, generations = evolve_batch(values)
    counts = np.bincount(generations) if generations.size else np.zeros(0, dtype=np.int64)

    return {
        "inputs": int(values.size),
        "max_generations": int(generations.max()) if generations.size else 0,
        "mean_generations": float(generations.mean()) if generations.size else 0.0,
        "still_lifes": int(np.sum(generations == 0)),
        "distinct_fixed_points": int(np.unique(fixed_points).size),
        "generation_histogram": {i: int(c) for i, c in enumerate(counts) if c},
    }


def compute_all_metrics(table: SolutionTable, include_convergence: bool = True) -> dict:
    """
    Compute all available metrics.

    Args:
        table: Solved table
        include_convergence: Also run the automaton over every input pattern

    Returns:
        Comprehensive dictionary of all metrics
    """
    metrics = {
        "table": table_statistics(table),
        "actions": action_usage(table),
    }
    if include_convergence:
        metrics["convergence"] = convergence_statistics()
    return metrics


def print_metrics_summary(metrics: dict) -> None:
    """
    Print formatted metrics summary.

    Args:
        metrics: Output from compute_all_metrics
    """
    stats = metrics["table"]

    print("\n=== Cauldron Search Summary ===\n")
    print(f"found {stats['reached']} solutions, at most {stats['max_path_length']} long")

    print("\nStates:")
    print(f"  Reached: {stats['reached']}")
    print(f"  Unreached: {stats['unreached']}")
    print(f"  Mean path length: {stats['mean_path_length']:.2f}")

    print("\nPath lengths:")
    for depth, count in stats["depth_histogram"].items():
        print(f"  {depth:3d}: {count}")

    print("\nAction usage:")
    for code, count in metrics["actions"].items():
        print(f"  {code}: {count}")

    if "convergence" in metrics:
        conv = metrics["convergence"]
        print("\nFungal automaton:")
        print(f"  Inputs: {conv['inputs']}")
        print(f"  Max generations: {conv['max_generations']}")
        print(f"  Mean generations: {conv['mean_generations']:.3f}")
        print(f"  Still lifes: {conv['still_lifes']}")
        print(f"  Distinct fixed points: {conv['distinct_fixed_points']}")

    print()
