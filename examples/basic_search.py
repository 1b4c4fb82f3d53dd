#!/usr/bin/env python3
"""
Basic cauldron search example.

This script demonstrates:
1. Brewing a known sequence by hand
2. Running the full search
3. Looking up the shortest path to a few states
4. Measuring the automaton's convergence
"""

from cauldron import WATER, Ingredient, Solver, render_path
from cauldron.config import Config
from cauldron.metrics import compute_all_metrics, print_metrics_summary


def main():
    print("=" * 60)
    print("Cauldron brewing")
    print("Basic Search Example")
    print("=" * 60)
    print()

    # Brew by hand: water, spider eye, nether wart
    state = WATER.dilute().apply_ingredient(Ingredient.SPIDER_EYE)
    print(f"Water + spider eye:        {state.value:05d} bits={state.bits}")
    state = state.apply_catalyst()
    print(f"... + nether wart:         {state.value:05d} bits={state.bits}")
    print()

    # Full search
    solver = Solver(Config(show_progress=True))
    table = solver.run()

    print()
    print("Search rounds:")
    for r in solver.rounds:
        print(f"  depth {r.depth:2d}: frontier={r.frontier_size:5d} new={r.discovered}")
    print()

    for target in (1088, 16384, 20485):
        path = table[target]
        shown = render_path(path) if path is not None else "unreachable"
        print(f"  {target:05d}: {shown}")

    metrics = compute_all_metrics(table)
    print_metrics_summary(metrics)


if __name__ == "__main__":
    main()
