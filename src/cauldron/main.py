"""
Command-line interface for the cauldron search.

Usage:
    python -m cauldron.main --help
    python -m cauldron.main --output results.txt --print-metrics
    python -m cauldron.main --evaluate WEFBCSN
"""

import argparse
import json
import sys
from typing import Optional

from .actions import apply_path, parse_path
from .config import Config
from .metrics import compute_all_metrics, print_metrics_summary, table_statistics
from .results import write_results
from .solver import Solver
from .visualization import plot_depth_histogram, save_catalyst_trace


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="Find the shortest brewing sequence for every cauldron liquid state",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Output options
    parser.add_argument(
        "--output", type=str, default="results.txt", dest="output_path",
        help="Path of the results file"
    )
    parser.add_argument(
        "--include-unreached", action="store_true",
        help="Also write a line for unreached states"
    )
    parser.add_argument(
        "--unreached-marker", type=str, default=None,
        help="Text written for unreached states"
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    # Analysis options
    parser.add_argument(
        "--print-metrics", action="store_true",
        help="Print all metrics at end"
    )
    parser.add_argument(
        "--save-metrics", type=str, default=None,
        help="Save metrics to JSON file"
    )
    parser.add_argument(
        "--plot-depths", type=str, default=None,
        help="Save a histogram of path lengths to this image"
    )

    # Single-state tools
    parser.add_argument(
        "--evaluate", type=str, default=None, metavar="CODES",
        help="Print the state reached by an action code string and exit"
    )
    parser.add_argument(
        "--trace-catalyst", type=int, default=None, metavar="STATE",
        help="Save the automaton diagram for adding a catalyst to STATE and exit"
    )
    parser.add_argument(
        "--trace-output", type=str, default="catalyst_trace.png",
        help="Image path for --trace-catalyst"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.evaluate is not None:
        try:
            state = apply_path(parse_path(args.evaluate))
        except ValueError as e:
            print(f"Invalid path: {e}", file=sys.stderr)
            return 1
        print(f"{state.value:05d}, {args.evaluate}")
        return 0

    if args.trace_catalyst is not None:
        try:
            save_catalyst_trace(args.trace_catalyst, args.trace_output)
        except ValueError as e:
            print(f"Invalid state: {e}", file=sys.stderr)
            return 1
        print(f"Catalyst trace saved to {args.trace_output}")
        return 0

    args.show_progress = not args.no_progress
    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    print("Cauldron search")
    print(f"  Output: {config.output_path}")
    print()

    solver = Solver(config)
    table = solver.run()

    write_results(
        table,
        config.output_path,
        include_unreached=config.include_unreached,
        unreached_marker=config.unreached_marker,
    )

    stats = table_statistics(table)
    print(f"found {stats['reached']} solutions, at most {stats['max_path_length']} long")

    if args.print_metrics or args.save_metrics:
        metrics = compute_all_metrics(table)

        if args.print_metrics:
            print_metrics_summary(metrics)

        if args.save_metrics:
            with open(args.save_metrics, "w") as f:
                json.dump(metrics, f, indent=2)
            print(f"Metrics saved to {args.save_metrics}")

    if args.plot_depths:
        plot_depth_histogram(stats["depth_histogram"], args.plot_depths)
        print(f"Depth histogram saved to {args.plot_depths}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
