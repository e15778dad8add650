"""Command-line interface for the propagation Sudoku solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import Benchmark, Visualizer
from .core.board import SudokuBoard
from .core.errors import InvalidPuzzleError
from .core.render import render, render_candidates
from .solvers import PropagationSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokuprop",
        description="Sudoku solver using constraint propagation only",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle, marking forced cells after each iteration
  python -m sudokuprop.cli solve 530070000600195000... --trace --hints

  # Compare naked singles with full propagation on the built-in puzzles
  python -m sudokuprop.cli benchmark --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log every deduction"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "puzzle", type=str,
        help="Puzzle string (81 digits, 0 for empty cells)"
    )
    solve_parser.add_argument(
        "--hints", action="store_true",
        help="Mark empty cells that have a single candidate"
    )
    solve_parser.add_argument(
        "--candidates", "-c", action="store_true",
        help="Print the candidate table when solving stops"
    )
    solve_parser.add_argument(
        "--trace", "-t", action="store_true",
        help="Print the grid after every iteration"
    )
    solve_parser.add_argument(
        "--naked-only", action="store_true",
        help="Disable unique-position (hidden single) reduction"
    )
    solve_parser.add_argument(
        "--no-color", action="store_true",
        help="Do not use ANSI colors"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run the built-in puzzle benchmark")
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "solve":
        return cmd_solve(args)
    return cmd_benchmark(args)


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except InvalidPuzzleError as e:
        print(f"Error parsing puzzle: {e}")
        return 1

    color = not args.no_color

    print("Input puzzle:")
    print(render(board, color=color))
    print()

    def show_iteration(iteration, current, candidates):
        print(f"Iteration {iteration} ({current.count_empty()} empty):")
        print(render(current, candidates, show_hints=args.hints, color=color))
        print()

    solver = PropagationSolver(
        use_unique_positions=not args.naked_only,
        on_iteration=show_iteration if args.trace else None,
    )
    result, stats = solver.solve(board)

    if result.solved:
        print(f"✓ Solved in {stats.iterations} iterations ({stats.time_seconds:.4f}s)")
        print(render(result.board, color=color))
        return 0

    print(f"✗ Failed: {result.reason} ({result.remaining} empty cells left)")
    print(render(result.board, result.candidates, show_hints=args.hints, color=color))
    if args.candidates:
        print()
        print(render_candidates(result.board, result.candidates, color=color))
    return 1


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    benchmark = Benchmark()

    print("=" * 60)
    print("PROPAGATION BENCHMARK")
    print("=" * 60)
    print(f"Levels: {benchmark.levels}")
    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run(show_progress=not args.no_progress)
    summary = benchmark.get_summary()

    print("\nBy Algorithm:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Solved: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Stalled: {stats['stalled']}  Contradictions: {stats['contradictions']}")
        print(f"  Avg Empty Left: {stats['avg_remaining']:.1f}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")

    benchmark.save_results(args.output)

    visualizer = Visualizer(results, args.output)
    visualizer.generate_summary_table()
    if not args.no_charts:
        print("\nGenerating charts...")
        for chart in visualizer.generate_all():
            print(f"  - {chart}")

    print(f"\nResults saved to {args.output}/")
    return 0


if __name__ == "__main__":
    sys.exit(main())
