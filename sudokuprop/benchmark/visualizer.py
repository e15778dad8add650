"""Visualization utilities for benchmark results."""

from __future__ import annotations
import logging
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult

log = logging.getLogger(__name__)


class Visualizer:
    """
    Visualization generator for propagation benchmark results.

    Creates charts comparing solve rate, leftover cells and progress per
    iteration across strategies and puzzle levels.
    """

    # Color palette for algorithms
    COLORS = {
        "Naked Singles": "#3498db",  # Blue
        "Propagation": "#2ecc71",    # Green
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def _levels(self) -> List[str]:
        # Keep the order in which levels were benchmarked
        return list(dict.fromkeys(r.level for r in self.results))

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files, empty if there are
            no results to plot.
        """
        if not self.results:
            log.warning("No benchmark results, skipping charts")
            return []

        return [
            self.plot_solve_rate_heatmap(),
            self.plot_remaining_by_level(),
            self.plot_progress_curves(),
        ]

    def plot_solve_rate_heatmap(self) -> str:
        """Heatmap of solve rate (%) per level and algorithm."""
        algorithms = self._algorithms()
        levels = self._levels()

        rates = np.zeros((len(algorithms), len(levels)))
        for i, algo in enumerate(algorithms):
            for j, level in enumerate(levels):
                runs = [r for r in self.results if r.algorithm == algo and r.level == level]
                if runs:
                    rates[i, j] = sum(1 for r in runs if r.solved) / len(runs) * 100

        fig, ax = plt.subplots(figsize=(8, 3 + 0.5 * len(algorithms)))
        sns.heatmap(rates, annot=True, fmt=".0f", cmap="RdYlGn", vmin=0, vmax=100,
                    xticklabels=[level.capitalize() for level in levels],
                    yticklabels=algorithms, cbar_kws={"label": "Solved (%)"}, ax=ax)
        ax.set_xlabel('Level', fontsize=12)
        ax.set_ylabel('Algorithm', fontsize=12)
        ax.set_title('Solve Rate by Level and Algorithm', fontsize=14, fontweight='bold')

        return self._save("solve_rate_heatmap.png")

    def plot_remaining_by_level(self) -> str:
        """Grouped bar chart of empty cells left when solving stopped."""
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = self._algorithms()
        levels = self._levels()

        x = np.arange(len(levels))
        width = 0.8 / len(algorithms)

        for i, algo in enumerate(algorithms):
            remaining = []
            for level in levels:
                values = [
                    r.remaining for r in self.results
                    if r.algorithm == algo and r.level == level
                ]
                remaining.append(np.mean(values) if values else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, remaining, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Level', fontsize=12)
        ax.set_ylabel('Average Empty Cells Left', fontsize=12)
        ax.set_title('Unsolved Cells by Level and Algorithm', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([level.capitalize() for level in levels])
        ax.legend(title='Algorithm')
        ax.set_ylim(bottom=0)

        return self._save("remaining_by_level.png")

    def plot_progress_curves(self) -> str:
        """Empty-cell count after each iteration, one line per run."""
        algorithms = self._algorithms()
        fig, axes = plt.subplots(1, len(algorithms), figsize=(6 * len(algorithms), 5),
                                 sharey=True, squeeze=False)

        palette = dict(zip(self._levels(), sns.color_palette("husl", len(self._levels()))))

        for ax, algo in zip(axes[0], algorithms):
            seen = set()
            for r in self.results:
                if r.algorithm != algo:
                    continue
                label = r.level if r.level not in seen else None
                seen.add(r.level)
                ax.plot(range(len(r.history)), r.history, marker='o', markersize=3,
                        color=palette[r.level], label=label, alpha=0.8)

            ax.set_title(algo, fontsize=12, fontweight='bold')
            ax.set_xlabel('Iteration', fontsize=12)
            ax.legend(title='Level')

        axes[0][0].set_ylabel('Empty Cells', fontsize=12)
        axes[0][0].set_ylim(bottom=0)
        fig.suptitle('Propagation Progress per Iteration', fontsize=14, fontweight='bold')

        return self._save("progress_curves.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Solved | Stalled | Contradiction | Avg Time | Avg Iterations | Avg Empty Left |",
            "|-----------|--------|---------|---------------|----------|----------------|----------------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.status == "solved")
            stalled = sum(1 for r in algo_results if r.status == "stalled")
            contradictions = sum(1 for r in algo_results if r.status == "contradiction")

            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_iters = np.mean([r.iterations for r in algo_results])
            avg_left = np.mean([r.remaining for r in algo_results])

            lines.append(
                f"| {algo} | {solved}/{len(algo_results)} | {stalled} | {contradictions} "
                f"| {avg_time:.4f}s | {avg_iters:.1f} | {avg_left:.1f} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
