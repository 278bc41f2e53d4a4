"""
Layout Benchmark
================

Measures generation time and packing quality over a range of seeds.

Usage:
    python -m tools.benchmark_layout [--runs N] [--seed S] [--config PATH]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

import numpy as np
from loguru import logger

from brick_layout.layout_core.config_loader import LayoutConfig, load_config
from brick_layout.layout_core.layout import LayoutGenerator
from brick_layout.layout_core.layout_checks import check_layout
from brick_layout.layout_core.logger_setup import setup_logger


def benchmark_layouts(
    config: LayoutConfig,
    num_runs: int = 20,
    seed: int = 42
) -> dict:
    """
    Generate ``num_runs`` layouts with consecutive seeds.

    Args:
        config: Layout configuration.
        num_runs: Number of layouts to generate.
        seed: First seed; run i uses seed + i.

    Returns:
        Dict with timing and fill statistics.
    """
    generator = LayoutGenerator(config)
    elapsed = np.zeros(num_runs)
    counts = np.zeros(num_runs, dtype=np.int64)
    fills = np.zeros(num_runs)
    invalid_seeds = []

    for i in range(num_runs):
        run_seed = seed + i
        start = time.perf_counter()
        result = generator.generate(seed=run_seed)
        elapsed[i] = time.perf_counter() - start

        counts[i] = result.count
        fills[i] = result.fill_ratio
        if not check_layout(result.squares, result.bounding_box).valid:
            invalid_seeds.append(run_seed)

    return {
        "num_runs": num_runs,
        "mean_bricks": float(counts.mean()),
        "min_bricks": int(counts.min()),
        "max_bricks": int(counts.max()),
        "mean_fill": float(fills.mean()),
        "std_fill": float(fills.std()),
        "ms_per_run": float(elapsed.mean() * 1000),
        "invalid_seeds": invalid_seeds,
    }


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark brick layout generation")
    parser.add_argument("--runs", type=int, default=20, help="Number of layouts to generate")
    parser.add_argument("--seed", type=int, default=42, help="First seed")
    parser.add_argument("--config", type=str, default=None, help="Path to layout_config.yaml")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG instead of the configured level")

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logger(level="DEBUG" if args.verbose else config.logging.level)

    box = config.bounding_box
    print("=" * 50)
    print("BRICK LAYOUT BENCHMARK")
    print("=" * 50)
    print(f"Region:     {box.width:g} x {box.height:g}")
    print(f"Sizes:      {config.bricks.min_width:g}..{config.bricks.max_width:g} "
          f"step {config.bricks.width_step:g} ({config.bricks.size_count} sizes)")
    print()

    stats = benchmark_layouts(config, num_runs=args.runs, seed=args.seed)

    print(f"Runs:        {stats['num_runs']}")
    print(f"Bricks/run:  {stats['mean_bricks']:.1f} "
          f"(min {stats['min_bricks']}, max {stats['max_bricks']})")
    print(f"Fill ratio:  {stats['mean_fill']:.3f} +/- {stats['std_fill']:.3f}")
    print(f"ms/run:      {stats['ms_per_run']:.2f}")
    print("=" * 50)

    if stats["invalid_seeds"]:
        logger.error("Invalid layouts for seeds: {}", stats["invalid_seeds"])
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
