"""
Profiling script for pyavl tree operations.

This script profiles insert, lookup and removal workloads to identify bottlenecks.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pyavl import AvlTree


def create_keys(n, seed=42):
    """Create n distinct keys in random order."""
    rng = np.random.default_rng(seed)
    return [int(k) for k in rng.permutation(n * 4)[:n]]


def profile_random_inserts():
    """Profile 100k inserts in random order."""
    tree = AvlTree()
    for key in create_keys(100_000):
        tree.insert(key)


def profile_sorted_inserts():
    """Profile 100k inserts in ascending order (rotation heavy)."""
    tree = AvlTree()
    for key in range(100_000):
        tree.insert(key)


def profile_lookups():
    """Profile 100k lookups, half hits and half misses."""
    keys = create_keys(50_000)
    tree = AvlTree()
    for key in keys:
        tree.insert(key)
    for key in keys:
        tree.contains(key)
        tree.contains(-key - 1)


def profile_mixed_workload():
    """Profile interleaved inserts and removals."""
    rng = np.random.default_rng(7)
    inserts = rng.random(200_000) < 0.6
    keys = rng.integers(0, 50_000, size=200_000)

    tree = AvlTree()
    for is_insert, key in zip(inserts, keys):
        if is_insert:
            tree.insert(int(key))
        else:
            tree.remove(int(key))


def profile_drain():
    """Profile removing every element of a 50k tree."""
    keys = create_keys(50_000)
    tree = AvlTree()
    for key in keys:
        tree.insert(key)
    for key in keys:
        tree.remove(key)


def benchmark_scenario(name, func):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    profiler = cProfile.Profile()

    start_time = time.time()
    profiler.enable()
    func()
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(20)

    print("\nTop 20 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def main():
    """Run all profiling scenarios."""
    print("pyavl Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Random Inserts (100k)", profile_random_inserts),
        ("Sorted Inserts (100k)", profile_sorted_inserts),
        ("Lookups (50k keys, 100k queries)", profile_lookups),
        ("Mixed Workload (200k operations)", profile_mixed_workload),
        ("Drain (50k removals)", profile_drain),
    ]

    profilers = {}
    for name, func in scenarios:
        profilers[name] = benchmark_scenario(name, func)

    print("\n" + "="*60)
    print("Saving detailed profiles...")
    print("="*60)

    for name, profiler in profilers.items():
        filename = f"profile_{name.lower().replace(' ', '_').replace('(', '').replace(')', '').replace(',', '')}.prof"
        profiler.dump_stats(filename)
        print(f"Saved: {filename}")

    print("\nTo view detailed profile, use:")
    print("  python -m pstats <profile_file>")
    print("  then type 'stats' or 'sort cumulative' and 'stats 50'")


if __name__ == "__main__":
    main()
