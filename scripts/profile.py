#!/usr/bin/env python3
"""
Timing comparison of the natural breaks engines.

Usage: uv run scripts/profile.py A B S T K

Where:
- A: Minimum dataset size
- B: Maximum dataset size
- S: Number of size points to test
- T: Number of trials per size
- K: Number of breaks

Outputs CSV format: N,M,quadratic_mean,loglinear_mean,quadratic_std,loglinear_std
where M is the mean number of distinct values the engines actually see.
"""

import sys
import time

import numpy as np

import natural_breaks

ENGINES = {
    "quadratic": natural_breaks.natural_breaks_quadratic,
    "loglinear": natural_breaks.natural_breaks,
}


def generate_test_data(n: int, rng: np.random.Generator) -> np.ndarray:
    """Three normal modes rounded to 2 decimals, so duplicates occur."""
    data = np.concatenate(
        [
            rng.normal(0, 1, n // 3),
            rng.normal(10, 2, n // 3),
            rng.normal(20, 1, n - 2 * (n // 3)),
        ]
    )
    return np.round(data, 2)


def profile_size(n: int, k: int, trials: int) -> dict:
    """Profile both engines for a given dataset size."""
    results = {name: [] for name in ENGINES}
    n_unique = []

    for trial in range(trials):
        rng = np.random.default_rng(42 + trial)
        data = generate_test_data(n, rng)
        n_unique.append(np.unique(data).size)

        for name, func in ENGINES.items():
            start = time.perf_counter()
            func(data, k)
            results[name].append(time.perf_counter() - start)

    stats = {"m": float(np.mean(n_unique))}
    for name, times in results.items():
        stats[f"{name}_mean"] = float(np.mean(times))
        stats[f"{name}_std"] = float(np.std(times))
    return stats


def main():
    if len(sys.argv) != 6:
        print("Usage: profile.py A B S T K", file=sys.stderr)
        print("  A: Minimum dataset size", file=sys.stderr)
        print("  B: Maximum dataset size", file=sys.stderr)
        print("  S: Number of size points to test", file=sys.stderr)
        print("  T: Number of trials per size", file=sys.stderr)
        print("  K: Number of breaks", file=sys.stderr)
        sys.exit(1)

    try:
        A, B, S, T, K = (int(arg) for arg in sys.argv[1:])
    except ValueError:
        print("Error: All arguments must be integers", file=sys.stderr)
        sys.exit(1)

    if A <= 0 or B <= A or S <= 0 or T <= 0 or K <= 0:
        print("Error: Invalid argument values", file=sys.stderr)
        sys.exit(1)

    # compile both engines before timing anything
    warmup = generate_test_data(3 * K + 3, np.random.default_rng(0))
    for func in ENGINES.values():
        func(warmup, K)

    sizes = np.unique(np.round(np.geomspace(A, B, S)).astype(int))

    print("N,M,quadratic_mean,loglinear_mean,quadratic_std,loglinear_std")
    for n in sizes:
        stats = profile_size(n, K, T)
        print(
            f"{n},{stats['m']:.1f},{stats['quadratic_mean']:.6f},{stats['loglinear_mean']:.6f},"
            f"{stats['quadratic_std']:.6f},{stats['loglinear_std']:.6f}"
        )


if __name__ == "__main__":
    main()
