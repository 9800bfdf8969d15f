#!/usr/bin/env python3
"""
Benchmark the compiled sieve.

Compares:
1. primes_up_to with uint32 and uint64 output, first call (includes numba
   compilation) and warm calls
2. A numpy slice-assignment sieve as a baseline

Run at n=10^7 or 10^8 for a quick comparison.
"""

import argparse
import time
import numpy as np

from eratosthenes.primes import primes_up_to


def numpy_slicing_sieve(n: int) -> np.ndarray:
    """Baseline sieve using strided slice assignment."""
    flags = np.ones(n + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(n**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return np.flatnonzero(flags)


def benchmark(n: int, repeats: int = 3):
    """Run benchmark comparing the compiled sieve with the numpy baseline."""
    print("=" * 60)
    print(f"Sieve Benchmark: n = {n:,}")
    print("=" * 60)

    results = {}
    timings = {}

    for dtype in (np.uint32, np.uint64):
        name = np.dtype(dtype).name
        if n > np.iinfo(dtype).max:
            print(f"  {name}: skipped, n does not fit")
            continue

        print("-" * 60)
        print(f"primes_up_to, dtype={name}")
        print("-" * 60)

        t0 = time.time()
        results[name] = primes_up_to(n, dtype=dtype)
        print(f"  First call (with compilation): {time.time() - t0:.3f}s")

        warm = []
        for _ in range(repeats):
            t0 = time.time()
            primes_up_to(n, dtype=dtype)
            warm.append(time.time() - t0)
        timings[name] = min(warm)
        print(f"  Best of {repeats} warm calls: {timings[name]:.3f}s")
        print(f"  Result: {len(results[name]):,} primes, {results[name].nbytes / 1e6:.1f}MB")
        print()

    print("-" * 60)
    print("numpy slicing baseline")
    print("-" * 60)
    t0 = time.time()
    baseline = numpy_slicing_sieve(n)
    timings['numpy'] = time.time() - t0
    print(f"  {timings['numpy']:.3f}s")
    print()

    # ============================================================
    # Summary
    # ============================================================
    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    for name, seconds in timings.items():
        print(f"  {name:<8} {seconds:.3f}s")

    print()
    print("Verifying correctness...")
    for name, primes in results.items():
        if np.array_equal(primes, baseline):
            print(f"  {name}: OK ({len(primes):,} primes)")
        else:
            print(f"  {name}: MISMATCH! expected {len(baseline):,}, got {len(primes):,}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark the sieve')
    parser.add_argument('--n', type=float, default=1e7, help='Upper bound (inclusive)')
    parser.add_argument('--repeats', type=int, default=3, help='Warm calls per dtype')
    args = parser.parse_args()

    benchmark(int(args.n), args.repeats)
