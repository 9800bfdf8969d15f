#!/usr/bin/env python3
"""
Verify the sieve against independent references.

Compares:
1. Every index in [0, n] against trial division
2. pi(10^k) against the published values
3. The prefix property across increasing bounds
4. uint32 and uint64 outputs

Run at small n first; trial division is O(n sqrt n).

Usage:
    python -m eratosthenes.experiments.verify_sieve --n 1e4
"""

import sys
import time
import numpy as np
from math import isqrt
from typing import List

from ..primes import primes_up_to, prime_flags_up_to, prime_count
from ..metrics import pi_reference


def is_prime_trial(m: int) -> bool:
    """Trial division primality test."""
    if m < 2:
        return False
    for d in range(2, isqrt(m) + 1):
        if m % d == 0:
            return False
    return True


def verify_against_trial_division(n: int, verbose: bool = True) -> bool:
    """Check the flags and the prime list for every index in [0, n]."""
    if verbose:
        print(f"\n=== Trial division check for n={n:,} ===")

    t0 = time.time()
    flags = prime_flags_up_to(n)
    primes = primes_up_to(n)
    if verbose:
        print(f"  Sieve: {time.time() - t0:.2f}s")

    trial = [is_prime_trial(m) for m in range(n + 1)]
    expected = [m for m in range(n + 1) if trial[m]]

    errors = 0
    for m in range(n + 1):
        if bool(flags[m]) != trial[m]:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at m={m}: sieve={bool(flags[m])}")

    if primes.tolist() != expected:
        errors += 1
        print(f"  MISMATCH in prime list: got {len(primes):,}, expected {len(expected):,}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {n + 1:,} indices match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_against_reference(n: int, verbose: bool = True) -> bool:
    """Check pi(10^k) for every reference bound <= n."""
    if verbose:
        print(f"\n=== Reference pi(x) check up to n={n:,} ===")

    ok = True
    for bound, expected in sorted(pi_reference.items()):
        if bound > n:
            break
        got = prime_count(bound)
        listed = len(primes_up_to(bound))
        match = got == expected and listed == expected
        ok = ok and match
        if verbose or not match:
            status = "✓" if match else f"✗ (expected {expected:,})"
            print(f"  pi({bound:,}) = {got:,} / listed {listed:,} {status}")

    return ok


def verify_prefix_property(n_values: List[int], verbose: bool = True) -> bool:
    """primes_up_to(n1) must be a prefix of primes_up_to(n2) for n1 <= n2."""
    if verbose:
        print(f"\n=== Prefix check over {len(n_values)} bounds ===")

    bounds = sorted(n_values)
    results = [primes_up_to(n) for n in bounds]

    ok = True
    for i in range(1, len(bounds)):
        shorter, longer = results[i - 1], results[i]
        if not np.array_equal(longer[:len(shorter)], shorter):
            ok = False
            print(f"  ✗ primes_up_to({bounds[i - 1]:,}) is not a prefix of "
                  f"primes_up_to({bounds[i]:,})")

    if verbose and ok:
        print(f"  ✓ All {len(bounds)} bounds nest")

    return ok


def verify_dtype_agreement(n: int, verbose: bool = True) -> bool:
    """uint32 and uint64 runs must hold the same values."""
    if verbose:
        print(f"\n=== dtype agreement for n={n:,} ===")

    p32 = primes_up_to(n, dtype=np.uint32)
    p64 = primes_up_to(n, dtype=np.uint64)
    ok = p32.dtype == np.uint32 and p64.dtype == np.uint64 and np.array_equal(p32, p64)

    if verbose:
        print(f"  {'✓' if ok else '✗'} {len(p64):,} primes, uint32 vs uint64")

    return ok


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify sieve correctness')
    parser.add_argument('--n', type=float, default=1e4, help='Upper bound (default: 1e4)')
    parser.add_argument('--full', action='store_true',
                        help='Also check reference pi(10^k) up to 1e8')
    args = parser.parse_args()

    n = int(args.n)

    print(f"Sieve Verification")
    print(f"n = {n:,}")
    print("=" * 50)

    trial_ok = verify_against_trial_division(n)
    reference_ok = verify_against_reference(max(n, 10**8) if args.full else n)
    prefix_ok = verify_prefix_property([0, 1, 2, 3, 10, 97, 100, n // 2, n])
    dtype_ok = verify_dtype_agreement(n)

    print("\n" + "=" * 50)
    if trial_ok and reference_ok and prefix_ok and dtype_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)
