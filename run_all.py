#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file regenerates the prime counting table, its figures,
and the verification report.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import yaml
import numpy as np
from pathlib import Path
import time

from eratosthenes.experiments.exp_prime_counting import run_prime_counting_experiment
from eratosthenes.experiments.verify_sieve import (
    verify_against_trial_division,
    verify_against_reference,
    verify_prefix_property,
    verify_dtype_agreement
)
from eratosthenes.plotting import plot_prime_counting, plot_relative_error


def main():
    parser = argparse.ArgumentParser(description='Run the sieve experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    dtype = np.dtype(config['dtype'])

    print("=" * 60)
    print("Sieve of Eratosthenes - Full Experiment Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  n = {config['n']:,}")
    print(f"  trial_n = {config['trial_n']:,}")
    print(f"  n_grid = {config['n_grid']}")
    print(f"  dtype = {dtype}")
    print()

    output_dir = Path(config['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Verification
    print("-" * 60)
    print("1. Verification")
    print("-" * 60)
    start = time.time()
    checks = {
        'trial division': verify_against_trial_division(config['trial_n']),
        'reference pi(x)': verify_against_reference(config['n']),
        'prefix': verify_prefix_property(config['n_grid']),
        'dtype agreement': verify_dtype_agreement(config['n']),
    }
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Prime counting table
    print("-" * 60)
    print("2. Prime Counting")
    print("-" * 60)
    start = time.time()
    df_counts = run_prime_counting_experiment(
        config['n_grid'],
        output_dir,
        dtype
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Generate Figures
    print("-" * 60)
    print("3. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Prime counting...")
    plot_prime_counting(df_counts, figures_dir / 'prime_counting.png')

    print("  - Relative error...")
    plot_relative_error(df_counts, figures_dir / 'relative_error.png')

    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print(f"\nFigures:")
    for f in sorted(figures_dir.glob('*.png')):
        print(f"  - figures/{f.name}")

    # Print key results
    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    print("\nPrime counts:")
    print(df_counts[['n', 'pi_n', 'rel_err_x_over_log_x', 'rel_err_li_x', 'seconds']].to_string(index=False))

    print("\nVerification:")
    for name, ok in checks.items():
        print(f"  {'✓' if ok else '✗'} {name}")

    if not all(checks.values()):
        sys.exit(1)


if __name__ == '__main__':
    main()
