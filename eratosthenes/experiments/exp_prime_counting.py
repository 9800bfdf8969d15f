"""
Experiment: Prime Counting

Runs the sieve over a grid of bounds and compares pi(n) with the
x/ln(x) and li(x) approximations. Outputs a table and a CSV.
"""

import time
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Iterable

from ..primes import primes_up_to
from ..metrics import pi_over_log, log_integral, relative_error


def run_prime_counting_experiment(n_grid: Iterable[int], output_dir: Path,
                                  dtype=np.uint64) -> pd.DataFrame:
    """
    Count primes up to each bound in n_grid.

    Parameters
    ----------
    n_grid : iterable of int
        Upper bounds (inclusive). Duplicates are dropped.
    output_dir : Path
        Directory for prime_counting.csv.
    dtype : numpy unsigned integer dtype
        Element type passed to primes_up_to.

    Returns
    -------
    pd.DataFrame
        One row per bound, sorted by n.
    """
    bounds = sorted({int(n) for n in n_grid})
    print(f"Running prime counting experiment over {len(bounds)} bounds "
          f"(max n={bounds[-1] if bounds else 0:,}, dtype={np.dtype(dtype)})")

    rows = []
    for n in bounds:
        t0 = time.time()
        primes = primes_up_to(n, dtype=dtype)
        seconds = time.time() - t0

        pi_n = len(primes)
        est_log = pi_over_log(n)
        est_li = log_integral(n)

        rows.append({
            'n': n,
            'pi_n': pi_n,
            'x_over_log_x': est_log,
            'li_x': est_li,
            'rel_err_x_over_log_x': relative_error(est_log, pi_n),
            'rel_err_li_x': relative_error(est_li, pi_n),
            'largest_prime': int(primes[-1]) if pi_n else np.nan,
            'seconds': seconds
        })
        print(f"  n={n:>15,}  pi(n)={pi_n:>12,}  {seconds:.3f}s")

    df = pd.DataFrame(rows)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'prime_counting.csv', index=False)

    return df
