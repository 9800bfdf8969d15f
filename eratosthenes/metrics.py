"""
Definitions of the prime-counting reference quantities.

Responsibility: analytic approximations of pi(x) and the error measures
used to compare them with the sieve. No sieving here.
"""

import numpy as np
from scipy.special import expi


# pi(10^k) for k = 1..9
pi_reference = {
    10: 4,
    100: 25,
    1_000: 168,
    10_000: 1_229,
    100_000: 9_592,
    1_000_000: 78_498,
    10_000_000: 664_579,
    100_000_000: 5_761_455,
    1_000_000_000: 50_847_534,
}


def _scalar_or_array(values: np.ndarray):
    return values if values.ndim else float(values)


def pi_over_log(x):
    """
    Chebyshev-Gauss estimate x / ln(x).

    Parameters
    ----------
    x : float or array-like
        Points to evaluate.

    Returns
    -------
    float or np.ndarray
        Estimate of pi(x); NaN where x < 2.
    """
    x = np.asarray(x, dtype=float)
    with np.errstate(divide='ignore', invalid='ignore'):
        values = x / np.log(x)
    return _scalar_or_array(np.where(x >= 2, values, np.nan))


def log_integral(x):
    """
    Logarithmic integral li(x) = Ei(ln x).

    Parameters
    ----------
    x : float or array-like
        Points to evaluate.

    Returns
    -------
    float or np.ndarray
        li(x); NaN where x < 2.
    """
    x = np.asarray(x, dtype=float)
    with np.errstate(divide='ignore', invalid='ignore'):
        values = expi(np.log(x))
    return _scalar_or_array(np.where(x >= 2, values, np.nan))


def relative_error(estimate, exact):
    """(estimate - exact) / exact, or NaN when exact is 0."""
    estimate = np.asarray(estimate, dtype=float)
    exact = np.asarray(exact, dtype=float)
    with np.errstate(divide='ignore', invalid='ignore'):
        values = (estimate - exact) / exact
    return _scalar_or_array(np.where(exact != 0, values, np.nan))
