"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_prime_counting(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot pi(n) against the x/ln(x) and li(x) approximations.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_prime_counting with columns:
        n, pi_n, x_over_log_x, li_x.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    df = df[df['n'] >= 2]
    ax.loglog(df['n'], df['pi_n'], 'o-', label='pi(n) (sieve)')
    ax.loglog(df['n'], df['x_over_log_x'], 's--', label='x / ln x')
    ax.loglog(df['n'], df['li_x'], '^--', label='li(x)')

    ax.set_xlabel('n')
    ax.set_ylabel('Number of primes <= n')
    ax.set_title('Prime counting function')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_relative_error(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """Plot relative error of both approximations against n."""
    fig, ax = plt.subplots(figsize=(8, 5))

    df = df[df['n'] >= 2]
    ax.semilogx(df['n'], df['rel_err_x_over_log_x'], 's-', label='x / ln x')
    ax.semilogx(df['n'], df['rel_err_li_x'], '^-', label='li(x)')
    ax.axhline(0, color='black', linewidth=0.8)

    ax.set_xlabel('n')
    ax.set_ylabel('(estimate - pi(n)) / pi(n)')
    ax.set_title('Relative error of pi(n) approximations')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
