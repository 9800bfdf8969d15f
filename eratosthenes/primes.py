"""
Prime generation utilities.

Responsibility: prime generation only. Input validation and the output
dtype policy live here; the loops live in sieve_kernels.

Time complexity:  O(n log log n)
Space complexity: O(n), one byte per candidate plus the result array.

The bound n must be small enough that n+1 boolean flags fit in memory.
Exceeding that is a MemoryError, not a logic error.
"""

import numpy as np

from .sieve_kernels import mark_composites, collect_primes


DEFAULT_DTYPE = np.uint64


def _check_bound(n, dtype, caller: str):
    """
    Validate the bound and resolve the output dtype.

    Runs before any allocation. Returns (N, dtype) with N a Python int.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"{caller}: n must be an integral value, got {type(n).__name__}")

    if isinstance(n, np.integer):
        if not isinstance(n, np.unsignedinteger):
            raise TypeError(f"{caller}: n must be an unsigned integer type, got {n.dtype}")
        if dtype is None:
            dtype = n.dtype

    dtype = np.dtype(DEFAULT_DTYPE if dtype is None else dtype)
    if not np.issubdtype(dtype, np.unsignedinteger):
        raise TypeError(f"{caller}: dtype must be an unsigned integer type, got {dtype}")

    N = int(n)
    if N < 0:
        raise ValueError(f"{caller}: n must be non-negative, got {N}")
    if N > np.iinfo(dtype).max:
        raise OverflowError(f"{caller}: n={N} does not fit in {dtype}")

    return N, dtype


def _new_flags(N: int) -> np.ndarray:
    """Allocate the marking array for 0..N with 0 and 1 already composite."""
    try:
        flags = np.ones(N + 1, dtype=bool)
    except (ValueError, OverflowError) as exc:
        # numpy reports some oversized requests as ValueError
        raise MemoryError(f"cannot allocate {N + 1:,} prime flags") from exc
    flags[0] = flags[1] = False
    return flags


def prime_flags_up_to(n) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    n : int or unsigned numpy integer
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length n+1.
    """
    N, _ = _check_bound(n, None, 'prime_flags_up_to')
    if N < 2:
        return np.zeros(N + 1, dtype=bool)

    flags = _new_flags(N)
    mark_composites(flags)
    return flags


def prime_count(n) -> int:
    """Return pi(n), the number of primes <= n, without building the list."""
    N, _ = _check_bound(n, None, 'prime_count')
    if N < 2:
        return 0

    return int(mark_composites(_new_flags(N)))


def primes_up_to(n, dtype=None) -> np.ndarray:
    """
    Return array of all primes <= n, in increasing order.

    Parameters
    ----------
    n : int or unsigned numpy integer
        Upper bound (inclusive). Must be non-negative and representable
        in the output dtype.
    dtype : numpy unsigned integer dtype, optional
        Element type of the result. Defaults to the type of n when n is
        an unsigned numpy scalar, otherwise uint64.

    Returns
    -------
    np.ndarray
        Array of primes with exactly pi(n) entries.

    Raises
    ------
    TypeError
        n is not integral, is a signed numpy integer, or dtype is not an
        unsigned integer type.
    ValueError
        n is negative.
    OverflowError
        n does not fit in dtype.
    MemoryError
        The n+1 marking flags cannot be allocated.
    """
    N, dtype = _check_bound(n, dtype, 'primes_up_to')

    # No primes below 2, and no marking array either
    if N < 2:
        return np.empty(0, dtype=dtype)

    flags = _new_flags(N)
    n_primes = mark_composites(flags)

    # Independent re-scan; skipped under python -O
    assert n_primes == np.count_nonzero(flags[2:]), \
        f"prime count mismatch: sieve counted {n_primes}, flags hold {np.count_nonzero(flags[2:])}"

    # Exact-size result, filled in one pass
    primes = np.empty(n_primes, dtype=dtype)
    filled = collect_primes(flags, primes)
    assert filled == n_primes, f"collected {filled} primes, expected {n_primes}"

    return primes
