"""
Compiled loops for the Sieve of Eratosthenes.

Responsibility: marking, counting and collecting over a flags array.
No input validation, no dtype policy. Callers own the arrays.

flags[k] == True means "k is prime until proven composite".
"""

from numba import njit


@njit
def mark_composites(flags):
    """
    Mark composites in place and count the primes left standing.

    Parameters
    ----------
    flags : np.ndarray
        Boolean array of length N+1 with flags[0] = flags[1] = False and
        every other entry True. Modified in place.

    Returns
    -------
    int
        Number of primes <= N.
    """
    N = len(flags) - 1
    n_primes = 0

    # k <= N // k instead of k * k <= N: k * k can overflow int64
    k = 2
    while k <= N // k:
        if flags[k]:
            n_primes += 1

            # Multiples below k*k already carry a smaller prime factor
            for m in range(k * k, N + 1, k):
                flags[m] = False
        k += 1

    # Primes above sqrt(N) are never visited by the marking loop
    while k <= N:
        if flags[k]:
            n_primes += 1
        k += 1

    return n_primes


@njit
def collect_primes(flags, primes):
    """
    Write the indices still set in flags into primes, in increasing order.

    Stops as soon as primes is full. Returns the number of entries written,
    which equals len(primes) whenever len(primes) came from mark_composites.
    """
    size = len(primes)
    m = 0
    for k in range(2, len(flags)):
        if m == size:
            break
        if flags[k]:
            primes[m] = k
            m += 1
    return m
