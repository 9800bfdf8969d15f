"""
Tests for the sieve entry points in eratosthenes.primes.

Covers the small-bound edge cases, known values of pi(n), the divisor
properties of the output, and the input validation that must fire before
any allocation.
"""

import numpy as np
import pytest
from math import isqrt

from eratosthenes.primes import primes_up_to, prime_flags_up_to, prime_count


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


def has_proper_divisor(m: int) -> bool:
    """True iff some d with 1 < d < m divides m."""
    return any(m % d == 0 for d in range(2, isqrt(m) + 1))


class TestSmallBounds:
    """Edge cases at and just above the first prime."""

    def test_zero_and_one_are_empty(self):
        """No primes below 2."""
        for n in (0, 1):
            result = primes_up_to(n)
            assert len(result) == 0, f"primes_up_to({n}) should be empty, got {result}"

    def test_two(self):
        """primes_up_to(2) = [2]."""
        assert primes_up_to(2).tolist() == [2]

    def test_three(self):
        """Bound just above the first prime."""
        assert primes_up_to(3).tolist() == [2, 3]

    def test_ten(self):
        assert primes_up_to(10).tolist() == [2, 3, 5, 7]

    def test_thirty(self):
        assert primes_up_to(30).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_perfect_square_bounds(self):
        """Bounds where k == n // k on the last marking step."""
        assert primes_up_to(4).tolist() == [2, 3]
        assert primes_up_to(25).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23]
        assert primes_up_to(49)[-1] == 47

    def test_empty_result_keeps_dtype(self):
        """Empty results still carry the requested element type."""
        assert primes_up_to(1, dtype=np.uint32).dtype == np.uint32
        assert primes_up_to(0).dtype == np.uint64


class TestPrimeCounting:
    """len(primes_up_to(n)) must equal pi(n)."""

    @pytest.mark.parametrize("n, expected", [
        (10, 4),
        (100, 25),
        (1_000, 168),
        (10_000, 1_229),
        (100_000, 9_592),
        (1_000_000, 78_498),
    ])
    def test_pi_reference_values(self, n, expected):
        """Published values of pi(10^k)."""
        assert len(primes_up_to(n)) == expected, f"pi({n}) should be {expected}"

    def test_bound_is_inclusive(self):
        """A prime bound is included, the next composite adds nothing."""
        assert primes_up_to(97)[-1] == 97
        assert len(primes_up_to(97)) == len(primes_up_to(100)) == 25


class TestDivisorProperties:
    """Output is exactly the set of integers in [2, n] with no proper divisor."""

    def test_every_element_is_prime(self):
        for p in primes_up_to(2_000).tolist():
            assert not has_proper_divisor(p), f"{p} has a proper divisor"

    def test_every_omitted_integer_is_composite(self):
        n = 2_000
        primes = set(primes_up_to(n).tolist())
        for m in range(2, n + 1):
            if m not in primes:
                assert has_proper_divisor(m), f"{m} is prime but missing from result"

    def test_strictly_increasing(self):
        for n in (2, 3, 10, 1_000, 65_537):
            primes = primes_up_to(n)
            assert np.all(np.diff(primes.astype(np.int64)) > 0), \
                f"primes_up_to({n}) is not strictly increasing"

    def test_no_duplicates(self):
        primes = primes_up_to(10_000)
        assert len(np.unique(primes)) == len(primes)


class TestDeterminismAndPrefix:
    """Same input, same output; larger bounds extend smaller ones."""

    def test_repeated_calls_identical(self):
        first = primes_up_to(50_000)
        second = primes_up_to(50_000)
        assert np.array_equal(first, second)
        assert first is not second

    def test_prefix_property(self):
        """primes_up_to(n1) is a prefix of primes_up_to(n2) for n1 <= n2."""
        bounds = [0, 1, 2, 3, 4, 10, 11, 100, 101, 1_000, 4_096]
        results = [primes_up_to(n) for n in bounds]
        for i in range(1, len(bounds)):
            shorter, longer = results[i - 1], results[i]
            assert np.array_equal(longer[:len(shorter)], shorter), \
                f"primes_up_to({bounds[i - 1]}) is not a prefix of primes_up_to({bounds[i]})"


class TestDtypePolicy:
    """Element type follows n or the dtype argument."""

    def test_python_int_defaults_to_uint64(self):
        assert primes_up_to(100).dtype == np.uint64

    def test_numpy_scalar_sets_dtype(self):
        assert primes_up_to(np.uint32(100)).dtype == np.uint32
        assert primes_up_to(np.uint64(100)).dtype == np.uint64
        assert primes_up_to(np.uint16(100)).dtype == np.uint16

    def test_explicit_dtype_wins(self):
        assert primes_up_to(np.uint64(100), dtype=np.uint32).dtype == np.uint32
        assert primes_up_to(100, dtype='uint32').dtype == np.uint32

    def test_widths_agree(self):
        """uint32 and uint64 runs hold the same values."""
        p32 = primes_up_to(100_000, dtype=np.uint32)
        p64 = primes_up_to(100_000, dtype=np.uint64)
        assert np.array_equal(p32, p64)

    def test_largest_uint8_bound(self):
        """n at the top of the output range is accepted."""
        primes = primes_up_to(255, dtype=np.uint8)
        assert primes.dtype == np.uint8
        assert primes[-1] == 251
        assert len(primes) == 54


class TestPreconditions:
    """Invalid input is rejected loudly, never answered with wrong data."""

    @pytest.mark.parametrize("n", [10.0, np.float64(10), "10", None, True, np.bool_(True)])
    def test_non_integral_rejected(self, n):
        with pytest.raises(TypeError, match="integral"):
            primes_up_to(n)

    @pytest.mark.parametrize("n", [np.int32(10), np.int64(10)])
    def test_signed_numpy_scalar_rejected(self, n):
        with pytest.raises(TypeError, match="unsigned"):
            primes_up_to(n)

    @pytest.mark.parametrize("dtype", [np.int32, np.int64, np.float64, bool])
    def test_non_unsigned_dtype_rejected(self, dtype):
        with pytest.raises(TypeError, match="unsigned"):
            primes_up_to(10, dtype=dtype)

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            primes_up_to(-1)

    def test_bound_too_large_for_dtype(self):
        with pytest.raises(OverflowError):
            primes_up_to(256, dtype=np.uint8)
        with pytest.raises(OverflowError):
            primes_up_to(2**32, dtype=np.uint32)
        with pytest.raises(OverflowError):
            primes_up_to(2**64)

    def test_unallocatable_bound(self):
        """Resource exhaustion surfaces as MemoryError."""
        with pytest.raises(MemoryError):
            primes_up_to(2**63 - 2)


class TestPrimeFlags:
    """prime_flags_up_to returns the finished marking array."""

    def test_flags_match_known_primes(self):
        N = 100
        flags = prime_flags_up_to(N)

        assert flags.dtype == bool
        assert len(flags) == N + 1

        for p in SMALL_PRIMES:
            assert flags[p], f"prime_flags_up_to: {p} should be prime"

        for n in SMALL_COMPOSITES:
            assert not flags[n], f"prime_flags_up_to: {n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_small_bounds(self):
        assert prime_flags_up_to(0).tolist() == [False]
        assert prime_flags_up_to(1).tolist() == [False, False]
        assert prime_flags_up_to(2).tolist() == [False, False, True]

    def test_flags_agree_with_primes(self):
        N = 10_000
        assert np.array_equal(np.flatnonzero(prime_flags_up_to(N)), primes_up_to(N))

    def test_validation(self):
        with pytest.raises(ValueError):
            prime_flags_up_to(-5)
        with pytest.raises(TypeError):
            prime_flags_up_to(np.int64(5))


class TestPrimeCount:
    """prime_count gives pi(n) without building the list."""

    def test_matches_primes_up_to(self):
        for n in (0, 1, 2, 3, 10, 100, 1_000, 12_345):
            assert prime_count(n) == len(primes_up_to(n)), f"prime_count({n}) disagrees"

    def test_returns_python_int(self):
        assert isinstance(prime_count(1_000), int)
        assert prime_count(1_000) == 168

    def test_validation(self):
        with pytest.raises(ValueError):
            prime_count(-1)
        with pytest.raises(TypeError):
            prime_count(3.5)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
