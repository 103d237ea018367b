"""
Tests for trial-division classification.

classify() and classify_array() are checked against known values,
against each other, and against sympy as an independent oracle.
"""

import numpy as np
import pytest
from sympy import isprime

from primality.classify import Primality, as_natural, classify, classify_array, is_prime


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestClassifyKnownValues:
    """Fixed points of the classification."""

    @pytest.mark.parametrize("n", [0, 1])
    def test_zero_and_one_are_neither(self, n):
        """0 and 1 are neither prime nor composite."""
        assert classify(n) is Primality.NEITHER

    @pytest.mark.parametrize("n", [2, 3])
    def test_two_and_three_are_prime(self, n):
        assert classify(n) is Primality.PRIME

    def test_four_is_composite(self):
        assert classify(4) is Primality.COMPOSITE

    def test_seventeen_is_prime(self):
        assert classify(17) is Primality.PRIME

    def test_ninety_one_is_composite(self):
        """91 = 7 * 13: only caught by the wheel loop, not the 2/3 checks."""
        assert classify(91) is Primality.COMPOSITE

    def test_small_primes(self):
        for p in SMALL_PRIMES:
            assert classify(p) is Primality.PRIME, f"{p} should be prime"

    def test_small_composites(self):
        for n in SMALL_COMPOSITES:
            assert classify(n) is Primality.COMPOSITE, f"{n} should be composite"

    def test_squares_of_primes(self):
        """p*p sits exactly on the loop bound."""
        for p in [5, 7, 11, 13, 97, 101]:
            assert classify(p * p) is Primality.COMPOSITE, f"{p}^2 should be composite"

    def test_large_values(self):
        """Python ints do not overflow past 64 bits."""
        assert classify(2**31 - 1) is Primality.PRIME
        assert classify(2**61 + 1) is Primality.COMPOSITE  # divisible by 3
        assert classify(2**100 + 1) is Primality.COMPOSITE  # divisible by 17

    def test_is_prime(self):
        assert is_prime(97)
        assert not is_prime(1)
        assert not is_prime(100)


class TestClassifyInputs:
    """Accepted and rejected inputs."""

    def test_numpy_integers(self):
        assert classify(np.uint32(13)) is Primality.PRIME
        assert classify(np.int64(21)) is Primality.COMPOSITE

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            classify(-7)

    @pytest.mark.parametrize("value", [7.0, "7", None])
    def test_non_integer_raises(self, value):
        with pytest.raises(TypeError):
            classify(value)

    def test_as_natural_names_argument(self):
        with pytest.raises(ValueError, match="ceiling"):
            as_natural(-1, "ceiling")


class TestClassifyAgainstSympy:
    """Cross-check with sympy.isprime."""

    def test_first_thousand(self):
        for n in range(2, 1000):
            expected = Primality.PRIME if isprime(n) else Primality.COMPOSITE
            assert classify(n) is expected, f"classify({n}) disagrees with sympy"


class TestClassifyArray:
    """numba kernel must agree with the scalar path."""

    def test_matches_scalar(self):
        numbers = np.arange(0, 2000, dtype=np.int64)
        codes = classify_array(numbers)

        assert codes.dtype == np.int8
        for n, code in zip(numbers, codes):
            assert code == classify(int(n)), f"classify_array disagrees at {n}"

    def test_preserves_shape(self):
        numbers = np.array([[0, 1, 2], [9, 91, 97]], dtype=np.uint32)
        codes = classify_array(numbers)

        expected = np.array([[0, 0, 2], [1, 1, 2]], dtype=np.int8)
        np.testing.assert_array_equal(codes, expected)

    def test_empty(self):
        codes = classify_array(np.array([], dtype=np.int64))
        assert codes.shape == (0,)

    def test_large_int64_values(self):
        """Divisor bound must not overflow near the top of int64."""
        numbers = np.array([2**31 - 1, 2**62 + 1, 2**63 - 1], dtype=np.int64)
        codes = classify_array(numbers)
        assert codes[0] == Primality.PRIME
        assert codes[1] == Primality.COMPOSITE  # divisible by 5
        assert codes[2] == Primality.COMPOSITE  # divisible by 7

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            classify_array(np.array([3, -1]))

    def test_float_raises(self):
        with pytest.raises(TypeError):
            classify_array(np.array([3.0, 5.0]))

    def test_uint64_out_of_range_raises(self):
        with pytest.raises(OverflowError):
            classify_array(np.array([2**63 + 1], dtype=np.uint64))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
