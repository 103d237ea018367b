"""
Primality classification by trial division.

Responsibility: classify single candidates (and arrays of candidates).
No sieving here.

Only divisors of the form 6k-1 and 6k+1 are tried after 2 and 3, since
every prime > 3 lies in one of those residue classes:

    5, 7, 11, 13, 17, 19, 23, 25, ...
"""

import math
import operator
from enum import IntEnum

import numpy as np
from numba import njit


class Primality(IntEnum):
    """Classification of a non-negative integer."""

    NEITHER = 0    # 0 and 1
    COMPOSITE = 1
    PRIME = 2


def as_natural(value, name: str = "number") -> int:
    """
    Convert an integral value to a Python int >= 0.

    Raises TypeError for non-integral input (floats, strings) and
    ValueError for negative input.
    """
    try:
        n = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}")
    return n


def classify(number) -> Primality:
    """
    Classify a number as prime, composite or neither.

    Parameters
    ----------
    number : int
        Candidate (>= 0). numpy integers are accepted.

    Returns
    -------
    Primality
        NEITHER for 0 and 1, otherwise PRIME or COMPOSITE.
    """
    n = as_natural(number)

    if n < 2:
        return Primality.NEITHER
    if n < 4:
        return Primality.PRIME
    if n % 2 == 0 or n % 3 == 0:
        return Primality.COMPOSITE

    # isqrt keeps the bound exact for arbitrarily large n
    limit = math.isqrt(n)
    for divisor in range(5, limit + 1, 6):
        if n % divisor == 0 or n % (divisor + 2) == 0:
            return Primality.COMPOSITE
    return Primality.PRIME


def is_prime(number) -> bool:
    """Return True iff number is prime."""
    return classify(number) is Primality.PRIME


@njit
def _classify_kernel(values, out):
    """Trial division over an int64 array. Writes Primality codes to out."""
    for i in range(values.shape[0]):
        n = values[i]
        if n < 2:
            out[i] = 0
        elif n < 4:
            out[i] = 2
        elif n % 2 == 0 or n % 3 == 0:
            out[i] = 1
        else:
            out[i] = 2
            d = 5
            # d <= n // d instead of d * d <= n: no int64 overflow near the top
            while d <= n // d:
                if n % d == 0 or n % (d + 2) == 0:
                    out[i] = 1
                    break
                d += 6


def classify_array(numbers) -> np.ndarray:
    """
    Classify every entry of an integer array.

    Parameters
    ----------
    numbers : array_like
        Non-negative integers. Any shape.

    Returns
    -------
    np.ndarray
        int8 array of the same shape holding Primality values.
    """
    values = np.asarray(numbers)
    if values.dtype.kind not in "iu":
        raise TypeError(f"numbers must have an integer dtype, got {values.dtype}")

    if values.size:
        if values.dtype.kind == "i" and values.min() < 0:
            raise ValueError(f"numbers must be >= 0, got {values.min()}")
        if values.dtype.kind == "u" and values.max() > np.iinfo(np.int64).max:
            raise OverflowError(f"{values.max()} does not fit in int64")

    flat = values.astype(np.int64).ravel()
    out = np.zeros(flat.shape[0], dtype=np.int8)
    _classify_kernel(flat, out)
    return out.reshape(values.shape)
