"""
Sieve of Eratosthenes.

Responsibility: prime tables up to a ceiling. No trial division,
no nth-prime search.

The marking array is tri-state (see classify.Primality): indices 0 and 1
are NEITHER, every struck multiple is COMPOSITE, and whatever is left
marked PRIME after the sweep is prime.
"""

import math

import numpy as np

from .classify import Primality, as_natural


def primality_marks(ceiling: int) -> np.ndarray:
    """
    Return the int8 marking array for 0..ceiling.

    Parameters
    ----------
    ceiling : int
        Upper bound (inclusive), >= 0.

    Returns
    -------
    np.ndarray
        Array of length ceiling+1 where marks[i] is the Primality of i.

    Note
    ----
    Allocation is O(ceiling). A ceiling too large for memory raises
    MemoryError from numpy; it is not caught here.
    """
    ceiling = as_natural(ceiling, "ceiling")

    marks = np.full(ceiling + 1, int(Primality.PRIME), dtype=np.int8)
    marks[:2] = int(Primality.NEITHER)

    # Multiples below p*p were already struck by a smaller factor
    for p in range(2, math.isqrt(ceiling) + 1):
        if marks[p] == Primality.PRIME:
            marks[p*p::p] = int(Primality.COMPOSITE)
    return marks


def prime_flags_upto(ceiling: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    ceiling : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length ceiling+1.
    """
    return primality_marks(ceiling) == Primality.PRIME


def sieve(ceiling: int, dtype=np.int64) -> np.ndarray:
    """
    Return array of all primes <= ceiling, ascending.

    Parameters
    ----------
    ceiling : int
        Upper bound (inclusive). 0 and 1 give an empty array.
    dtype : numpy integer dtype
        Element type of the result. The ceiling must fit in it.

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    dtype = np.dtype(dtype)
    if dtype.kind not in "iu":
        raise TypeError(f"dtype must be an integer dtype, got {dtype}")

    ceiling = as_natural(ceiling, "ceiling")
    if ceiling > np.iinfo(dtype).max:
        raise OverflowError(f"ceiling {ceiling} does not fit in {dtype}")

    marks = primality_marks(ceiling)
    return np.flatnonzero(marks == Primality.PRIME).astype(dtype, copy=False)


def count_primes(ceiling: int) -> int:
    """Number of primes <= ceiling, pi(ceiling)."""
    return int(np.count_nonzero(prime_flags_upto(ceiling)))
