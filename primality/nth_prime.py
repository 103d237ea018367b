"""
Nth prime search with an adaptively grown sieve.

Responsibility: pick a sieve ceiling, check it holds enough primes,
grow it if not. All sieving is delegated to sieve.py.

Initial ceiling (prime number theorem, valid for n >= 3):

    p_n < n ln n + n ln ln n      (n >= 6, Rosser)

The bound is cut to an int and floored, so for small n (or any case where
float rounding undershoots) the search may need more than one sieve.
Every retry multiplies the ceiling by `growth` > 1, so the ceiling passes
p_n after finitely many rounds. There is no round limit unless
`max_rounds` is given.
"""

import logging
import math

import numpy as np

from .classify import as_natural
from .sieve import sieve

logger = logging.getLogger(__name__)

# Minimum sieve ceiling, used when the estimate is undefined or too small
DEFAULT_FLOOR = 15

# Ceiling multiplier applied after a failed round
DEFAULT_GROWTH = 1.25


class ConvergenceError(RuntimeError):
    """Raised when a capped nth-prime search runs out of rounds."""

    def __init__(self, index: int, rounds: int, ceiling: int):
        self.index = index
        self.rounds = rounds
        self.ceiling = ceiling
        super().__init__(
            f"prime #{index} not found after {rounds} rounds "
            f"(last ceiling {ceiling})"
        )


def estimate_ceiling(index: int) -> int:
    """
    Estimate the magnitude of the index-th prime.

    Returns 0 for index < 3, where ln ln index is undefined or negative;
    callers floor the result.
    """
    index = as_natural(index, "index")
    if index < 3:
        return 0
    return int(index * math.log(index) + index * math.log(math.log(index)))


def _next_ceiling(ceiling: int, growth: float) -> int:
    # int() truncation must never stall the loop
    return max(int(ceiling * growth), ceiling + 1)


def _sieve_until(count: int, floor: int, growth: float,
                 max_rounds, initial_ceiling) -> np.ndarray:
    """Sieve with growing ceilings until at least `count` primes are found."""
    if floor < 2:
        raise ValueError(f"floor must be >= 2, got {floor}")
    if not growth > 1:
        raise ValueError(f"growth must be > 1, got {growth}")
    if max_rounds is not None and as_natural(max_rounds, "max_rounds") < 1:
        raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")

    if initial_ceiling is None:
        ceiling = max(estimate_ceiling(count), floor)
    else:
        ceiling = as_natural(initial_ceiling, "initial_ceiling")

    rounds = 0
    while True:
        primes = sieve(ceiling)
        rounds += 1
        logger.debug("round %d: ceiling %d holds %d primes (need %d)",
                     rounds, ceiling, len(primes), count)

        if len(primes) >= count:
            return primes

        if max_rounds is not None and rounds >= max_rounds:
            raise ConvergenceError(count, rounds, ceiling)

        ceiling = _next_ceiling(ceiling, growth)


def find_nth(index: int, *, floor: int = DEFAULT_FLOOR,
             growth: float = DEFAULT_GROWTH, max_rounds: int = None,
             initial_ceiling: int = None) -> int:
    """
    Return the index-th prime (1-based): find_nth(1) == 2.

    Parameters
    ----------
    index : int
        Position in the prime sequence, >= 1.
    floor : int
        Minimum sieve ceiling.
    growth : float
        Ceiling multiplier after a round that found too few primes.
    max_rounds : int, optional
        Give up with ConvergenceError after this many sieves.
        None means no limit.
    initial_ceiling : int, optional
        First ceiling to try, replacing the estimate and floor.

    Returns
    -------
    int
        The index-th prime.
    """
    index = as_natural(index, "index")
    if index < 1:
        raise ValueError(f"index must be >= 1, got {index}")

    primes = _sieve_until(index, floor, growth, max_rounds, initial_ceiling)
    return int(primes[index - 1])


def first_n_primes(n: int, *, floor: int = DEFAULT_FLOOR,
                   growth: float = DEFAULT_GROWTH,
                   max_rounds: int = None) -> np.ndarray:
    """Return the first n primes as an int64 array (empty for n = 0)."""
    n = as_natural(n, "n")
    if n == 0:
        return np.empty(0, dtype=np.int64)
    return _sieve_until(n, floor, growth, max_rounds, None)[:n]
