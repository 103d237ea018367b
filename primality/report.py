"""
Text and table output for the three modes: list, test, nth term.

Everything here returns values. Printing and exit codes are left to
run_primes.py.
"""

from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from .classify import Primality, classify
from .nth_prime import find_nth
from .sieve import sieve

OUTCOMES = {
    Primality.PRIME: "is prime",
    Primality.COMPOSITE: "is composite",
    Primality.NEITHER: "is neither prime nor composite",
}


def list_terms(ceiling: int, dtype=np.int64) -> List[str]:
    """One 'Prime #rank = value' line per prime <= ceiling."""
    return [f"Prime #{rank} = {p}"
            for rank, p in enumerate(sieve(ceiling, dtype), start=1)]


def test_candidate(candidate: int) -> str:
    """Describe the primality of a single candidate."""
    return f"{candidate} {OUTCOMES[classify(candidate)]}"


# Not a pytest test function
test_candidate.__test__ = False


def nth_term(index: int, **kwargs) -> str:
    """'Prime #index = value'. kwargs go to find_nth."""
    return f"Prime #{index} = {find_nth(index, **kwargs)}"


def primes_frame(ceiling: int, dtype=np.int64) -> pd.DataFrame:
    """
    Prime table as a DataFrame.

    Parameters
    ----------
    ceiling : int
        Upper bound (inclusive).

    Returns
    -------
    pd.DataFrame
        Columns 'rank' (1-based) and 'prime'.
    """
    primes = sieve(ceiling, dtype)
    return pd.DataFrame({
        'rank': range(1, len(primes) + 1),
        'prime': primes,
    })


def write_primes_csv(ceiling: int, path: Path, dtype=np.int64) -> pd.DataFrame:
    """Write primes_frame(ceiling) to path as CSV and return the frame."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = primes_frame(ceiling, dtype)
    df.to_csv(path, index=False)
    return df
