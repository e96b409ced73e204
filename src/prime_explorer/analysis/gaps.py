"""Gaps between consecutive primes.

Gap 2 gives twin primes, gap 4 cousin primes, gap 6 sexy primes. Record
gaps mark the "prime deserts" where no primes exist for a long stretch.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def prime_gaps(primes: Sequence[int] | np.ndarray) -> np.ndarray:
    """Differences between consecutive primes.

    The input is trusted to be an ascending prime sequence and is not
    revalidated.

    Args:
        primes: Ascending primes.

    Returns:
        int64 array of length len(primes) - 1; empty for fewer than 2 primes.
    """
    primes = np.asarray(primes, dtype=np.int64)
    if len(primes) < 2:
        return np.array([], dtype=np.int64)

    return np.diff(primes)


def gap_histogram(gaps: Sequence[int] | np.ndarray) -> dict[int, int]:
    """Count how often each gap size occurs.

    Args:
        gaps: Gap sequence, e.g. from prime_gaps.

    Returns:
        Mapping of gap size to occurrences, keys ascending.
    """
    values, counts = np.unique(np.asarray(gaps, dtype=np.int64), return_counts=True)
    return {int(v): int(c) for v, c in zip(values, counts)}


def maximal_gaps(primes: Sequence[int] | np.ndarray) -> list[tuple[int, int]]:
    """Record gaps: each gap strictly larger than every gap before it.

    Args:
        primes: Ascending primes.

    Returns:
        List of (prime, gap) where prime is the lower end of the record gap.
    """
    primes = np.asarray(primes, dtype=np.int64)
    gaps = prime_gaps(primes)

    records = []
    best = 0
    for i, gap in enumerate(gaps):
        if gap > best:
            best = int(gap)
            records.append((int(primes[i]), best))

    return records


def prime_pairs(
    primes: Sequence[int] | np.ndarray,
    difference: int = 2,
) -> list[tuple[int, int]]:
    """Find pairs (p, p + difference) with both members in primes.

    The members need not be consecutive primes: (5, 11) is a sexy pair
    even though 7 lies between them.

    Args:
        primes: Ascending primes.
        difference: 2 for twin, 4 for cousin, 6 for sexy primes.

    Returns:
        Pairs in ascending order of p.

    Raises:
        ValueError: If difference is less than 1.
    """
    if difference < 1:
        raise ValueError(f"difference must be >= 1, got {difference}")

    primes = np.asarray(primes, dtype=np.int64)
    partners = primes + difference
    lower = primes[np.isin(partners, primes)]

    return [(int(p), int(p) + difference) for p in lower]
