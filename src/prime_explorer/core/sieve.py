"""Prime number generation using a dense Sieve of Eratosthenes.

Bulk generation (primes up to a bound, the first n primes, prime counts)
runs on a NumPy boolean marker array. Single values are checked by trial
division so that one-off queries never allocate a sieve.

Memory is the only limit: a pass to ``limit`` allocates ``limit + 1`` bytes.
``first_n_primes`` grows its bound by doubling and refuses to go past
``max_limit`` (``DEFAULT_MAX_LIMIT`` = 2 * 10**9, about 2 GB of markers,
enough for the first 98,222,287 primes).
"""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MAX_LIMIT = 2_000_000_000

# Fixed bound for n < 6, where n * (ln n + ln ln n) is undefined or too loose.
SMALL_COUNT_BOUND = 15
BOUND_SAFETY_FACTOR = 1.3


class SieveLimitError(MemoryError):
    """Raised when the first n primes do not fit below the sieve cap."""

    def __init__(self, n: int, max_limit: int, found: int):
        self.n = n
        self.max_limit = max_limit
        self.found = found
        super().__init__(
            f"Cannot generate {n} primes: only {found} primes are <= "
            f"max_limit={max_limit}"
        )


def sieve_mask(limit: int) -> np.ndarray:
    """Boolean marker array where mask[i] is True if i is prime.

    Args:
        limit: Largest index to mark (inclusive).

    Returns:
        Boolean array of length limit + 1 (empty for negative limit).
    """
    limit = int(limit)
    if limit < 0:
        return np.zeros(0, dtype=bool)

    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False

    i = 2
    while i * i <= limit:
        if is_prime[i]:
            is_prime[i*i::i] = False
        i += 1

    return is_prime


def sieve_up_to(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes <= limit; empty if limit < 2.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    logger.debug("Sieving up to %d", limit)
    return np.nonzero(sieve_mask(limit))[0].astype(np.int64, copy=False)


def _estimate_bound(n: int) -> int:
    """Upper bound estimate for the nth prime, p_n ~ n (ln n + ln ln n)."""
    if n < 6:
        return SMALL_COUNT_BOUND
    log_n = np.log(n)
    return int(np.ceil(n * (log_n + np.log(log_n)) * BOUND_SAFETY_FACTOR))


def first_n_primes(n: int, max_limit: int = DEFAULT_MAX_LIMIT) -> np.ndarray:
    """Generate the first n prime numbers.

    Sieves up to an estimated bound for the nth prime and doubles the bound
    until at least n primes are found, then truncates to exactly n.

    Args:
        n: Number of primes to generate.
        max_limit: Largest bound the sieve may grow to.

    Returns:
        Ascending int64 array of length max(n, 0).

    Raises:
        SieveLimitError: If fewer than n primes are <= max_limit.
    """
    n = int(n)
    if n <= 0:
        return np.array([], dtype=np.int64)
    if n == 1:
        return np.array([2], dtype=np.int64)

    bound = min(_estimate_bound(n), max_limit)
    primes = sieve_up_to(bound)

    while len(primes) < n:
        if bound >= max_limit:
            raise SieveLimitError(n, max_limit, len(primes))
        bound = min(bound * 2, max_limit)
        logger.warning(
            "Bound too small for %d primes (found %d), expanding to %d",
            n, len(primes), bound,
        )
        # Drop the previous pass before allocating the next one.
        primes = None
        primes = sieve_up_to(bound)

    if len(primes) > n:
        primes = primes[:n].copy()
    return primes


def is_prime(n: int) -> bool:
    """Check if a single number is prime by trial division.

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.
    """
    n = int(n)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2

    return True


def count_primes(limit: int) -> int:
    """Count prime numbers up to limit."""
    if limit < 2:
        return 0
    return int(np.count_nonzero(sieve_mask(limit)))


def prime_counting(limit: int) -> np.ndarray:
    """Prime counting function pi(i) for every i in [0, limit].

    Args:
        limit: Largest argument to evaluate.

    Returns:
        int64 array of length limit + 1 with pi[i] = number of primes <= i.
    """
    return np.cumsum(sieve_mask(limit), dtype=np.int64)


def numbers_with_prime_flags(max_n: int) -> tuple[np.ndarray, np.ndarray]:
    """Integers 1..max_n paired with their primality.

    Args:
        max_n: Largest integer to include.

    Returns:
        Tuple of (numbers, flags) where flags[i] is True if numbers[i] is prime.
    """
    if max_n < 1:
        return np.array([], dtype=np.int64), np.array([], dtype=bool)

    numbers = np.arange(1, max_n + 1, dtype=np.int64)
    flags = sieve_mask(max_n)[1:]
    return numbers, flags
