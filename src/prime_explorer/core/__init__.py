"""Core prime generation."""

from prime_explorer.core.sieve import (
    DEFAULT_MAX_LIMIT,
    SieveLimitError,
    count_primes,
    first_n_primes,
    is_prime,
    numbers_with_prime_flags,
    prime_counting,
    sieve_mask,
    sieve_up_to,
)

__all__ = [
    "DEFAULT_MAX_LIMIT",
    "SieveLimitError",
    "count_primes",
    "first_n_primes",
    "is_prime",
    "numbers_with_prime_flags",
    "prime_counting",
    "sieve_mask",
    "sieve_up_to",
]
