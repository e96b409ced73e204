"""prime_explorer - prime generation and derived sequences for a visual prime explorer."""

__version__ = "0.1.0"

from prime_explorer.core.sieve import (
    SieveLimitError,
    first_n_primes,
    is_prime,
    sieve_up_to,
)
from prime_explorer.analysis.gaps import prime_gaps
from prime_explorer.analysis.factorization import prime_factorization
from prime_explorer.dataset import PrimeDataset, build_dataset

__all__ = [
    "SieveLimitError",
    "first_n_primes",
    "is_prime",
    "sieve_up_to",
    "prime_gaps",
    "prime_factorization",
    "PrimeDataset",
    "build_dataset",
]
