"""Sequences derived from primes: gaps, factorizations, residues."""

from prime_explorer.analysis.gaps import (
    prime_gaps,
    gap_histogram,
    maximal_gaps,
    prime_pairs,
)
from prime_explorer.analysis.factorization import (
    prime_factorization,
    factor_exponents,
    distinct_prime_factors,
)
from prime_explorer.analysis.residues import (
    residues,
    residue_class_counts,
    coprime_residues,
)

__all__ = [
    "prime_gaps",
    "gap_histogram",
    "maximal_gaps",
    "prime_pairs",
    "prime_factorization",
    "factor_exponents",
    "distinct_prime_factors",
    "residues",
    "residue_class_counts",
    "coprime_residues",
]
