"""Residue classes of primes for modular-grid views.

Laying integers out with ``modulus`` columns puts every residue class in
its own column. For mod 6 the primes beyond 2 and 3 fall only in columns 1
and 5; for mod 10 only in 1, 3, 7, 9. Dirichlet's theorem says primes are
spread evenly over the classes coprime to the modulus.
"""

from __future__ import annotations

from math import gcd
from typing import Sequence

import numpy as np


def _check_modulus(modulus: int) -> None:
    if modulus < 2:
        raise ValueError(f"modulus must be >= 2, got {modulus}")


def residues(primes: Sequence[int] | np.ndarray, modulus: int) -> np.ndarray:
    """Residue of each prime modulo modulus.

    Raises:
        ValueError: If modulus is less than 2.
    """
    _check_modulus(modulus)
    return np.asarray(primes, dtype=np.int64) % modulus


def residue_class_counts(
    primes: Sequence[int] | np.ndarray,
    modulus: int,
) -> np.ndarray:
    """Count primes falling in each residue class.

    Args:
        primes: Primes to classify.
        modulus: Number of residue classes.

    Returns:
        int64 array of length modulus; entry r counts primes = r (mod modulus).

    Raises:
        ValueError: If modulus is less than 2.
    """
    counts = np.bincount(residues(primes, modulus), minlength=modulus)
    return counts.astype(np.int64)


def coprime_residues(modulus: int) -> list[int]:
    """Residues r in [0, modulus) with gcd(r, modulus) == 1.

    Raises:
        ValueError: If modulus is less than 2.
    """
    _check_modulus(modulus)
    return [r for r in range(modulus) if gcd(r, modulus) == 1]
