"""Prime factorization by trial division."""

from __future__ import annotations


def prime_factorization(n: int) -> list[int]:
    """Prime factors of n with multiplicity, ascending.

    Divides out 2, then odd candidates while candidate**2 <= the remaining
    value. Whatever is left above 1 is prime.

    Args:
        n: Integer to factor.

    Returns:
        Ascending prime factors whose product is n; empty for n < 2.
    """
    n = int(n)
    factors = []
    if n < 2:
        return factors

    while n % 2 == 0:
        factors.append(2)
        n //= 2

    i = 3
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 2

    if n > 1:
        factors.append(n)

    return factors


def factor_exponents(n: int) -> dict[int, int]:
    """Map each prime dividing n to its exponent, e.g. 60 -> {2: 2, 3: 1, 5: 1}."""
    exponents: dict[int, int] = {}
    for p in prime_factorization(n):
        exponents[p] = exponents.get(p, 0) + 1
    return exponents


def distinct_prime_factors(n: int) -> list[int]:
    """Distinct primes dividing n, ascending."""
    return list(factor_exponents(n))
