"""Quick start example for prime_explorer.

Run this script to generate a sample dataset and test the installation.
"""

from pathlib import Path


def main():
    print("Prime Explorer - Quick Start Demo")
    print("=" * 50)

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    print("\n1. Generating the first 10,000 primes...")
    import time
    from prime_explorer.core.sieve import first_n_primes, sieve_up_to

    start = time.perf_counter()
    primes = first_n_primes(10_000)
    elapsed = time.perf_counter() - start

    print(f"   Generated {len(primes):,} primes in {elapsed:.3f}s")
    print(f"   First 10: {primes[:10].tolist()}")
    print(f"   Last 10: {primes[-10:].tolist()}")

    print("\n2. Sieving primes up to 10M...")
    start = time.perf_counter()
    bulk = sieve_up_to(10_000_000)
    elapsed = time.perf_counter() - start
    print(f"   Found {len(bulk):,} primes in {elapsed:.3f}s")

    print("\n3. Prime gaps and record gaps...")
    from prime_explorer.analysis.gaps import gap_histogram, maximal_gaps, prime_gaps

    gaps = prime_gaps(primes)
    histogram = gap_histogram(gaps)
    for gap in (2, 4, 6):
        print(f"   Gap {gap}: {histogram.get(gap, 0):,} pairs")
    for prime, gap in maximal_gaps(primes)[-3:]:
        print(f"   Record gap {gap} after {prime:,}")

    print("\n4. Factorizations...")
    from prime_explorer.analysis.factorization import prime_factorization

    for n in (60, 360, 9_999_991, 2 ** 20 - 1):
        print(f"   {n:,} = {' x '.join(str(p) for p in prime_factorization(n))}")

    print("\n5. Residue classes mod 10...")
    from prime_explorer.analysis.residues import residue_class_counts

    counts = residue_class_counts(primes, 10)
    for r, c in enumerate(counts):
        if c:
            print(f"   last digit {r}: {c:,}")

    print("\n6. Exporting dataset for the explorer...")
    from prime_explorer.dataset import build_dataset

    path = build_dataset(1000, modulus=6).save_json(output_dir / "primes.json")
    print(f"   Saved to {path}")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'prime-explorer --help' to see CLI options")
    print("  - Try 'prime-explorer residues -n 100000 -m 30'")


if __name__ == "__main__":
    main()
