"""Command-line interface for prime_explorer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from prime_explorer.config import ExplorerConfig, load_config
from prime_explorer.core.sieve import SieveLimitError
from prime_explorer.utils.log import setup_logger

logger = logging.getLogger("prime_explorer")


def _resolve_config(args: argparse.Namespace) -> ExplorerConfig:
    """Defaults, then --config file, then explicit command-line options."""
    config = load_config(args.config) if args.config else ExplorerConfig()
    for field in ("count", "modulus", "max_limit"):
        value = getattr(args, field, None)
        if value is not None:
            setattr(config, field, value)
    return config.validate()


def _emit(values: list, as_json: bool) -> None:
    if as_json:
        print(json.dumps(values))
    else:
        print(" ".join(str(v) for v in values))


def cmd_primes(args: argparse.Namespace) -> int:
    """Print primes by count or up to a bound."""
    from prime_explorer.core.sieve import first_n_primes, sieve_up_to

    config = _resolve_config(args)
    if args.limit is not None:
        if args.limit > config.max_limit:
            raise ValueError(
                f"limit must be <= max_limit={config.max_limit}, got {args.limit}"
            )
        logger.debug("Sieving primes up to %d", args.limit)
        primes = sieve_up_to(args.limit)
    else:
        logger.debug("Generating first %d primes", config.count)
        primes = first_n_primes(config.count, max_limit=config.max_limit)

    _emit(primes.tolist(), args.json)
    return 0


def cmd_gaps(args: argparse.Namespace) -> int:
    """Print gaps between consecutive primes."""
    from prime_explorer.core.sieve import first_n_primes
    from prime_explorer.analysis.gaps import gap_histogram, maximal_gaps, prime_gaps

    config = _resolve_config(args)
    primes = first_n_primes(config.count, max_limit=config.max_limit)
    gaps = prime_gaps(primes)

    if args.histogram:
        histogram = gap_histogram(gaps)
        if args.json:
            print(json.dumps({str(k): v for k, v in histogram.items()}))
        else:
            print(f"{'Gap':>6} {'Count':>8}")
            for gap, count in histogram.items():
                print(f"{gap:>6} {count:>8}")
    elif args.records:
        records = maximal_gaps(primes)
        if args.json:
            print(json.dumps([list(r) for r in records]))
        else:
            print(f"{'Prime':>12} {'Gap':>6}")
            for prime, gap in records:
                print(f"{prime:>12} {gap:>6}")
    else:
        _emit(gaps.tolist(), args.json)

    return 0


def cmd_factor(args: argparse.Namespace) -> int:
    """Print prime factorizations."""
    from prime_explorer.analysis.factorization import prime_factorization

    results = {n: prime_factorization(n) for n in args.numbers}

    if args.json:
        print(json.dumps({str(n): f for n, f in results.items()}))
    else:
        for n, factors in results.items():
            shown = " x ".join(str(p) for p in factors) if factors else "-"
            print(f"{n} = {shown}")

    return 0


def cmd_isprime(args: argparse.Namespace) -> int:
    """Print primality of each number."""
    from prime_explorer.core.sieve import is_prime

    results = {n: is_prime(n) for n in args.numbers}

    if args.json:
        print(json.dumps({str(n): flag for n, flag in results.items()}))
    else:
        for n, flag in results.items():
            print(f"{n}: {'prime' if flag else 'composite'}")

    return 0


def cmd_residues(args: argparse.Namespace) -> int:
    """Print how the first primes spread over residue classes."""
    from prime_explorer.core.sieve import first_n_primes
    from prime_explorer.analysis.residues import coprime_residues, residue_class_counts

    config = _resolve_config(args)
    primes = first_n_primes(config.count, max_limit=config.max_limit)
    counts = residue_class_counts(primes, config.modulus)

    if args.json:
        print(json.dumps({
            "modulus": config.modulus,
            "counts": counts.tolist(),
            "coprime": coprime_residues(config.modulus),
        }))
        return 0

    total = max(int(counts.sum()), 1)
    coprime = set(coprime_residues(config.modulus))
    print(f"First {len(primes)} primes mod {config.modulus}:")
    print(f"{'Residue':>8} {'Primes':>8} {'Share':>8}")
    for r, c in enumerate(counts):
        marker = "*" if r in coprime else ""
        print(f"{r:>8} {int(c):>8} {c / total * 100:>7.1f}% {marker}")

    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Write primes and derived sequences as JSON."""
    from prime_explorer.dataset import dataset_from_config

    config = _resolve_config(args)
    logger.info("Building dataset: count=%d, modulus=%d", config.count, config.modulus)

    dataset = dataset_from_config(config)
    output = dataset.save_json(Path(args.output))

    logger.info("Saved to %s", output)
    return 0


def _add_count_options(parser: argparse.ArgumentParser, group=None) -> None:
    (group or parser).add_argument("--count", "-n", type=int, default=None, help="Number of primes")
    parser.add_argument("--max-limit", type=int, default=None, help="Largest sieve bound")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-explorer",
        description="Prime generation and derived sequences for the prime explorer",
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--log-file", default=None, help="Also log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    primes_parser = subparsers.add_parser("primes", help="Generate primes")
    source_group = primes_parser.add_mutually_exclusive_group()
    _add_count_options(primes_parser, source_group)
    source_group.add_argument("--limit", type=int, default=None,
                              help="Generate all primes <= limit instead of by count")
    primes_parser.add_argument("--json", action="store_true", help="JSON output")

    gaps_parser = subparsers.add_parser("gaps", help="Gaps between consecutive primes")
    _add_count_options(gaps_parser)
    gaps_group = gaps_parser.add_mutually_exclusive_group()
    gaps_group.add_argument("--histogram", action="store_true", help="Count each gap size")
    gaps_group.add_argument("--records", action="store_true", help="Show record gaps")
    gaps_parser.add_argument("--json", action="store_true", help="JSON output")

    factor_parser = subparsers.add_parser("factor", help="Prime factorization")
    factor_parser.add_argument("numbers", type=int, nargs="+", help="Integers to factor")
    factor_parser.add_argument("--json", action="store_true", help="JSON output")

    isprime_parser = subparsers.add_parser("isprime", help="Primality test")
    isprime_parser.add_argument("numbers", type=int, nargs="+", help="Integers to test")
    isprime_parser.add_argument("--json", action="store_true", help="JSON output")

    residues_parser = subparsers.add_parser("residues", help="Residue class counts")
    _add_count_options(residues_parser)
    residues_parser.add_argument("--modulus", "-m", type=int, default=None, help="Modulus")
    residues_parser.add_argument("--json", action="store_true", help="JSON output")

    export_parser = subparsers.add_parser("export", help="Export dataset as JSON")
    _add_count_options(export_parser)
    export_parser.add_argument("--modulus", "-m", type=int, default=None, help="Modulus")
    export_parser.add_argument("--output", "-o", default="primes.json", help="Output file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger(
        log_path=Path(args.log_file) if args.log_file else None,
        verbose=args.verbose,
    )

    commands = {
        "primes": cmd_primes,
        "gaps": cmd_gaps,
        "factor": cmd_factor,
        "isprime": cmd_isprime,
        "residues": cmd_residues,
        "export": cmd_export,
    }

    try:
        return commands[args.command](args)
    except (OSError, ValueError, SieveLimitError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
