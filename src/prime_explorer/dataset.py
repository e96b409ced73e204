"""Prime data bundles handed to the presentation layer.

A dataset holds the first ``count`` primes together with the sequences the
explorer views draw from them: consecutive gaps for the gap plot and
residues for the modular grid. ``to_dict`` keeps only plain integer lists,
so any renderer can consume the JSON without knowing about NumPy.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import numpy as np

from prime_explorer.analysis.gaps import prime_gaps
from prime_explorer.analysis.residues import residue_class_counts, residues
from prime_explorer.config import ExplorerConfig
from prime_explorer.core.sieve import DEFAULT_MAX_LIMIT, first_n_primes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PrimeDataset:
    """First primes plus derived sequences.

    The arrays are read-only views; equality and hashing are by identity.

    Attributes:
        modulus: Modulus used for residues.
        primes: Ascending primes.
        gaps: Consecutive differences of primes.
        residues: primes % modulus.
    """
    modulus: int
    primes: np.ndarray
    gaps: np.ndarray
    residues: np.ndarray

    def __post_init__(self):
        for name in ("primes", "gaps", "residues"):
            view = np.asarray(getattr(self, name), dtype=np.int64).view()
            view.setflags(write=False)
            object.__setattr__(self, name, view)

    @property
    def count(self) -> int:
        return len(self.primes)

    def residue_counts(self) -> np.ndarray:
        return residue_class_counts(self.primes, self.modulus)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "modulus": self.modulus,
            "primes": self.primes.tolist(),
            "gaps": self.gaps.tolist(),
            "residues": self.residues.tolist(),
            "residue_counts": self.residue_counts().tolist(),
        }

    def save_json(self, path: str | Path) -> Path:
        """Write the dataset as JSON, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f)
        logger.info("Saved %d primes to %s", self.count, path)
        return path


def build_dataset(
    count: int,
    modulus: int = 6,
    max_limit: int = DEFAULT_MAX_LIMIT,
) -> PrimeDataset:
    """Generate the first count primes and their derived sequences.

    Raises:
        ValueError: If modulus is less than 2.
        SieveLimitError: If count primes do not fit below max_limit.
    """
    if modulus < 2:
        raise ValueError(f"modulus must be >= 2, got {modulus}")

    primes = first_n_primes(count, max_limit=max_limit)
    return PrimeDataset(
        modulus=modulus,
        primes=primes,
        gaps=prime_gaps(primes),
        residues=residues(primes, modulus),
    )


def dataset_from_config(config: ExplorerConfig) -> PrimeDataset:
    config.validate()
    return build_dataset(config.count, config.modulus, config.max_limit)
