"""Explorer configuration.

Settings may come from a JSON file; command-line options override them.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

from prime_explorer.core.sieve import DEFAULT_MAX_LIMIT


@dataclass
class ExplorerConfig:
    """Generation settings for one explorer session.

    Attributes:
        count: Number of primes to generate.
        modulus: Modulus for residue sequences.
        max_limit: Largest bound the sieve may grow to.
    """
    count: int = 1000
    modulus: int = 6
    max_limit: int = DEFAULT_MAX_LIMIT

    def validate(self) -> "ExplorerConfig":
        """Check field ranges.

        Raises:
            ValueError: If a field is out of range.
        """
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.modulus < 2:
            raise ValueError(f"modulus must be >= 2, got {self.modulus}")
        if self.max_limit < 2:
            raise ValueError(f"max_limit must be >= 2, got {self.max_limit}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ExplorerConfig":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


def load_config(path: str | Path) -> ExplorerConfig:
    """Load and validate a configuration file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ExplorerConfig.from_dict(data).validate()


def save_config(config: ExplorerConfig, path: str | Path) -> Path:
    """Write configuration as JSON and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
