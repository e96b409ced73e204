"""Utility modules for prime_explorer."""

from prime_explorer.utils.log import setup_logger

__all__ = [
    "setup_logger",
]
