"""Low-level shared utilities for r3dy."""

from .logging import get_logger, setup_logging, R3dyLogger

__all__ = [
    "get_logger",
    "setup_logging",
    "R3dyLogger",
]
