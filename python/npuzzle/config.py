"""Solver settings and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent.parent  # python/
PROJECT_ROOT = ROOT.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"


@dataclass(frozen=True)
class SolverConfig:
    """Knobs for a single solver run.

    ``max_nodes`` caps the nodes inserted across both queues (``None``
    means unbounded). ``closed_set`` skips boards already expanded on
    the same side; move counts stay optimal because Manhattan distance
    is consistent.
    """

    max_nodes: int | None = None
    closed_set: bool = False

    def __post_init__(self) -> None:
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {self.max_nodes}.")


def configure_logging(verbose: bool = False) -> None:
    """Route package logs through Rich; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
