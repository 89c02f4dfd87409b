"""Optimal sliding puzzle solver (dual-queue A*)."""

__version__ = "0.1.0"
