"""Outbreak Survivor: a turn-based zombie survival simulation."""

__version__ = "0.1.0"
