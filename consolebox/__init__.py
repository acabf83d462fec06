"""Interactive console programs: number guessing, a scientific calculator and school records."""

__version__ = "0.1.0"