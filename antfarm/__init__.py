"""Solver for the ant farm puzzle: find paths from start to end and schedule the ants."""

__version__ = "1.0.0"