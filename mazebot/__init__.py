"""Mazebot — a turn-based maze sandbox for scripted agents."""

__version__ = "0.1.0"
