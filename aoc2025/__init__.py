"""Solvers for the Secret Entrance and Gift Shop puzzles."""

__version__ = "0.1.0"
