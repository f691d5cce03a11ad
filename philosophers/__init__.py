"""Dining philosophers simulation with threads, forks and a monitor."""

__version__ = "0.1.0"
__all__ = ["__version__"]