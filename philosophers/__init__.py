"""Dining philosophers simulation using threads and locks, with a command-line entry point."""

__version__ = "1.0.0"