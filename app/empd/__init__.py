"""empd - check whether a path is empty, and optionally delete it."""

__version__ = "0.1.0"
