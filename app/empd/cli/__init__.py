"""CLI package for empd.

This package contains the Typer application and the console reporter.
"""

from empd.cli.main import app

__all__ = ["app"]
