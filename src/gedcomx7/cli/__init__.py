"""
CLI package for gedcomx7.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcomx7.cli.app import app, main

__all__ = [
    "app",
    "main",
]
