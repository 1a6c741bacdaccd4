"""Command-line interface for the birdly practice engine."""

from birdly_engine.cli.main import app, main

__all__ = ["app", "main"]
