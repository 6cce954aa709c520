"""Command-line interface for nibver."""

from .main import app

__all__ = ["app"]
