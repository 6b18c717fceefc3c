"""Command line entry points."""

from .main import app, main_cli

__all__ = ["app", "main_cli"]
