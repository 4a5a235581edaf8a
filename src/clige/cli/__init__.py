"""Command line interface for clige."""

from clige.cli.app import create_app
from clige.cli.main import main

__all__ = ["create_app", "main"]
