"""Command-line interface package for Chronicle."""

from rich.console import Console

from chronicle.cli.main import CLIApplication, create_app

console = Console()

__all__ = ["CLIApplication", "console", "create_app"]
