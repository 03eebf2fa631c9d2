"""Command registration utilities for the Chronicle CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from chronicle.cli.commands import featured, hero, youtube
from chronicle.cli.context import ServiceContainer


def register_commands(app: typer.Typer, console: Console, services: ServiceContainer) -> None:
    """Attach command groups to the provided Typer application."""

    youtube.register(app, console)
    hero.register(app, console, services)
    featured.register(app, console, services)

    @app.callback(invoke_without_command=True)
    def main_callback(ctx: typer.Context) -> None:
        """Curate hero media and featured content for the Chronicle homepage."""

        if ctx.invoked_subcommand is None:
            console.print("[bold green]Chronicle CLI ready for commands.[/bold green]")


__all__ = ["register_commands"]
