"""CLI entry point and application wiring."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from chronicle.cli.commands import register_commands
from chronicle.cli.context import ServiceContainer


class CLIApplication:
    """Central orchestrator for the Chronicle Typer application."""

    def __init__(self, console: Optional[Console] = None, services: Optional[ServiceContainer] = None) -> None:
        self.console = console or Console()
        self.services = services or ServiceContainer(self.console)
        self._app = typer.Typer(add_completion=False, rich_markup_mode="rich")
        register_commands(self._app, self.console, self.services)

    @property
    def app(self) -> typer.Typer:
        """Return the underlying Typer application instance."""

        return self._app

    def run(self, *, prog_name: Optional[str] = None, args: Optional[list[str]] = None) -> None:
        """Invoke the Typer application, releasing pooled resources afterwards."""

        try:
            self._app(prog_name=prog_name, args=args)
        finally:
            self.services.close()


def create_app(console: Optional[Console] = None, services: Optional[ServiceContainer] = None) -> typer.Typer:
    """Factory helper that returns the configured Typer application."""

    return CLIApplication(console=console, services=services).app


def main() -> None:
    """Console script entry point for `python -m chronicle` or the installed CLI."""

    CLIApplication().run(prog_name="chronicle")


__all__ = ["CLIApplication", "create_app", "main"]
